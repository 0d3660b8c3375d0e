from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By
from loguru import logger

from pages.base_page import BasePage

SUCCESS_MESSAGE = "Your registration completed"


class RegisterPage(BasePage):
    GENDER_MALE_RADIO = (By.ID, "gender-male")
    FIRST_NAME_INPUT = (By.ID, "FirstName")
    LAST_NAME_INPUT = (By.ID, "LastName")
    DAY_DROPDOWN = (By.NAME, "DateOfBirthDay")
    MONTH_DROPDOWN = (By.NAME, "DateOfBirthMonth")
    YEAR_DROPDOWN = (By.NAME, "DateOfBirthYear")
    EMAIL_INPUT = (By.ID, "Email")
    COMPANY_INPUT = (By.ID, "Company")
    PASSWORD_INPUT = (By.ID, "Password")
    CONFIRM_PASSWORD_INPUT = (By.ID, "ConfirmPassword")
    REGISTER_BUTTON = (By.ID, "register-button")
    REGISTRATION_RESULT = (By.CLASS_NAME, "result")
    CONTINUE_BUTTON = (By.XPATH, "//a[normalize-space()='Continue']")

    def select_gender_male(self):
        self.click(self.GENDER_MALE_RADIO, "Gender male radio button")

    def enter_first_name(self, first_name: str):
        self.type(self.FIRST_NAME_INPUT, first_name, "First name field")

    def enter_last_name(self, last_name: str):
        self.type(self.LAST_NAME_INPUT, last_name, "Last name field")

    def select_date_of_birth(self, day: str, month: str, year: str):
        try:
            self.scroll_to(self.DAY_DROPDOWN)
            self.select_by_value(self.DAY_DROPDOWN, day)
            self.select_by_value(self.MONTH_DROPDOWN, month)
            self.select_by_value(self.YEAR_DROPDOWN, year)
            logger.info(f"Date of birth selected: {day}/{month}/{year}")
        except WebDriverException as e:
            logger.warning(f"Standard date selection failed, using JavaScript fallback: {e}")
            self._select_date_of_birth_with_javascript(day, month, year)

    def _select_date_of_birth_with_javascript(self, day: str, month: str, year: str):
        for name, value in (("DateOfBirthDay", day), ("DateOfBirthMonth", month), ("DateOfBirthYear", year)):
            self.execute_script(f"document.getElementsByName('{name}')[0].value = arguments[0];", value)
        logger.info(f"Date of birth selected using JavaScript: {day}/{month}/{year}")

    def enter_email(self, email: str):
        self.type(self.EMAIL_INPUT, email, "Email field")

    def enter_company(self, company: str):
        self.type(self.COMPANY_INPUT, company, "Company field")

    def enter_password(self, password: str):
        self.type(self.PASSWORD_INPUT, password, "Password field")

    def enter_confirm_password(self, password: str):
        self.type(self.CONFIRM_PASSWORD_INPUT, password, "Confirm password field")

    def click_register_button(self):
        self.click(self.REGISTER_BUTTON, "Register button")

    def get_registration_result(self) -> str:
        return self.get_text(self.REGISTRATION_RESULT, "Registration result")

    def is_registration_successful(self) -> bool:
        logger.info("Verifying registration success")
        return SUCCESS_MESSAGE in self.get_registration_result()

    def click_continue(self):
        from pages.home_page import HomePage

        logger.info("Clicking Continue to return to the home page")
        self.click(self.CONTINUE_BUTTON, "Continue button")
        return HomePage(self.driver, self.timeout, self.screenshot_manager)

    def register_user(self, first_name: str, last_name: str, email: str, password: str):
        self.select_gender_male()
        self.enter_first_name(first_name)
        self.enter_last_name(last_name)
        self.enter_email(email)
        self.enter_password(password)
        self.enter_confirm_password(password)
        self.click_register_button()

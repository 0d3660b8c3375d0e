from selenium.webdriver.common.by import By
from loguru import logger

from pages.base_page import BasePage


class LoginPage(BasePage):
    PATH = "login"
    EMAIL_INPUT = (By.ID, "Email")
    PASSWORD_INPUT = (By.ID, "Password")
    LOGIN_BUTTON = (By.XPATH, "//button[normalize-space()='Log in']")
    ERROR_MESSAGE = (By.XPATH, "//div[contains(@class, 'message-error')]")

    def enter_email(self, email: str):
        self.type(self.EMAIL_INPUT, email, "Email field")

    def enter_password(self, password: str):
        self.type(self.PASSWORD_INPUT, password, "Password field")

    def click_login(self):
        from pages.home_page import HomePage

        self.click(self.LOGIN_BUTTON, "Login button")
        logger.info("Clicked on Login button")
        return HomePage(self.driver, self.timeout, self.screenshot_manager)

    def login(self, email: str, password: str):
        self.enter_email(email)
        self.enter_password(password)
        return self.click_login()

    def is_error_message_displayed(self) -> bool:
        return self.is_displayed(self.ERROR_MESSAGE, "Login error message")

    def get_error_message(self) -> str:
        error_text = self.get_text(self.ERROR_MESSAGE, "Login error message")
        logger.error(f"Login error message: {error_text}")
        return error_text

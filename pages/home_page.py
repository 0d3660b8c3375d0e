from selenium.webdriver.common.by import By
from loguru import logger

from pages.account_page import AccountPage
from pages.base_page import BasePage
from pages.login_page import LoginPage
from pages.register_page import RegisterPage
from pages.search_results_page import SearchResultsPage
from pages.shopping_cart_page import ShoppingCartPage


class HomePage(BasePage):
    REGISTER_LINK = (By.LINK_TEXT, "Register")
    LOGIN_LINK = (By.LINK_TEXT, "Log in")
    LOGOUT_LINK = (By.LINK_TEXT, "Log out")
    MY_ACCOUNT_LINK = (By.CLASS_NAME, "ico-account")
    SEARCH_BOX = (By.ID, "small-searchterms")
    SEARCH_BUTTON = (By.XPATH, "//button[@type='submit' and normalize-space()='Search']")
    SHOPPING_CART_LINK = (By.CLASS_NAME, "ico-cart")
    LOGO = (By.XPATH, "//div[@class='header-logo']//a")

    def _next(self, page_class):
        return page_class(self.driver, self.timeout, self.screenshot_manager)

    def click_register_link(self) -> RegisterPage:
        self.click(self.REGISTER_LINK, "Register link")
        return self._next(RegisterPage)

    def click_login_link(self) -> LoginPage:
        self.click(self.LOGIN_LINK, "Login link")
        return self._next(LoginPage)

    def click_logout_link(self):
        self.click(self.LOGOUT_LINK, "Logout link")

    def is_user_logged_in(self) -> bool:
        return self.is_displayed(self.LOGOUT_LINK, "Logout link", timeout=3)

    def search_product(self, search_term: str) -> SearchResultsPage:
        logger.info(f"Searching for: {search_term}")
        self.type(self.SEARCH_BOX, search_term, "Search box")
        self.click(self.SEARCH_BUTTON, "Search button")
        return self._next(SearchResultsPage)

    def click_shopping_cart(self) -> ShoppingCartPage:
        self.click(self.SHOPPING_CART_LINK, "Shopping cart link")
        return self._next(ShoppingCartPage)

    def click_my_account(self) -> AccountPage:
        self.click(self.MY_ACCOUNT_LINK, "My account link")
        return self._next(AccountPage)

    def is_logo_displayed(self) -> bool:
        return self.is_displayed(self.LOGO, "Logo")

from selenium.webdriver.common.by import By

from pages.base_page import BasePage


class ShoppingCartPage(BasePage):
    PAGE_TITLE = (By.XPATH, "//div[@class='page-title']//h1")
    EMPTY_CART_MESSAGE = (By.XPATH, "//div[@class='no-data' or normalize-space()='Your Shopping Cart is empty!']")

    def is_shopping_cart_page_displayed(self) -> bool:
        return self.is_displayed(self.PAGE_TITLE, "Shopping cart title")

    def is_cart_empty(self) -> bool:
        return self.is_displayed(self.EMPTY_CART_MESSAGE, "Empty cart message", timeout=3)

    def get_cart_page_title(self) -> str:
        return self.get_text(self.PAGE_TITLE, "Shopping cart title")

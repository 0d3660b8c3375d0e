from selenium.webdriver.common.by import By

from pages.base_page import BasePage


class AccountPage(BasePage):
    PAGE_TITLE = (By.XPATH, "//div[@class='page-title']//h1")
    CUSTOMER_INFO_LINK = (By.LINK_TEXT, "Customer info")
    ADDRESSES_LINK = (By.LINK_TEXT, "Addresses")
    ORDERS_LINK = (By.LINK_TEXT, "Orders")

    def is_account_page_displayed(self) -> bool:
        return self.is_displayed(self.PAGE_TITLE, "Account page title")

    def get_account_page_title(self) -> str:
        return self.get_text(self.PAGE_TITLE, "Account page title")

    def click_customer_info(self):
        self.click(self.CUSTOMER_INFO_LINK, "Customer info link")

    def click_addresses(self):
        self.click(self.ADDRESSES_LINK, "Addresses link")

    def click_orders(self):
        self.click(self.ORDERS_LINK, "Orders link")

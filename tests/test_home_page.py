import sys
import os
import unittest

current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '..'))

sys.path.insert(0, project_root)

from pages.home_page import HomePage
from suites.browser_case import BrowserTestCase, requires_browser


@requires_browser
class TestHomePage(BrowserTestCase):

    def setUp(self):
        super().setUp()
        self.home_page = HomePage(self.driver, self.settings.explicit_wait, self.screenshot_manager)

    def test_logo_displayed(self):
        report = self.start_trial(self.id(), "Home page shows the store logo")

        displayed = self.home_page.is_logo_displayed()
        if not displayed:
            report.fail("Logo is not displayed", self.screenshot_manager.capture(self._testMethodName))
        else:
            report.pass_("Logo is displayed")
        self.assertTrue(displayed)

    def test_user_not_logged_in_by_default(self):
        self.assertFalse(self.home_page.is_user_logged_in())

    def test_shopping_cart_is_empty(self):
        report = self.start_trial(self.id(), "Fresh session has an empty cart")

        cart = self.home_page.click_shopping_cart()

        self.assertTrue(cart.is_shopping_cart_page_displayed())
        self.assertTrue(cart.is_cart_empty())
        report.pass_("Shopping cart is empty")


if __name__ == '__main__':
    unittest.main()

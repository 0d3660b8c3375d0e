from dataclasses import dataclass
from typing import Optional

from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from loguru import logger

from pages.base_page import BasePage
from testdata.models import navigation_path
from utils.exceptions import MenuNotFoundError, NavigationError


def xpath_literal(text: str) -> str:
    """Quote ``text`` for use inside an XPath expression."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a menu navigation: either the landing URL or the error."""

    succeeded: bool
    current_url: Optional[str] = None
    error: Optional[NavigationError] = None

    @classmethod
    def success(cls, current_url: str) -> "NavigationResult":
        return cls(succeeded=True, current_url=current_url)

    @classmethod
    def failure(cls, error: NavigationError) -> "NavigationResult":
        return cls(succeeded=False, error=error)

    @property
    def failed(self) -> bool:
        return not self.succeeded


class NavigationMenu(BasePage):
    MENU_XPATH = "//div[contains(concat(' ', normalize-space(@class), ' '), ' menu ') and @role='menu']"
    MENU_CONTAINER = (By.XPATH, MENU_XPATH)

    def main_menu_locator(self, main_menu: str) -> tuple:
        return (By.XPATH, f"{self.MENU_XPATH}//a[normalize-space()={xpath_literal(main_menu)}]")

    def sub_menu_locator(self, main_menu: str, sub_menu: str) -> tuple:
        return (
            By.XPATH,
            f"{self.MENU_XPATH}//div[@aria-label={xpath_literal(main_menu)}]"
            f"//a[normalize-space()={xpath_literal(sub_menu)}]",
        )

    def _failure(self, error: NavigationError, screenshot_name: str) -> NavigationResult:
        if self.screenshot_manager:
            self.screenshot_manager.capture(screenshot_name)
        return NavigationResult.failure(error)

    def navigate_to(self, main_menu: str, sub_menu: Optional[str] = None) -> NavigationResult:
        """Hover the main menu item, then click the submenu item (or the main item).

        A menu item that is missing, or never becomes visible/clickable within
        the wait, yields a failed result carrying MenuNotFoundError. A page
        without the menu bar yields a plain NavigationError instead. Any other
        WebDriver error propagates.
        """
        path = navigation_path(main_menu, sub_menu)
        try:
            self.wait().until(EC.presence_of_element_located(self.MENU_CONTAINER))
        except TimeoutException:
            logger.error(f"Navigation menu not rendered on {self.current_location()}")
            return self._failure(NavigationError("Navigation menu not rendered"), "menu_missing")

        try:
            main_item = self.wait().until(EC.visibility_of_element_located(self.main_menu_locator(main_menu)))
            self.hover(main_item)
            logger.info(f"Hovered over main menu: {main_menu}")

            if sub_menu:
                self.wait().until(EC.element_to_be_clickable(self.sub_menu_locator(main_menu, sub_menu))).click()
                logger.info(f"Clicked submenu: {sub_menu}")
            else:
                main_item.click()
                logger.info(f"Clicked main menu: {main_menu}")
        except (NoSuchElementException, TimeoutException) as e:
            logger.error(f"Menu item not found: {path} ({type(e).__name__})")
            return self._failure(MenuNotFoundError(main_menu, sub_menu), f"menu_not_found_{path}")

        return NavigationResult.success(self.current_location())

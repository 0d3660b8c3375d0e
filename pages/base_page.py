from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait
from loguru import logger

from utils.screenshot import ScreenshotManager

DEFAULT_TIMEOUT = 10


class BasePage:
    """Shared explicit-wait helpers for page objects.

    Locators are ``(By.<strategy>, value)`` tuples declared as class attributes
    on each page.
    """

    def __init__(self, driver, timeout: float = DEFAULT_TIMEOUT, screenshot_manager: ScreenshotManager | None = None):
        self.driver = driver
        self.timeout = timeout
        self.screenshot_manager = screenshot_manager

    def wait(self, timeout: float | None = None) -> WebDriverWait:
        return WebDriverWait(self.driver, self.timeout if timeout is None else timeout)

    def open(self, url: str):
        logger.debug(f"Opening {url}")
        self.driver.get(url)

    def title(self) -> str:
        return self.driver.title

    def current_location(self) -> str:
        return self.driver.current_url

    def find(self, locator: tuple):
        return self.wait().until(EC.visibility_of_element_located(locator))

    def click(self, locator: tuple, name: str = ""):
        element = self.wait().until(EC.element_to_be_clickable(locator))
        element.click()
        logger.debug(f"Clicked {name or locator}")

    def type(self, locator: tuple, text: str, name: str = ""):
        field = self.find(locator)
        field.clear()
        field.send_keys(text)
        logger.debug(f"Typed into {name or locator}")

    def get_text(self, locator: tuple, name: str = "") -> str:
        text = self.find(locator).text
        logger.debug(f"Text of {name or locator}: {text}")
        return text

    def is_displayed(self, locator: tuple, name: str = "", timeout: float | None = None) -> bool:
        try:
            self.wait(timeout).until(EC.visibility_of_element_located(locator))
            return True
        except TimeoutException:
            logger.debug(f"{name or locator} not displayed")
            return False

    def hover(self, element):
        ActionChains(self.driver).move_to_element(element).perform()

    def select_by_value(self, locator: tuple, value: str):
        Select(self.find(locator)).select_by_value(value)

    def scroll_to(self, locator: tuple):
        element = self.wait().until(EC.presence_of_element_located(locator))
        self.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)
        return element

    def execute_script(self, script: str, *args):
        return self.driver.execute_script(script, *args)

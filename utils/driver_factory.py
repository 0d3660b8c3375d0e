"""WebDriver creation for local browsers and a remote grid."""

from typing import Optional

from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import WebDriverException

from utils.config import Settings
from utils.exceptions import DriverError

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge", "safari")
WINDOW_SIZE = "1920,1080"
CHROMIUM_HEADLESS_ARGS = (
    "--headless=new",
    "--no-sandbox",
    "--disable-dev-shm-usage",
    f"--window-size={WINDOW_SIZE}",
)


def _normalize_browser(browser: str) -> str:
    name = browser.strip().lower()
    return "edge" if name == "msedge" else name


def build_options(browser: str, headless: bool = False):
    """Return the selenium Options object for ``browser``.

    Raises:
        DriverError: if the browser is not supported
    """
    name = _normalize_browser(browser)

    if name == "chrome":
        options = webdriver.ChromeOptions()
    elif name == "edge":
        options = webdriver.EdgeOptions()
    elif name == "firefox":
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        return options
    elif name == "safari":
        if headless:
            logger.warning("Safari does not support headless mode, ignoring")
        return webdriver.SafariOptions()
    else:
        raise DriverError(f"Unsupported browser: {browser}. Supported browsers: {', '.join(SUPPORTED_BROWSERS)}")

    options.add_argument("--disable-notifications")
    if headless:
        for argument in CHROMIUM_HEADLESS_ARGS:
            options.add_argument(argument)
    return options


def remote_hub_url(settings: Settings) -> str:
    """Hub URL with the grid credentials embedded.

    Raises:
        DriverError: if the credentials are not configured
    """
    if not settings.lt_username or not settings.lt_access_key:
        raise DriverError(
            "Remote grid credentials not configured. Set LT_USERNAME and LT_ACCESS_KEY "
            "(environment or .env.local), or run locally with EXECUTION_PLATFORM=LOCAL."
        )
    host = settings.remote_hub_url.removeprefix("https://").removeprefix("http://")
    return f"https://{settings.lt_username}:{settings.lt_access_key}@{host}"


def _create_local_driver(browser: str, options):
    if browser == "chrome":
        return webdriver.Chrome(options=options)
    if browser == "firefox":
        return webdriver.Firefox(options=options)
    if browser == "edge":
        return webdriver.Edge(options=options)
    return webdriver.Safari(options=options)


def configure_driver(driver, settings: Settings) -> None:
    driver.implicitly_wait(settings.implicit_wait)
    driver.set_page_load_timeout(settings.page_load_timeout)
    driver.set_script_timeout(settings.script_timeout)
    logger.debug(
        f"Timeouts configured: implicit={settings.implicit_wait}s, "
        f"page_load={settings.page_load_timeout}s, script={settings.script_timeout}s"
    )

    if settings.is_remote or settings.headless:
        logger.debug("Window configuration skipped (remote or headless mode)")
    else:
        driver.maximize_window()


def create_driver(settings: Settings, browser: Optional[str] = None):
    """Create and configure a WebDriver.

    Args:
        settings: Framework settings
        browser: Browser name overriding ``settings.browser``

    Returns:
        Configured WebDriver instance

    Raises:
        DriverError: if the driver cannot be created
    """
    name = _normalize_browser(browser or settings.browser)
    logger.info(f"Creating {name} driver for {settings.execution_platform} platform")

    options = build_options(name, settings.headless)
    try:
        if settings.is_remote:
            hub_url = remote_hub_url(settings)
            logger.info(f"Connecting to remote grid: {settings.remote_hub_url}")
            driver = webdriver.Remote(command_executor=hub_url, options=options)
        else:
            driver = _create_local_driver(name, options)
    except WebDriverException as e:
        logger.error(f"Failed to create {name} driver on {settings.execution_platform}: {e}")
        raise DriverError(f"Failed to create driver: {name} on {settings.execution_platform}") from e

    configure_driver(driver, settings)
    logger.info(f"{name} driver created successfully")
    return driver

"""unittest base class for suites that drive a real browser."""

import unittest

from loguru import logger

from pages.navigation_menu import NavigationMenu
from suites.navigation_suite import TrialVerdict, run_trial_for_row
from utils.config import get_settings, load_env_files
from utils.driver_factory import create_driver
from utils.report import SuiteReport, TrialReport
from utils.screenshot import ScreenshotManager

load_env_files()
SETTINGS = get_settings()


def requires_browser(cls):
    """Skip the decorated test class unless RUN_BROWSER_TESTS is enabled."""
    return unittest.skipUnless(
        SETTINGS.run_browser_tests, "browser tests disabled (set RUN_BROWSER_TESTS=true)"
    )(cls)


class BrowserTestCase(unittest.TestCase):
    """Opens a fresh browser on the site under test for every test method."""

    suite_report: SuiteReport

    @classmethod
    def setUpClass(cls):
        cls.settings = get_settings()
        cls.suite_report = SuiteReport(system_info={"Browser": cls.settings.browser, "Application": cls.settings.app_url})
        logger.info(f"Test Suite Started: {cls.__name__}")

    @classmethod
    def tearDownClass(cls):
        logger.info(f"Test Suite Finished: {cls.__name__}")
        cls.suite_report.write(cls.settings.reports_dir)

    def setUp(self):
        logger.info("=== Test Setup Started ===")
        self.driver = create_driver(self.settings)
        self.addCleanup(self._quit_driver)
        self.screenshot_manager = ScreenshotManager(self.driver, self.settings.artifacts_dir)
        self.driver.get(self.settings.app_url)
        logger.info(f"Navigated to application URL: {self.settings.app_url}")

    def _quit_driver(self):
        logger.info("Closing browser session")
        self.driver.quit()

    def start_trial(self, name: str, description: str = "") -> TrialReport:
        return self.suite_report.start_trial(name, description)

    def record_failure(self, report: TrialReport, test_name: str) -> str:
        screenshot_path = self.screenshot_manager.capture(test_name)
        report.attach_screenshot(screenshot_path)
        return screenshot_path

    def navigation_menu(self) -> NavigationMenu:
        return NavigationMenu(self.driver, self.settings.explicit_wait, self.screenshot_manager)

    def run_navigation_rows(self, rows, negative: bool = False):
        """Run each provider row as a subTest, reloading the home page between rows."""
        self.assertTrue(rows, "data provider returned no rows")
        for row in rows:
            description = row[-1]
            with self.subTest(description=description):
                self.driver.get(self.settings.app_url)
                report = self.start_trial(f"{self.id()} [{description}]", description)
                verdict: TrialVerdict = run_trial_for_row(self.navigation_menu(), row, report, negative)
                if not verdict.passed:
                    self.record_failure(report, f"{self._testMethodName}_{description}")
                self.assertTrue(verdict.passed, verdict.message)

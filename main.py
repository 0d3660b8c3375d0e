"""Run one navigation data variant against the demo store outside the test runner."""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from tqdm import tqdm

from pages.navigation_menu import NavigationMenu
from suites.navigation_suite import NEGATIVE_VARIANTS, PROVIDERS, run_trial_for_row
from utils.config import Settings, get_settings, load_env_files
from utils.driver_factory import create_driver
from utils.exceptions import AutomationError
from utils.log_cleanup import cleanup_old_runs
from utils.logging_setup import get_log_folder_path, setup_logging
from utils.report import SuiteReport
from utils.screenshot import ScreenshotManager

LOG_DAYS_TO_KEEP = 7


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--variant", choices=sorted(PROVIDERS), default="json", help="data provider to run")
    parser.add_argument("--browser", help="browser override (chrome, firefox, edge, safari)")
    parser.add_argument("--headless", action="store_true", help="run the browser headless")
    return parser.parse_args(argv)


def run_variant(settings: Settings, variant: str, browser: Optional[str] = None) -> SuiteReport:
    """Run every row of ``variant`` in a single browser session.

    Returns:
        The suite report holding one trial per row
    """
    rows = PROVIDERS[variant]()
    negative = variant in NEGATIVE_VARIANTS
    suite_report = SuiteReport(
        name=f"Navigation menu: {variant}",
        system_info={"Browser": browser or settings.browser, "Application": settings.app_url},
    )
    if not rows:
        logger.warning(f"No rows for variant {variant}, nothing to run")
        return suite_report

    driver = create_driver(settings, browser)
    screenshot_manager = ScreenshotManager(driver, settings.artifacts_dir)
    try:
        for row in tqdm(rows, desc=f"Navigation ({variant})"):
            description = row[-1]
            report = suite_report.start_trial(description, description)
            driver.get(settings.app_url)

            menu = NavigationMenu(driver, settings.explicit_wait, screenshot_manager)
            verdict = run_trial_for_row(menu, row, report, negative)
            if not verdict.passed:
                report.attach_screenshot(screenshot_manager.capture(description))
    finally:
        driver.quit()

    return suite_report


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    load_env_files()
    args = parse_args(argv)

    settings = get_settings()
    if args.headless:
        settings = settings.model_copy(update={"headless": True})

    setup_logging(get_log_folder_path(settings.logs_dir))
    cleanup_old_runs(settings.logs_dir, days_to_keep=LOG_DAYS_TO_KEEP)

    suite_report = run_variant(settings, args.variant, args.browser)
    suite_report.write(settings.reports_dir)

    summary = suite_report.summary()
    logger.info(f"Finished {args.variant}: {summary}")
    return 1 if suite_report.has_failures else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except AutomationError:
        logger.exception("Fatal error in main")
        sys.exit(2)

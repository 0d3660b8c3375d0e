"""Navigation trials: one parameter row in, one verdict out."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from testdata import providers
from testdata.models import navigation_path
from utils.exceptions import MenuNotFoundError
from utils.report import TrialReport

PROVIDERS: Dict[str, Callable[[], List[tuple]]] = {
    "json": providers.navigation_data_from_json,
    "csv": providers.navigation_data_from_csv,
    "main-menu": providers.main_menu_only_data,
    "submenu": providers.submenu_only_data,
    "computers": providers.computers_submenu_data,
    "electronics": providers.electronics_submenu_data,
    "apparel": providers.apparel_submenu_data,
    "negative": providers.invalid_navigation_data,
}
NEGATIVE_VARIANTS = {"negative"}


class Navigator(Protocol):
    def navigate_to(self, main_menu: str, sub_menu: Optional[str] = None): ...

    def current_location(self) -> str: ...


@dataclass(frozen=True)
class TrialVerdict:
    passed: bool
    message: str
    current_url: Optional[str] = None


def run_positive_trial(
    menu: Navigator,
    main_menu: str,
    sub_menu: Optional[str],
    expected_url: str,
    description: str,
    report: TrialReport,
) -> TrialVerdict:
    """Navigate and check that the resulting URL contains ``expected_url``."""
    path = navigation_path(main_menu, sub_menu)
    report.info(f"=== Test: {description} ===")
    report.info(f"Navigating to: {path}")

    result = menu.navigate_to(main_menu, sub_menu)
    if result.failed:
        message = f"Unexpected navigation failure for '{path}': {result.error}"
        report.fail(message)
        return TrialVerdict(False, message)

    current_url = menu.current_location()
    report.info(f"Current URL: {current_url}")
    if expected_url not in current_url:
        message = f"URL should contain '{expected_url}' for navigation '{path}' but was: {current_url}"
        report.fail(message)
        return TrialVerdict(False, message, current_url)

    message = f"Successfully navigated to {path}"
    report.pass_(message)
    return TrialVerdict(True, message, current_url)


def run_negative_trial(
    menu: Navigator,
    main_menu: str,
    sub_menu: Optional[str],
    description: str,
    report: TrialReport,
) -> TrialVerdict:
    """Navigate to a target that does not exist; only MenuNotFoundError passes."""
    path = navigation_path(main_menu, sub_menu)
    report.info(f"=== Negative Test: {description} ===")
    report.info(f"Attempting invalid navigation: {path}")

    result = menu.navigate_to(main_menu, sub_menu)
    if result.failed and isinstance(result.error, MenuNotFoundError):
        message = f"Navigation to '{path}' rejected as expected: {result.error}"
        report.pass_(message)
        return TrialVerdict(True, message)

    if result.failed:
        message = f"Navigation to '{path}' failed with an unexpected error: {result.error!r}"
        report.fail(message)
        return TrialVerdict(False, message)

    message = f"Navigation to '{path}' should have failed but landed on {result.current_url}"
    report.fail(message)
    return TrialVerdict(False, message, result.current_url)


def run_trial_for_row(menu: Navigator, row: tuple, report: TrialReport, negative: bool = False) -> TrialVerdict:
    """Dispatch a provider row to the positive or negative trial."""
    if negative:
        main_menu, sub_menu, description = row
        return run_negative_trial(menu, main_menu, sub_menu, description, report)
    main_menu, sub_menu, expected_url, description = row
    return run_positive_trial(menu, main_menu, sub_menu, expected_url, description, report)

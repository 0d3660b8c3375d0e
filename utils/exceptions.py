"""Exception hierarchy for the UI automation framework."""

from typing import Optional


class AutomationError(Exception):
    """Base exception for all framework errors."""


class TestDataError(AutomationError):
    """Test data could not be loaded."""

    __test__ = False

    def __init__(self, message: str, resource: str = ""):
        super().__init__(message)
        self.resource = resource


class ResourceNotFoundError(TestDataError):
    """The requested data resource does not exist."""


class MalformedDataError(TestDataError):
    """The data resource exists but could not be parsed or validated."""


class NavigationError(AutomationError):
    """Navigation through the site failed."""


class MenuNotFoundError(NavigationError):
    """The requested menu / submenu pair is not present in the top menu."""

    def __init__(self, main_menu: str, sub_menu: Optional[str] = None):
        self.main_menu = main_menu
        self.sub_menu = sub_menu
        target = f"{main_menu} / {sub_menu}" if sub_menu else main_menu
        super().__init__(f"Menu not found: {target}")


class DriverError(AutomationError):
    """WebDriver could not be created or configured."""


class ConfigurationError(AutomationError):
    """A configuration value is missing or invalid."""

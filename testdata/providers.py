"""Named data providers for the navigation-menu suites.

Each ``*_data`` function takes no arguments and returns the list of parameter
rows a data-driven test iterates over. Records are re-read from their resource
on every call.
"""

from typing import Iterable, List, Optional, Tuple

from loguru import logger

from testdata.models import NavigationRecord, NegativeNavigationRecord
from testdata.readers import read_csv_rows, read_json_as_rows, read_json_records

NAVIGATION_MENU_JSON = "navigation-menu-data.json"
NAVIGATION_MENU_CSV = "navigation-menu-data.csv"
NEGATIVE_TEST_JSON = "navigation-menu-negative-data.json"

COMPUTERS = "Computers"
ELECTRONICS = "Electronics"
APPAREL = "Apparel"

NavigationRow = Tuple[str, Optional[str], Optional[str], str]
NegativeRow = Tuple[str, Optional[str], str]


# Filters

def main_menu_only(records: Iterable[NavigationRecord]) -> List[NavigationRecord]:
    return [record for record in records if record.is_main_menu_only]


def submenu_only(records: Iterable[NavigationRecord]) -> List[NavigationRecord]:
    return [record for record in records if record.is_submenu]


def by_category(records: Iterable[NavigationRecord], category: str) -> List[NavigationRecord]:
    """Submenu records whose main menu equals ``category``, in source order."""
    return [record for record in submenu_only(records) if record.main_menu == category]


def to_rows(records: Iterable[NavigationRecord]) -> List[NavigationRow]:
    return [record.to_row() for record in records]


# Providers

def load_navigation_records() -> List[NavigationRecord]:
    return read_json_records(NAVIGATION_MENU_JSON, NavigationRecord)


def navigation_data_from_json() -> List[NavigationRow]:
    logger.info("Loading navigation menu test data from JSON")
    try:
        return read_json_as_rows(NAVIGATION_MENU_JSON, NavigationRecord, NavigationRecord.to_row)
    except Exception as e:
        logger.error(f"Failed to load navigation menu data from JSON: {e}")
        raise


def navigation_data_from_csv() -> List[NavigationRow]:
    logger.info("Loading navigation menu test data from CSV")
    try:
        return read_csv_rows(NAVIGATION_MENU_CSV)  # type: ignore[return-value]
    except Exception as e:
        logger.error(f"Failed to load navigation menu data from CSV: {e}")
        raise


def main_menu_only_data() -> List[NavigationRow]:
    logger.info("Loading main menu only test data from JSON")
    rows = to_rows(main_menu_only(load_navigation_records()))
    logger.info(f"Filtered {len(rows)} main menu only records")
    return rows


def submenu_only_data() -> List[NavigationRow]:
    logger.info("Loading submenu only test data from JSON")
    rows = to_rows(submenu_only(load_navigation_records()))
    logger.info(f"Filtered {len(rows)} submenu only records")
    return rows


def submenu_data_by_category(category: str) -> List[NavigationRow]:
    logger.info(f"Loading {category} submenu test data")
    rows = to_rows(by_category(load_navigation_records(), category))
    logger.info(f"Filtered {len(rows)} {category} submenu records")
    return rows


def computers_submenu_data() -> List[NavigationRow]:
    return submenu_data_by_category(COMPUTERS)


def electronics_submenu_data() -> List[NavigationRow]:
    return submenu_data_by_category(ELECTRONICS)


def apparel_submenu_data() -> List[NavigationRow]:
    return submenu_data_by_category(APPAREL)


def invalid_navigation_data() -> List[NegativeRow]:
    """Negative scenarios as ``(main_menu, sub_menu, description)``."""
    logger.info("Loading invalid navigation menu test data from JSON")
    records = read_json_records(NEGATIVE_TEST_JSON, NegativeNavigationRecord)
    rows = [record.to_negative_row() for record in records]
    logger.info(f"Loaded {len(rows)} negative test scenarios")
    return rows

"""Records describing navigation-menu test scenarios."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


def navigation_path(main_menu: str, sub_menu: Optional[str] = None) -> str:
    """Human-readable menu path, ``"Main → Sub"`` or just ``"Main"``."""
    return f"{main_menu} → {sub_menu}" if sub_menu else main_menu


class NavigationRecord(BaseModel):
    """One positive navigation scenario.

    A record without a submenu (absent, null or blank) exercises a top-level
    menu link; any other record exercises a submenu link under ``main_menu``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    main_menu: str = Field(alias="mainMenu", min_length=1)
    sub_menu: Optional[str] = Field(default=None, alias="subMenu")
    expected_url: str = Field(alias="expectedUrl")
    description: str = Field(alias="description")

    @property
    def is_main_menu_only(self) -> bool:
        return not self.sub_menu

    @property
    def is_submenu(self) -> bool:
        return bool(self.sub_menu)

    @property
    def navigation_path(self) -> str:
        return navigation_path(self.main_menu, self.sub_menu)

    def to_row(self) -> Tuple[str, Optional[str], Optional[str], str]:
        """Return ``(main_menu, sub_menu, expected_url, description)``."""
        return (self.main_menu, self.sub_menu, self.expected_url, self.description)


class NegativeNavigationRecord(NavigationRecord):
    """A navigation scenario that is expected to fail, so no URL is expected."""

    expected_url: Optional[str] = Field(default=None, alias="expectedUrl")

    def to_negative_row(self) -> Tuple[str, Optional[str], str]:
        return (self.main_menu, self.sub_menu, self.description)

"""
Page manager: one handle per test session for all page objects.
"""

from datetime import date
from typing import Callable, Optional

from playwright.async_api import Page

from ..config import E2ESettings, NavigationTimeouts
from .datepicker_page import DatepickerPage
from .form_layouts_page import FormLayoutsPage
from .navigation_page import NavigationPage
from .smart_table_page import SmartTablePage


class PageManager:
    """Builds page objects on first use and hands out the same instance after."""

    def __init__(
        self,
        page: Page,
        timeouts: Optional[NavigationTimeouts] = None,
        base_url: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ):
        self.page = page
        self.timeouts = timeouts or NavigationTimeouts()
        self.base_url = base_url
        self.today = today

        self._navigation_page: Optional[NavigationPage] = None
        self._datepicker_page: Optional[DatepickerPage] = None
        self._form_layouts_page: Optional[FormLayoutsPage] = None
        self._smart_table_page: Optional[SmartTablePage] = None

    @classmethod
    def from_settings(
        cls,
        page: Page,
        settings: E2ESettings,
        today: Callable[[], date] = date.today,
    ) -> "PageManager":
        """Create a manager from session settings."""
        return cls(page, settings.timeouts, settings.base_url, today)

    def navigate_to(self) -> NavigationPage:
        """Sidebar navigation."""
        if self._navigation_page is None:
            self._navigation_page = NavigationPage(
                self.page, self.timeouts, self.base_url)
        return self._navigation_page

    def on_datepicker_page(self) -> DatepickerPage:
        if self._datepicker_page is None:
            self._datepicker_page = DatepickerPage(
                self.page, self.timeouts, self.today)
        return self._datepicker_page

    def on_form_layouts_page(self) -> FormLayoutsPage:
        if self._form_layouts_page is None:
            self._form_layouts_page = FormLayoutsPage(self.page, self.timeouts)
        return self._form_layouts_page

    def on_smart_table_page(self) -> SmartTablePage:
        if self._smart_table_page is None:
            self._smart_table_page = SmartTablePage(self.page, self.timeouts)
        return self._smart_table_page

    def get_page(self) -> Page:
        return self.page

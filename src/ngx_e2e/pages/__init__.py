"""
Page Object Model classes for the ngx-admin application.

These classes provide reusable selectors and methods for interacting
with the sidebar, the datepickers, the form layouts and the smart table.
"""

from .datepicker_page import CalendarTarget, DatepickerPage
from .form_layouts_page import FormLayoutsPage, GridFormData, InlineFormData
from .helper_base import HelperBase
from .navigation_page import (
    DATEPICKER,
    FORM_LAYOUTS,
    SMART_TABLE,
    TOASTR,
    TOOLTIP,
    ExpandOutcome,
    NavigationPage,
    NavigationTarget,
    SignalKind,
    SuccessSignal,
)
from .page_manager import PageManager
from .smart_table_page import SmartTablePage

__all__ = [
    "HelperBase",
    "CalendarTarget",
    "DatepickerPage",
    "FormLayoutsPage",
    "GridFormData",
    "InlineFormData",
    "NavigationPage",
    "NavigationTarget",
    "SuccessSignal",
    "SignalKind",
    "ExpandOutcome",
    "FORM_LAYOUTS",
    "DATEPICKER",
    "SMART_TABLE",
    "TOASTR",
    "TOOLTIP",
    "PageManager",
    "SmartTablePage",
]

"""
Datepicker Page Object: calendar paging and day selection.

Selecting a date is a bounded search over the calendar overlay. The target
date is derived from an offset in days, the overlay is paged one month at a
time until its "Month Year" label shows the target, and the day is picked
among the cells of the visible month only. Cells rendered for the bounding
(previous/next) months carry the ``bounding-month`` class and are excluded,
so a greyed "28" of the previous month is never clicked instead of the
current month's "28".
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from playwright.async_api import Locator, Page, expect

from ..config import NavigationTimeouts
from ..exceptions import DateNotFoundError, NavigationError
from .helper_base import HelperBase

logger = logging.getLogger(__name__)

# The calendar renders en-US month names regardless of the host locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

_MONTH_YEAR_RE = re.compile(r"\b(" + "|".join(MONTH_NAMES) + r")\s+(\d{4})\b")


@dataclass(frozen=True)
class CalendarTarget:
    """The date a single selection call is aiming for."""

    date: date
    day_of_month: int
    month_short: str
    month_long: str
    year: int
    formatted: str

    @classmethod
    def from_offset(cls, offset: int, today: date) -> "CalendarTarget":
        """
        Build the target ``offset`` days away from ``today``.

        Raises:
            NavigationError: If the offset leaves the supported date range.
        """
        try:
            target = today + timedelta(days=offset)
        except OverflowError as e:
            raise NavigationError(
                f"{offset:+d} days from {today.isoformat()}", "", 0,
                {"offset": offset},
            ) from e
        month_short = MONTH_ABBREVIATIONS[target.month - 1]
        return cls(
            date=target,
            day_of_month=target.day,
            month_short=month_short,
            month_long=MONTH_NAMES[target.month - 1],
            year=target.year,
            formatted=f"{month_short} {target.day}, {target.year}",
        )

    @property
    def day(self) -> str:
        """Day number as the calendar prints it, without padding."""
        return str(self.day_of_month)

    @property
    def month_year(self) -> str:
        """Label the calendar header shows for the target month."""
        return f"{self.month_long} {self.year}"


def parse_month_year(label: str) -> Optional[tuple[int, int]]:
    """Return ``(year, month)`` from a "Month Year" label, if it has one."""
    match = _MONTH_YEAR_RE.search(label)
    if match is None:
        return None
    return int(match.group(2)), MONTH_NAMES.index(match.group(1)) + 1


class DatepickerPage(HelperBase):
    """Page Object for the Forms > Datepicker page."""

    def __init__(
        self,
        page: Page,
        timeouts: Optional[NavigationTimeouts] = None,
        today: Callable[[], date] = date.today,
    ):
        super().__init__(page, timeouts)
        self.today = today

    # Selectors
    @property
    def form_picker_input(self) -> Locator:
        """Common datepicker input."""
        return self.page.get_by_placeholder("Form Picker")

    @property
    def range_picker_input(self) -> Locator:
        """Range datepicker input."""
        return self.page.get_by_placeholder("Range Picker")

    @property
    def calendar_view_mode(self) -> Locator:
        """Header label ("Month Year") of the open calendar."""
        return self.page.locator("nb-calendar-view-mode").first

    @property
    def next_month_button(self) -> Locator:
        """Chevron that pages the calendar one month forward."""
        return self.page.locator(
            'nb-calendar-pageable-navigation [data-name="chevron-right"]'
        )

    @property
    def previous_month_button(self) -> Locator:
        """Chevron that pages the calendar one month back."""
        return self.page.locator(
            'nb-calendar-pageable-navigation [data-name="chevron-left"]'
        )

    @property
    def current_month_days(self) -> Locator:
        """Day cells of the displayed month, bounding months excluded."""
        return self.page.locator(".day-cell.ng-star-inserted:not(.bounding-month)")

    # Actions
    async def select_common_date_picker_date_from_today(self, offset: int) -> str:
        """
        Open the common picker, select a date and verify the input value.

        Args:
            offset: Days from today, may be negative.

        Returns:
            The formatted date, e.g. "Feb 4, 2024".
        """
        await self.form_picker_input.click()
        date_string = await self.select_date(offset)
        await expect(self.form_picker_input).to_have_value(date_string)
        return date_string

    async def select_datepicker_with_range_from_today(
        self, start_offset: int, end_offset: int
    ) -> str:
        """Select a range and verify the range input value."""
        range_string = await self.select_date_range(start_offset, end_offset)
        await expect(self.range_picker_input).to_have_value(range_string)
        return range_string

    async def select_date_range(self, start_offset: int, end_offset: int) -> str:
        """
        Open the range picker and pick both ends on the same open calendar.

        The end pick pages from wherever the start pick left the calendar.

        Returns:
            "<start> - <end>" in the calendar's input format.
        """
        await self.range_picker_input.click()
        start = await self.select_date(start_offset)
        end = await self.select_date(end_offset)
        return f"{start} - {end}"

    async def select_date(self, offset: int) -> str:
        """
        Select the date ``offset`` days from today in the open calendar.

        Raises:
            NavigationError: If the target month was not reached within
                the paging limit.
            DateNotFoundError: If no current-month cell shows the day.
        """
        target = CalendarTarget.from_offset(offset, self.today())
        clicks = await self.page_to_month(target)
        await self.click_day(target)
        logger.info(
            "Selected %s (offset %d, %d paging clicks)",
            target.formatted, offset, clicks,
        )
        return target.formatted

    async def read_month_year(self) -> str:
        """Current text of the calendar header."""
        return (await self.calendar_view_mode.text_content() or "").strip()

    async def page_to_month(self, target: CalendarTarget) -> int:
        """
        Page the calendar until its header shows the target month.

        Returns:
            Number of paging clicks performed.
        """
        wanted = target.month_year
        label = await self.read_month_year()
        clicks = 0
        while wanted not in label:
            if clicks >= self.timeouts.calendar_max_advances:
                raise NavigationError(wanted, label, clicks)
            await self._paging_button(label, target).click()
            clicks += 1
            label = await self.read_month_year()
            logger.debug("Calendar shows '%s', want '%s'", label, wanted)
        return clicks

    def _paging_button(self, label: str, target: CalendarTarget) -> Locator:
        shown = parse_month_year(label)
        if shown is not None and shown > (target.year, target.date.month):
            return self.previous_month_button
        # Unreadable headers page forward
        return self.next_month_button

    async def click_day(self, target: CalendarTarget) -> None:
        """Click the first current-month cell whose text is the day number."""
        days = self.current_month_days.filter(
            has_text=re.compile(rf"^\s*{target.day}\s*$")
        )
        count = await days.count()
        logger.debug('Found %d day(s) matching "%s"', count, target.day)
        if count == 0:
            raise DateNotFoundError(target.day, target.month_year)
        await days.first.click()

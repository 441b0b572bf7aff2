"""
Base class with helpers shared by all ngx-admin page objects.
"""

import math
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar

from playwright.async_api import Locator, Page

from ..config import NavigationTimeouts

T = TypeVar("T")


class HelperBase:
    """Base class for all Page Objects with common functionality."""

    def __init__(self, page: Page,
                 timeouts: Optional[NavigationTimeouts] = None):
        self.page = page
        self.timeouts = timeouts or NavigationTimeouts()

    # Common selectors
    @property
    def layout(self) -> Locator:
        """Root Nebular layout."""
        return self.page.locator("nb-layout").first

    @property
    def sidebar(self) -> Locator:
        """Application sidebar/navigation."""
        return self.page.locator("nb-sidebar, aside").first

    @property
    def layout_column(self) -> Locator:
        """Main content column."""
        return self.page.locator("nb-layout-column").first

    def card(self, title: Any) -> Locator:
        """Content card whose text matches ``title``."""
        return self.page.locator("nb-card", has_text=title)

    # Common interaction methods
    async def wait_for_number_of_seconds(self, seconds: float) -> None:
        """Pause the scenario."""
        await self.page.wait_for_timeout(seconds * 1000)

    async def fill_input(
        self, locator: Locator, value: str, clear_first: bool = True
    ) -> None:
        """Fill an input field."""
        if clear_first:
            await locator.clear()
        await locator.fill(value)

    async def check_checkbox(self, locator: Locator, check: bool = True,
                             force: bool = False) -> None:
        """Check or uncheck a checkbox or radio."""
        if check:
            await locator.check(force=force)
        else:
            await locator.uncheck(force=force)

    async def poll_until(
        self,
        probe: Callable[[], Awaitable[Optional[T]]],
        timeout_ms: int,
    ) -> Optional[T]:
        """
        Call ``probe`` every poll interval until it returns a value.

        The loop is bounded twice: by a wall-clock deadline and by the number
        of intervals that fit in ``timeout_ms``.

        Returns:
            The first non-None probe result, or None once the time is up.
        """
        interval = self.timeouts.poll_interval_ms
        polls = max(1, math.ceil(timeout_ms / interval))
        deadline = time.monotonic() + timeout_ms / 1000
        for _ in range(polls):
            result = await probe()
            if result is not None:
                return result
            if time.monotonic() >= deadline:
                break
            await self.page.wait_for_timeout(interval)
        return await probe()

    @staticmethod
    def coerce(value: Any, fallback: str) -> str:
        """Return ``value`` stripped, or ``fallback`` when it is blank or not a string."""
        if isinstance(value, str) and value.strip():
            return value.strip()
        return fallback

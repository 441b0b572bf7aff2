"""
Navigation Page Object: reaching app sections through the sidebar.

The sidebar is two levels deep. Groups ("Forms", "Tables & Data") are
collapsible anchors carrying ``aria-expanded``; leaves ("Datepicker") are
anchors that only navigate once their group is open. Reaching a section runs
a fixed sequence:

1. readiness probe on the layout and sidebar,
2. locate the group anchor inside the sidebar,
3. expand it with bounded click-and-check attempts, then one forced click,
4. locate, scroll to and click the leaf anchor,
5. poll until any of the section's success signals is visible.

Only step 3 tolerates failure: a group that never reports itself expanded is
logged and recorded in ``last_expand``, and steps 4 and 5 decide the outcome.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple, Optional, Sequence, Union

from playwright.async_api import Locator, Page
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import NavigationTimeouts
from ..exceptions import (
    AppNotLoadedError,
    ElementNotFoundError,
    NavigationTimeoutError,
)
from .helper_base import HelperBase

logger = logging.getLogger(__name__)

Pattern = Union[str, re.Pattern[str]]


class SignalKind(str, Enum):
    """Where a success signal is looked for."""

    HEADER = "header"
    BUTTON = "button"


@dataclass(frozen=True)
class SuccessSignal:
    """Text pattern whose appearance proves a navigation succeeded."""

    pattern: re.Pattern[str]
    kind: SignalKind


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


@dataclass(frozen=True)
class NavigationTarget:
    """A sidebar section and the signals that confirm arrival."""

    group_name: str
    leaf_name: str
    success_signals: tuple[SuccessSignal, ...]

    @classmethod
    def build(
        cls,
        group_name: str,
        leaf_name: str,
        headers: Sequence[Pattern] = (),
        buttons: Sequence[Pattern] = (),
    ) -> "NavigationTarget":
        """
        Build a target from header and button patterns.

        Plain strings are compiled as case-insensitive regular expressions.

        Raises:
            ValueError: If no signal is given.
        """
        signals = tuple(
            SuccessSignal(_compile(p), SignalKind.HEADER) for p in headers
        ) + tuple(
            SuccessSignal(_compile(p), SignalKind.BUTTON) for p in buttons
        )
        if not signals:
            raise ValueError(
                f"No success signal given for '{group_name} > {leaf_name}'")
        return cls(group_name, leaf_name, signals)

    def patterns(self, kind: SignalKind) -> list[str]:
        """Pattern sources of the given kind, in order."""
        return [s.pattern.pattern for s in self.success_signals if s.kind == kind]


FORM_LAYOUTS = NavigationTarget.build(
    "Forms", "Form Layouts",
    headers=["Using the Grid", "Inline form", "Form without labels"],
)
DATEPICKER = NavigationTarget.build(
    "Forms", "Datepicker",
    headers=["Common Datepicker", "Range Datepicker"],
)
SMART_TABLE = NavigationTarget.build(
    "Tables & Data", "Smart Table",
    headers=["Smart Table"],
)
TOASTR = NavigationTarget.build(
    "Modal & Overlays", "Toastr",
    headers=["Toastr", "Show toast"],
    buttons=["Show toast"],
)
TOOLTIP = NavigationTarget.build(
    "Modal & Overlays", "Tooltip",
    headers=["Tooltip With Icon", "Tooltip Placements", "Colored Tooltips"],
)

FORM_LAYOUTS_HEADERS = (
    "Using the Grid", "Inline form", "Form without labels", "Basic form",
)


class AnchorStrategy(NamedTuple):
    """One way of finding a sidebar anchor by its title."""

    description: str
    build: Callable[[Locator, str], Locator]


def _css_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


# Tried in order; the first with a visible match wins.
ANCHOR_STRATEGIES = (
    AnchorStrategy(
        "a[title]",
        lambda scope, title: scope.locator(f'a[title="{_css_string(title)}"]'),
    ),
    AnchorStrategy(
        "role=link",
        lambda scope, title: scope.get_by_role(
            "link", name=re.compile(rf"^{re.escape(title)}$", re.IGNORECASE)
        ),
    ),
)

# Keeps a match from resolving to a wrapping <li> or container.
ANCHOR_ONLY = "xpath=self::a"


@dataclass
class ExpandOutcome:
    """What the tolerant group-expand step did."""

    group_name: str
    attempts: int = 0
    expanded: bool = False
    forced: bool = False


class NavigationPage(HelperBase):
    """Page Object driving the ngx-admin sidebar."""

    def __init__(
        self,
        page: Page,
        timeouts: Optional[NavigationTimeouts] = None,
        base_url: Optional[str] = None,
    ):
        super().__init__(page, timeouts)
        self.base_url = base_url
        self.last_expand: Optional[ExpandOutcome] = None

    # Section shortcuts
    async def form_layouts_page(self) -> None:
        """Navigate to Forms > Form Layouts."""
        await self.go_to_section(FORM_LAYOUTS)

    async def datepicker_page(self) -> None:
        """Navigate to Forms > Datepicker."""
        await self.go_to_section(DATEPICKER)

    async def smart_table_page(self) -> None:
        """Navigate to Tables & Data > Smart Table."""
        await self.go_to_section(SMART_TABLE)

    async def toastr_page(self) -> None:
        """Navigate to Modal & Overlays > Toastr."""
        await self.go_to_section(TOASTR)

    async def tooltip_page(self) -> None:
        """Navigate to Modal & Overlays > Tooltip."""
        await self.go_to_section(TOOLTIP)

    async def assert_tooltip_link_visible(self) -> Locator:
        """Assert the Tooltip link exists in the sidebar."""
        return await self.assert_section_reachable("Tooltip")

    # Core flow
    async def go_to_section(
        self, target: NavigationTarget, timeout_ms: Optional[int] = None
    ) -> SuccessSignal:
        """
        Reach a sidebar section and confirm the view rendered.

        Args:
            target: Group, leaf and success signals of the section.
            timeout_ms: Bound for the success-signal poll; defaults to
                ``section_confirm_ms``.

        Returns:
            The signal that confirmed arrival.

        Raises:
            AppNotLoadedError: If the layout or sidebar never rendered.
            ElementNotFoundError: If the group or leaf anchor is missing.
            NavigationTimeoutError: If no success signal appeared.
        """
        await self.ensure_app_loaded()

        group = await self.find_sidebar_anchor(target.group_name)
        self.last_expand = await self.expand_group_until_open(
            group, target.group_name)

        leaf = await self.find_sidebar_anchor(target.leaf_name)
        await leaf.scroll_into_view_if_needed()
        await leaf.click()

        signal = await self.wait_for_any_signal(
            target,
            self.timeouts.section_confirm_ms if timeout_ms is None else timeout_ms,
        )
        logger.info(
            "Reached %s > %s (matched %s '%s')",
            target.group_name, target.leaf_name,
            signal.kind.value, signal.pattern.pattern,
        )
        return signal

    async def assert_section_reachable(
        self, link_title: str, timeout_ms: Optional[int] = None
    ) -> Locator:
        """
        Assert a leaf link is visible in the sidebar, without clicking it.

        Raises:
            ElementNotFoundError: If no single visible anchor matches.
        """
        return await self.find_sidebar_anchor(link_title, timeout_ms)

    async def ensure_app_loaded(self) -> None:
        """
        Open the app if the page is blank and wait for layout and sidebar.

        Raises:
            AppNotLoadedError: If the app cannot be opened or either region
                stays hidden.
        """
        if self.page.url == "about:blank":
            url = self.base_url or "/"
            try:
                await self.page.goto(url)
            except PlaywrightError as e:
                raise AppNotLoadedError(
                    url, self.timeouts.app_ready_ms, {"error": str(e)}) from e

        timeout = self.timeouts.app_ready_ms
        for selector, region in (
            ("nb-layout", self.layout),
            ("nb-sidebar, aside", self.sidebar),
        ):
            try:
                await region.wait_for(state="visible", timeout=timeout)
            except PlaywrightTimeoutError as e:
                raise AppNotLoadedError(selector, timeout) from e

    async def find_sidebar_anchor(
        self, title: str, timeout_ms: Optional[int] = None
    ) -> Locator:
        """
        Find a single visible ``<a>`` in the sidebar by title or link name.

        Raises:
            ElementNotFoundError: If no strategy matched before the timeout.
        """
        if timeout_ms is None:
            timeout_ms = self.timeouts.element_visible_ms
        sidebar = self.sidebar
        candidates = [
            (strategy.description,
             strategy.build(sidebar, title).locator(ANCHOR_ONLY).first)
            for strategy in ANCHOR_STRATEGIES
        ]

        async def probe() -> Optional[Locator]:
            for description, candidate in candidates:
                if await candidate.is_visible():
                    logger.debug("Sidebar anchor '%s' found by %s",
                                 title, description)
                    return candidate
            return None

        anchor = await self.poll_until(probe, timeout_ms)
        if anchor is None:
            raise ElementNotFoundError(
                title, [d for d, _ in candidates], timeout_ms)
        return anchor

    async def expand_group_until_open(
        self, group: Locator, group_name: str
    ) -> ExpandOutcome:
        """
        Make sure a sidebar group is expanded.

        Clicks and re-checks ``aria-expanded`` up to ``expand_attempts``
        times. If the group still reports collapsed, one forced click is sent
        without checking the result. Never raises for a collapsed group.
        """
        outcome = ExpandOutcome(group_name)
        settle = self.timeouts.expand_settle_ms

        for _ in range(self.timeouts.expand_attempts):
            if await group.get_attribute("aria-expanded") == "true":
                outcome.expanded = True
                return outcome
            await group.click()
            outcome.attempts += 1
            await self.page.wait_for_timeout(settle)
            if await group.get_attribute("aria-expanded") == "true":
                outcome.expanded = True
                return outcome

        logger.warning(
            "Group '%s' still collapsed after %d attempts, forcing a click",
            group_name, outcome.attempts,
        )
        await group.click(force=True)
        await self.page.wait_for_timeout(settle)
        outcome.forced = True
        return outcome

    def _signal_locators(self, signal: SuccessSignal) -> list[Locator]:
        if signal.kind == SignalKind.BUTTON:
            return [self.page.get_by_role("button", name=signal.pattern).first]
        return [
            self.layout_column.locator(
                "nb-card-header", has_text=signal.pattern).first,
            self.page.get_by_role("heading", name=signal.pattern).first,
        ]

    async def wait_for_any_signal(
        self, target: NavigationTarget, timeout_ms: int
    ) -> SuccessSignal:
        """
        Poll until any success signal of ``target`` is visible.

        Raises:
            NavigationTimeoutError: Listing every pattern that was checked.
        """
        async def probe() -> Optional[SuccessSignal]:
            for signal in target.success_signals:
                for locator in self._signal_locators(signal):
                    if await locator.is_visible():
                        return signal
            return None

        signal = await self.poll_until(probe, timeout_ms)
        if signal is None:
            raise NavigationTimeoutError(
                timeout_ms,
                target.patterns(SignalKind.HEADER),
                target.patterns(SignalKind.BUTTON),
            )
        return signal

    async def assert_form_layouts_visible(self) -> None:
        """
        Prove the Form Layouts view is showing by URL and a known header.

        Raises:
            NavigationTimeoutError: If neither a header nor the breadcrumb
                shows up.
        """
        timeout = self.timeouts.app_ready_ms
        try:
            await self.page.wait_for_url("**/pages/forms/layouts", timeout=timeout)
            await self.layout_column.locator("nb-card").first.wait_for(
                state="visible", timeout=self.timeouts.element_visible_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeoutError(timeout, FORM_LAYOUTS_HEADERS) from e

        for header in FORM_LAYOUTS_HEADERS:
            card_header = self.layout_column.locator(
                "nb-card-header", has_text=_compile(header)).first
            if await card_header.is_visible():
                return

        breadcrumb = self.page.locator(
            'nb-breadcrumb, nav[aria-label="breadcrumb"]'
        ).get_by_text(_compile("Form Layouts")).first
        if await breadcrumb.is_visible():
            return

        raise NavigationTimeoutError(
            timeout, FORM_LAYOUTS_HEADERS + ("breadcrumb: Form Layouts",))

"""
Smart Table Page Object for inline row editing and filtering.
"""

import logging
from typing import Optional

from playwright.async_api import Dialog, Locator, Page

from ..config import NavigationTimeouts
from .helper_base import HelperBase

logger = logging.getLogger(__name__)


class SmartTablePage(HelperBase):
    """Page Object for the Tables & Data > Smart Table page."""

    def __init__(self, page: Page,
                 timeouts: Optional[NavigationTimeouts] = None):
        super().__init__(page, timeouts)

    # Selectors
    @property
    def table(self) -> Locator:
        return self.page.get_by_role("table")

    @property
    def body_rows(self) -> Locator:
        return self.page.locator("table tbody tr")

    @property
    def save_button(self) -> Locator:
        """Checkmark that commits an inline edit."""
        return self.page.locator(".nb-checkmark")

    def row(self, text: str) -> Locator:
        """Row whose accessible name contains ``text``."""
        return self.page.get_by_role("row", name=text)

    def row_by_column(self, column_index: int, value: str) -> Locator:
        """Row whose cell at ``column_index`` reads exactly ``value``."""
        return self.page.get_by_role("row", name=value).filter(
            has=self.page.locator("td").nth(column_index).get_by_text(
                value, exact=True)
        )

    def editor(self, placeholder: str) -> Locator:
        return self.page.locator("input-editor").get_by_placeholder(placeholder)

    def filter_input(self, placeholder: str) -> Locator:
        return self.page.locator("input-filter").get_by_placeholder(placeholder)

    # Actions
    async def edit_row_field(self, row: Locator, placeholder: str,
                             value: str) -> None:
        """Open ``row`` for editing, replace one field and save."""
        await row.locator(".nb-edit").click()
        await self.fill_input(self.editor(placeholder), value)
        await self.save_button.click()
        logger.debug("Set '%s' to '%s'", placeholder, value)

    async def go_to_table_page(self, number: int) -> None:
        """Jump to a page of the table pager."""
        await self.page.locator(".ng2-smart-pagination-nav").get_by_text(
            str(number), exact=True).click()

    async def filter_by(self, placeholder: str, value: str,
                        settle_ms: int = 500) -> None:
        """Type into a column filter and give the table time to re-render."""
        await self.fill_input(self.filter_input(placeholder), value)
        await self.page.wait_for_timeout(settle_ms)

    async def column_values(self, column_index: int) -> list[str]:
        """Text of one column across the visible body rows."""
        values = []
        for row in await self.body_rows.all():
            text = await row.locator("td").nth(column_index).text_content()
            values.append((text or "").strip())
        return values

    async def delete_row(self, text: str) -> str:
        """
        Delete a row, accepting the browser confirm dialog.

        The dialog listener is removed before returning, so a later dialog
        is never accepted by it.

        Returns:
            The dialog message, or an empty string if no dialog appeared
            within ``dialog_wait_ms``.
        """
        messages: list[str] = []

        async def accept(dialog: Dialog) -> None:
            messages.append(dialog.message)
            await dialog.accept()

        async def dialog_seen() -> Optional[str]:
            return messages[0] if messages else None

        self.page.on("dialog", accept)
        try:
            await self.row(text).locator(".nb-trash").click()
            message = await self.poll_until(
                dialog_seen, self.timeouts.dialog_wait_ms)
        finally:
            self.page.remove_listener("dialog", accept)

        if message is None:
            logger.warning("No confirm dialog after deleting row '%s'", text)
            return ""
        return message

"""
Form Layouts Page Object for form-filling scenarios.
"""

from dataclasses import dataclass
from typing import Any, Optional

from playwright.async_api import Locator, Page

from ..config import NavigationTimeouts
from .helper_base import HelperBase


@dataclass
class GridFormData:
    """Values submitted through the "Using the Grid" form."""
    email: str
    password: str
    option: str


@dataclass
class InlineFormData:
    """Values submitted through the "Inline form"."""
    name: str
    email: str
    remember_me: bool


class FormLayoutsPage(HelperBase):
    """Page Object for the Forms > Form Layouts page."""

    DEFAULT_EMAIL = "qa@example.com"
    DEFAULT_PASSWORD = "Secret123!"
    DEFAULT_OPTION = "Option 1"
    DEFAULT_NAME = "Jane Doe"
    DEFAULT_INLINE_EMAIL = "qa+inline@example.com"

    def __init__(self, page: Page,
                 timeouts: Optional[NavigationTimeouts] = None):
        super().__init__(page, timeouts)

    # Selectors
    @property
    def using_the_grid_form(self) -> Locator:
        """Card titled "Using the Grid"."""
        return self.card("Using the Grid")

    @property
    def inline_form(self) -> Locator:
        """Inline form card."""
        return self.card("Inline form")

    # Actions
    async def submit_using_the_grid_form_with_credentials_and_select_option(
        self, email: Any, password: Any, option_text: Any
    ) -> GridFormData:
        """
        Fill and submit the "Using the Grid" form.

        Blank or missing values are replaced with safe defaults so a bad
        test input never breaks the helper.

        Args:
            email: Email to type.
            password: Password to type.
            option_text: Accessible name of the radio option to pick.

        Returns:
            The values that were actually submitted.
        """
        data = GridFormData(
            email=self.coerce(email, self.DEFAULT_EMAIL),
            password=self.coerce(password, self.DEFAULT_PASSWORD),
            option=self.coerce(option_text, self.DEFAULT_OPTION),
        )

        form = self.using_the_grid_form
        await form.wait_for(state="visible",
                            timeout=self.timeouts.element_visible_ms)

        await self.fill_input(form.get_by_role("textbox", name="Email"), data.email)
        await self.fill_input(
            form.get_by_role("textbox", name="Password"), data.password)
        # Nebular hides the native radio behind a styled span
        await self.check_checkbox(
            form.get_by_role("radio", name=data.option), force=True)
        await form.get_by_role("button").click()
        return data

    async def submit_inline_form_with_name_email_and_checkbox(
        self, name: Any, email: Any, remember_me: bool
    ) -> InlineFormData:
        """
        Fill and submit the inline form.

        The checkbox is only touched when ``remember_me`` is true.
        """
        data = InlineFormData(
            name=self.coerce(name, self.DEFAULT_NAME),
            email=self.coerce(email, self.DEFAULT_INLINE_EMAIL),
            remember_me=bool(remember_me),
        )

        form = self.inline_form
        await form.wait_for(state="visible",
                            timeout=self.timeouts.element_visible_ms)

        # The demo labels its first input by the placeholder "Jane Doe"
        await self.fill_input(
            form.get_by_role("textbox", name="Jane Doe"), data.name)
        await self.fill_input(form.get_by_role("textbox", name="Email"), data.email)

        if data.remember_me:
            await self.check_checkbox(form.get_by_role("checkbox"), force=True)
        await form.get_by_role("button").click()
        return data

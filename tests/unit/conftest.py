"""
Fixtures for unit tests running page objects against the fake DOM.
"""

from datetime import date

import pytest

from .fake_app import FakeAdminShell, FakeDatepicker
from .fakes import FakePage


@pytest.fixture
def fake_page() -> FakePage:
    """Blank fake page."""
    return FakePage()


@pytest.fixture
def admin_shell(fake_page: FakePage) -> FakeAdminShell:
    """Admin shell with every sidebar group collapsed."""
    return FakeAdminShell(fake_page)


@pytest.fixture
def january_25() -> date:
    return date(2024, 1, 25)


@pytest.fixture
def datepicker_app(fake_page: FakePage, january_25: date) -> FakeDatepicker:
    """Datepicker page whose calendar opens on January 2024."""
    return FakeDatepicker(fake_page, january_25)

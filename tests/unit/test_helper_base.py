"""
Unit tests for the shared page object helpers.
"""

from types import SimpleNamespace

import pytest

import ngx_e2e
from ngx_e2e.config import NavigationTimeouts
from ngx_e2e.pages import helper_base
from ngx_e2e.pages.helper_base import HelperBase

from .fakes import FakeElement, FakePage


class TestHelperBase:
    """Tests for waits, polling and input helpers."""

    @pytest.mark.asyncio
    async def test_wait_for_number_of_seconds(self, fake_page: FakePage):
        helper = HelperBase(fake_page)

        await helper.wait_for_number_of_seconds(1.5)

        assert fake_page.sleeps == [1500]

    @pytest.mark.asyncio
    async def test_poll_until_returns_first_value(self, fake_page: FakePage):
        """Test that polling stops at the first non-None result."""
        helper = HelperBase(fake_page)
        calls = []

        async def probe():
            calls.append(1)
            return "ready" if len(calls) == 3 else None

        result = await helper.poll_until(probe, timeout_ms=1_000)

        assert result == "ready"
        assert len(calls) == 3
        assert fake_page.sleeps == [100, 100]

    @pytest.mark.asyncio
    async def test_poll_until_is_bounded(self, fake_page: FakePage):
        """Test that polling gives up after the intervals in the timeout."""
        helper = HelperBase(fake_page, NavigationTimeouts(poll_interval_ms=50))
        calls = []

        async def probe():
            calls.append(1)
            return None

        result = await helper.poll_until(probe, timeout_ms=200)

        assert result is None
        # Four polls plus the final probe
        assert len(calls) == 5
        assert fake_page.sleeps == [50, 50, 50, 50]

    @pytest.mark.asyncio
    async def test_poll_until_stops_at_deadline(self, fake_page: FakePage,
                                                monkeypatch):
        """Test that a slow probe ends the loop on elapsed time."""
        # Each clock read is half a second later than the previous one
        ticks = iter(range(100))
        clock = SimpleNamespace(monotonic=lambda: next(ticks) * 0.5)
        monkeypatch.setattr(helper_base, "time", clock)
        helper = HelperBase(fake_page)
        calls = []

        async def probe():
            calls.append(1)
            return None

        result = await helper.poll_until(probe, timeout_ms=1_000)

        assert result is None
        # Ten intervals fit in the timeout, but the deadline passes after two
        assert len(calls) == 3
        assert fake_page.sleeps == [100]

    @pytest.mark.asyncio
    async def test_check_and_uncheck(self, fake_page: FakePage):
        checkbox = fake_page.document.append(
            FakeElement("input", attrs={"type": "checkbox"}))
        helper = HelperBase(fake_page)
        locator = fake_page.get_by_role("checkbox")

        await helper.check_checkbox(locator)
        assert checkbox.checked is True

        await helper.check_checkbox(locator, check=False)
        assert checkbox.checked is False

    @pytest.mark.asyncio
    async def test_fill_input_keeps_text_when_asked(self, fake_page: FakePage):
        field = fake_page.document.append(
            FakeElement("input", attrs={"placeholder": "Name"}))
        field.value = "old"
        helper = HelperBase(fake_page)

        await helper.fill_input(fake_page.get_by_placeholder("Name"), "new",
                                clear_first=False)

        assert field.value == "new"

    @pytest.mark.parametrize("value,expected", [
        ("  text  ", "text"),
        ("", "fallback"),
        ("   ", "fallback"),
        (None, "fallback"),
        (123, "fallback"),
    ])
    def test_coerce(self, value, expected):
        assert HelperBase.coerce(value, "fallback") == expected


def test_version():
    assert ngx_e2e.get_version() == ngx_e2e.__version__
    assert ngx_e2e.__version_info__ == tuple(
        int(x) for x in ngx_e2e.__version__.split("."))

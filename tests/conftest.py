"""
Pytest fixtures shared by the ngx-e2e test suites.
"""

import logging
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ngx_e2e.config import NavigationTimeouts  # noqa: E402


@pytest.fixture
def fast_timeouts() -> NavigationTimeouts:
    """Short bounds so timeout paths finish in a handful of polls."""
    return NavigationTimeouts(
        element_visible_ms=300,
        app_ready_ms=300,
        section_confirm_ms=500,
    )


@pytest.fixture
def page_object_logs(caplog):
    """Capture page object log records at DEBUG."""
    caplog.set_level(logging.DEBUG, logger="ngx_e2e")
    return caplog

"""Version information for ngx-e2e."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Release information
__title__ = "ngx-e2e"
__description__ = "Async Playwright page objects and E2E suite for ngx-admin"
__author__ = "ngx-e2e Team"
__license__ = "MIT"


def get_version() -> str:
    """Return the current version string."""
    return __version__

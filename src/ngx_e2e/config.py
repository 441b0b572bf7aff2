"""
Configuration management for the ngx-e2e suite.

Settings are loaded from environment variables (prefix ``E2E_``) and,
optionally, a TOML file named by ``E2E_CONFIG_FILE``. Page objects never read
this module themselves: the test session builds the settings and hands the
values to them explicitly.
"""

import logging
import os
import sys
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

VALID_BROWSERS = ("chromium", "firefox", "webkit")


class NavigationTimeouts(BaseModel):
    """Bounds applied by the page objects to every wait and retry loop."""

    element_visible_ms: int = Field(
        default=10_000, gt=0, description="Sidebar control visibility wait"
    )
    app_ready_ms: int = Field(
        default=15_000, gt=0, description="Readiness probe for layout and sidebar"
    )
    section_confirm_ms: int = Field(
        default=20_000, gt=0, description="Success-signal poll after a leaf click"
    )
    poll_interval_ms: int = Field(
        default=100, gt=0, description="Delay between success-signal polls"
    )
    expand_settle_ms: int = Field(
        default=150, gt=0, description="Pause after each group-expand click"
    )
    expand_attempts: int = Field(
        default=4, ge=1, description="Click-and-check attempts before forcing"
    )
    dialog_wait_ms: int = Field(
        default=2_000, gt=0, description="Wait for a confirm dialog after a click"
    )
    calendar_max_advances: int = Field(
        default=120, ge=1, description="Maximum calendar paging clicks"
    )


class E2ESettings(BaseSettings):
    """Settings for a browser test session."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        env_nested_delimiter="__",
        populate_by_name=True,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://127.0.0.1:4200",
        validation_alias=AliasChoices("E2E_BASE_URL", "QA_URL", "BASE_URL"),
        description="Root URL of the ngx-admin application",
    )
    browser: str = Field(default="chromium", description="Browser engine")
    headless: bool = Field(default=True, description="Run without a window")
    slow_mo: int = Field(default=0, ge=0, description="Slow motion delay (ms)")
    default_timeout: int = Field(
        default=30_000, gt=0, description="Playwright action timeout (ms)"
    )
    navigation_timeout: int = Field(
        default=30_000, gt=0, description="Playwright navigation timeout (ms)"
    )
    viewport_width: int = Field(default=1280, gt=0)
    viewport_height: int = Field(default=720, gt=0)
    locale: str = Field(default="en-US", description="Browser locale")
    timezone_id: str = Field(default="America/New_York")
    log_level: str = Field(default="INFO", description="Log level")
    timeouts: NavigationTimeouts = Field(default_factory=NavigationTimeouts)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the application URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, v: str) -> str:
        """Validate the browser engine name."""
        v_lower = v.lower()
        if v_lower not in VALID_BROWSERS:
            raise ValueError(
                f"Browser must be one of: {', '.join(VALID_BROWSERS)}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @classmethod
    def from_toml(cls, path: str | Path) -> "E2ESettings":
        """
        Load settings from a TOML file.

        Keys of the ``[e2e]`` table map to fields; ``[e2e.timeouts]`` maps to
        the navigation timeouts. Environment variables still apply to fields
        the file leaves out.

        Raises:
            MissingConfigError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError("config_file", {"path": str(path)})

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigError(
                config_key="config_file",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            ) from e

        section: dict[str, Any] = dict(data.get("e2e", {}))
        if "timeouts" in section:
            section["timeouts"] = NavigationTimeouts(**section["timeouts"])
        return cls(**section)

    def to_launch_options(self) -> dict[str, Any]:
        """Convert to Playwright browser launch options."""
        return {
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }

    def to_context_options(self) -> dict[str, Any]:
        """Convert to Playwright browser context options."""
        return {
            "viewport": {
                "width": self.viewport_width,
                "height": self.viewport_height,
            },
            "base_url": self.base_url,
            "locale": self.locale,
            "timezone_id": self.timezone_id,
        }


def configure_logging(level: str = "INFO", stream: Optional[Any] = None) -> None:
    """
    Configure root logging for a test session.

    Args:
        level: Log level name.
        stream: Output stream, defaults to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stderr)],
    )
    # basicConfig is a no-op once pytest has attached its handlers
    logging.getLogger("ngx_e2e").setLevel(log_level)
    # asyncio selector chatter at DEBUG buries page object records
    logging.getLogger("asyncio").setLevel(logging.WARNING)


@lru_cache()
def get_settings() -> E2ESettings:
    """
    Get cached session settings.

    Loads from ``E2E_CONFIG_FILE`` when it points at an existing file,
    otherwise from the environment alone.
    """
    config_file = os.getenv("E2E_CONFIG_FILE")

    if config_file and Path(config_file).exists():
        return E2ESettings.from_toml(config_file)
    return E2ESettings()


def reload_settings() -> E2ESettings:
    """Reload settings, clearing the cache."""
    get_settings.cache_clear()
    return get_settings()

"""
Custom exceptions for the ngx-e2e page objects.

Every failure a page object can raise carries the search criteria it was
working with (titles, day numbers, text patterns) so that a failed test run
can be diagnosed from the report alone.
"""

from typing import Any, Optional, Sequence


class NgxE2EError(Exception):
    """Base exception for all ngx-e2e errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(NgxE2EError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a configuration file is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason


# Page Object Exceptions
class AppNotLoadedError(NgxE2EError):
    """Raised when the application layout never rendered."""

    def __init__(
        self,
        selector: str,
        timeout_ms: int,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize app not loaded error.

        Args:
            selector: The layout selector that never became visible.
            timeout_ms: How long the readiness probe waited.
            details: Optional dictionary with additional error details.
        """
        message = (
            f"Application not loaded: '{selector}' was not visible "
            f"after {timeout_ms}ms"
        )
        super().__init__(message, details)
        self.selector = selector
        self.timeout_ms = timeout_ms


class ElementNotFoundError(NgxE2EError):
    """Raised when a required sidebar control never became visible."""

    def __init__(
        self,
        title: str,
        strategies: Sequence[str] = (),
        timeout_ms: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize element not found error.

        Args:
            title: Title or accessible name that was searched for.
            strategies: Descriptions of the lookup strategies that were tried.
            timeout_ms: How long the lookup waited.
            details: Optional dictionary with additional error details.
        """
        message = f"Element '{title}' not found"
        if strategies:
            message += f" using {' or '.join(strategies)}"
        if timeout_ms is not None:
            message += f" within {timeout_ms}ms"
        super().__init__(message, details)
        self.title = title
        self.strategies = tuple(strategies)
        self.timeout_ms = timeout_ms


class DateNotFoundError(NgxE2EError):
    """Raised when no current-month day cell matches the target day."""

    def __init__(
        self,
        day: str,
        month_year: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize date not found error.

        Args:
            day: Day number text that was searched for.
            month_year: The "Month Year" label the calendar was showing.
            details: Optional dictionary with additional error details.
        """
        message = f'No day matching "{day}" found in {month_year}'
        super().__init__(message, details)
        self.day = day
        self.month_year = month_year


class NavigationError(NgxE2EError):
    """Raised when the calendar never reached the target month."""

    def __init__(
        self,
        target: str,
        last_seen: str,
        clicks: int,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize navigation error.

        Args:
            target: The "Month Year" label being paged towards.
            last_seen: The last label read from the calendar.
            clicks: Number of paging clicks performed before giving up.
            details: Optional dictionary with additional error details.
        """
        message = (
            f"Calendar did not reach '{target}' after {clicks} clicks "
            f"(last shown: '{last_seen}')"
        )
        super().__init__(message, details)
        self.target = target
        self.last_seen = last_seen
        self.clicks = clicks


class NavigationTimeoutError(NgxE2EError):
    """Raised when no success signal appeared after a navigation."""

    def __init__(
        self,
        timeout_ms: int,
        header_patterns: Sequence[str],
        button_patterns: Sequence[str] = (),
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize navigation timeout error.

        Args:
            timeout_ms: How long the signal poll ran.
            header_patterns: Header text patterns that were checked.
            button_patterns: Button text patterns that were checked.
            details: Optional dictionary with additional error details.
        """
        message = (
            f"Timed out after {timeout_ms}ms waiting for any of headers: "
            f"{' | '.join(header_patterns)}"
        )
        if button_patterns:
            message += f" or buttons: {' | '.join(button_patterns)}"
        super().__init__(message, details)
        self.timeout_ms = timeout_ms
        self.header_patterns = tuple(header_patterns)
        self.button_patterns = tuple(button_patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Every pattern that was checked, headers first."""
        return self.header_patterns + self.button_patterns

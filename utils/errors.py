"""Exception classes and step outcomes for A2A Billing.

Every exception raised by the scrape carries a :class:`FailureKind` so the
orchestrator can report what went wrong without inspecting messages. All of
them are fatal: the run takes a screenshot, tears down and re-raises.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from selenium.common.exceptions import TimeoutException, WebDriverException


class FailureKind(str, Enum):
    CONFIGURATION = "configuration"
    BROWSER_LAUNCH = "browser_launch"
    AUTHENTICATION = "authentication"
    TIMEOUT = "timeout"
    NAVIGATION = "navigation"
    EXTRACTION = "extraction"
    STORE_WRITE = "store_write"
    UNEXPECTED = "unexpected"


class A2ABillingError(Exception):
    """Base class for every failure raised by the scraper."""

    kind = FailureKind.UNEXPECTED


class ConfigurationError(A2ABillingError):
    """Raised when a required setting is missing or malformed.

    Args:
        setting: Name of the offending environment variable or key.
        reason: Human-readable explanation.
    """

    kind = FailureKind.CONFIGURATION

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid configuration for '{setting}': {reason}")


class BrowserLaunchError(A2ABillingError):
    """Raised when Chrome cannot be started."""

    kind = FailureKind.BROWSER_LAUNCH


class SessionNotStartedError(BrowserLaunchError):
    """Raised when the driver is used before the session was started."""

    def __init__(self) -> None:
        super().__init__("Browser session not initialized")


class AuthenticationError(A2ABillingError):
    """Raised when the login form cannot be filled or submitted."""

    kind = FailureKind.AUTHENTICATION


class AuthenticationTimeoutError(AuthenticationError):
    """Raised when the post-login marker never shows up.

    Args:
        marker: The text that was expected after login.
        timeout: Seconds waited before giving up.
    """

    kind = FailureKind.TIMEOUT

    def __init__(self, marker: str, timeout: float) -> None:
        self.marker = marker
        self.timeout = timeout
        super().__init__(
            f"Login not confirmed: '{marker}' did not appear within {timeout}s"
        )


class PageLoadTimeoutError(A2ABillingError):
    """Raised when a bill page never shows its readiness marker.

    Args:
        url: The page that was loading.
        timeout: Seconds waited before giving up.
    """

    kind = FailureKind.TIMEOUT

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Page '{url}' not ready after {timeout}s")


class ExtractionError(A2ABillingError):
    """Raised when scraped values cannot be turned into an average."""

    kind = FailureKind.EXTRACTION


class AmountParseError(ExtractionError):
    """Raised when a scraped string does not contain a number.

    Args:
        raw_text: The text content that failed to parse.
    """

    def __init__(self, raw_text: str) -> None:
        self.raw_text = raw_text
        super().__init__(f"Cannot parse bill amount from '{raw_text}'")


class EmptyBillListError(ExtractionError):
    """Raised when there are no bill amounts to average."""

    def __init__(self, commodity: str = "") -> None:
        self.commodity = commodity
        target = f" for {commodity}" if commodity else ""
        super().__init__(f"No bill amounts found{target}")


class StoreWriteError(A2ABillingError):
    """Raised when the remote store rejects a write.

    Args:
        path: Store path that was being written.
        reason: Error reported by the store client.
    """

    kind = FailureKind.STORE_WRITE

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


def classify(error: BaseException) -> FailureKind:
    """Map any exception to the failure kind it represents."""
    if isinstance(error, A2ABillingError):
        return error.kind
    if isinstance(error, TimeoutException):
        return FailureKind.TIMEOUT
    if isinstance(error, WebDriverException):
        return FailureKind.NAVIGATION
    return FailureKind.UNEXPECTED


@dataclass(frozen=True)
class StepOutcome:
    """Result of a single run step: either a value or a classified failure."""

    step: str
    value: Any = None
    kind: Optional[FailureKind] = None
    detail: str = ""
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, step: str, value: Any = None) -> "StepOutcome":
        return cls(step=step, value=value)

    @classmethod
    def failure(cls, step: str, error: BaseException) -> "StepOutcome":
        return cls(step=step, kind=classify(error), detail=str(error), error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

"""
Exceptions raised by the displayedness harness.
"""


class HarnessError(Exception):
    """Base exception for all harness failures."""

    pass


class UnsupportedConfigurationError(HarnessError):
    """Requested browser kind is not supported."""

    pass


class BrowserSetupError(HarnessError):
    """Browser session could not be started."""

    pass


class SessionStateError(HarnessError):
    """Session lifecycle call made in the wrong state."""

    pass


class ElementNotFoundError(HarnessError):
    """Element was not found on the page."""

    def __init__(self, locator, message=None):
        self.locator = locator
        super().__init__(message or f"No element found for locator {locator!r}")


class WaitTimeoutError(HarnessError):
    """Element did not become visible within the wait bound."""

    def __init__(self, timeout: float, elapsed: float):
        self.timeout = timeout
        self.elapsed = elapsed
        super().__init__(f"Element not visible after {elapsed:.2f}s (timeout {timeout}s)")

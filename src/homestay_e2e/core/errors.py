"""Exceptions raised while driving the homestay search page."""
from __future__ import annotations


class HomestayE2EError(RuntimeError):
    """Base class for failures originating in the browser harness."""


class SessionStartupError(HomestayE2EError):
    """Raised when the browser or the entry page fails to initialise."""


class ElementNotFoundError(HomestayE2EError):
    """Raised when an expected control never shows up within the explicit wait."""

    def __init__(self, selector: str, timeout_s: float) -> None:
        super().__init__(f"Element {selector!r} not found within {timeout_s:g}s")
        self.selector = selector
        self.timeout_s = timeout_s


class WaitTimeoutError(HomestayE2EError, TimeoutError):
    """Raised when a bounded wait (navigation, URL change) expires."""

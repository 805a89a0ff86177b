"""Browser session, dialog handling, logging and error types."""

from .browser import BrowserSession
from .dialogs import DialogWatcher
from .errors import ElementNotFoundError, HomestayE2EError, SessionStartupError, WaitTimeoutError

__all__ = [
    "BrowserSession",
    "DialogWatcher",
    "ElementNotFoundError",
    "HomestayE2EError",
    "SessionStartupError",
    "WaitTimeoutError",
]

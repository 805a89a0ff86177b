"""Native dialog handling for Playwright pages.

Playwright freezes the page while a dialog is open if a listener is attached but
never answers it, so every dialog is accepted inside the listener and only its
message is handed to the caller.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from playwright.async_api import Dialog, Page

from homestay_e2e.models import ValidationAlert

logger = logging.getLogger(__name__)


class DialogWatcher:
    """Accepts dialogs as they appear and queues them as validation alerts."""

    def __init__(self) -> None:
        self._alerts: asyncio.Queue[ValidationAlert] = asyncio.Queue()
        self._page: Optional[Page] = None

    def attach(self, page: Page) -> "DialogWatcher":
        self._page = page
        page.on("dialog", self._on_dialog)
        return self

    def detach(self) -> None:
        if self._page is not None:
            self._page.remove_listener("dialog", self._on_dialog)
            self._page = None

    async def _on_dialog(self, dialog: Dialog) -> None:
        message = dialog.message
        logger.info("Dialog (%s) raised: %s", dialog.type, message)
        # Queue before accepting: the action that triggered the dialog can only
        # resolve once it is accepted, so callers never see an empty queue.
        self._alerts.put_nowait(ValidationAlert(message=message, acknowledged=True))
        await dialog.accept()

    async def poll(self, timeout_s: float) -> Optional[ValidationAlert]:
        """Return the next alert, or ``None`` if none shows up within ``timeout_s``."""
        if not self._alerts.empty():
            return self._alerts.get_nowait()
        if timeout_s <= 0:
            return None
        try:
            return await asyncio.wait_for(self._alerts.get(), timeout=timeout_s)
        except asyncio.TimeoutError:
            logger.debug("No dialog within %.1fs", timeout_s)
            return None

    def drain(self) -> list[ValidationAlert]:
        stale: list[ValidationAlert] = []
        while not self._alerts.empty():
            stale.append(self._alerts.get_nowait())
        if stale:
            logger.debug("Discarding %s stale dialog(s)", len(stale))
        return stale

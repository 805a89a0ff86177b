"""Browser orchestration helpers."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

from playwright.async_api import Browser, BrowserContext, Error as PlaywrightError, Page, Playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from homestay_e2e.config.settings import Settings
from homestay_e2e.core.errors import SessionStartupError

logger = logging.getLogger(__name__)


@dataclass
class BrowserSession:
    """Async context manager that owns Playwright + browser lifecycle.

    One session backs exactly one scenario. Leaving the ``async with`` block
    closes the page, context, browser and driver whether or not the body raised.
    """

    settings: Settings
    _playwright_cm: Optional[object] = None
    _playwright: Optional[Playwright] = None
    _browser: Optional[Browser] = None
    _context: Optional[BrowserContext] = None
    _page: Optional[Page] = None

    async def __aenter__(self) -> "BrowserSession":  # noqa: D401
        self.settings.ensure_directories()
        self._playwright_cm = async_playwright()
        try:
            self._playwright = await self._playwright_cm.__aenter__()
        except PlaywrightError as exc:
            self._playwright_cm = None
            raise SessionStartupError(f"Unable to start the Playwright driver: {exc.message}") from exc
        browser_type = getattr(self._playwright, self.settings.browser)
        launch_args = self.settings.launch_args()
        logger.info("Launching %s with args: %s", self.settings.browser, launch_args)
        try:
            self._browser = await browser_type.launch(**launch_args)
        except PlaywrightError as exc:
            await self._stop_driver(None, None, None)
            raise SessionStartupError(
                f"Unable to launch {self.settings.browser}: {exc.message}"
            ) from exc
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._context:
            try:
                await self._context.close()
            except Exception:  # pragma: no cover - best effort cleanup
                logger.exception("Failed to close browser context")
            self._context = None
            self._page = None
        if self._browser:
            try:
                await self._browser.close()
            except Exception:  # pragma: no cover - best effort cleanup
                logger.exception("Failed to close browser")
            self._browser = None
        await self._stop_driver(exc_type, exc, tb)

    async def _stop_driver(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._playwright_cm:
            try:
                await self._playwright_cm.__aexit__(exc_type, exc, tb)
            except Exception:
                logger.exception("Failed to stop Playwright driver")
        self._playwright_cm = None
        self._playwright = None

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Browser not initialised")
        return self._browser

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Page not opened; call open_page() first")
        return self._page

    async def open_page(self, url: Optional[str] = None) -> Page:
        """Create the session's page, apply timeouts and load the entry point."""
        self._context = await self.browser.new_context(**self.settings.context_options())
        self._context.set_default_timeout(self.settings.implicit_wait_ms)
        self._context.set_default_navigation_timeout(self.settings.page_load_timeout_ms)
        page = await self._context.new_page()
        self._page = page
        target = url or self.settings.base_url
        logger.info("Navigating to %s", target)
        try:
            response = await page.goto(target, wait_until="load")
        except PlaywrightTimeoutError as exc:
            raise SessionStartupError(
                f"{target} did not load within {self.settings.page_load_timeout_s}s"
            ) from exc
        except PlaywrightError as exc:
            raise SessionStartupError(f"Failed to load {target}: {exc.message}") from exc
        if response is not None and not response.ok:
            raise SessionStartupError(f"{target} answered with HTTP {response.status}")
        return page

    async def capture_debug_artifacts(self, label: str) -> list[Path]:
        """Save a screenshot and the page HTML for post-mortem inspection."""
        if not self._page or not self.settings.capture_on_failure:
            return []
        timestamp = time.strftime("%Y%m%d-%H%M%S")
        debug_dir = self.settings.artifacts_dir
        debug_dir.mkdir(parents=True, exist_ok=True)
        saved: list[Path] = []

        try:
            screenshot_path = debug_dir / f"{label}_{timestamp}.png"
            await self._page.screenshot(path=screenshot_path, full_page=True)
            logger.warning("Saved failure screenshot to %s", screenshot_path)
            saved.append(screenshot_path)
        except Exception as exc:  # pragma: no cover - best effort
            logger.warning("Failed to capture screenshot: %s", exc)

        try:
            html_path = debug_dir / f"{label}_{timestamp}.html"
            html_path.write_text(await self._page.content(), encoding="utf-8")
            logger.warning("Saved failure HTML to %s", html_path)
            saved.append(html_path)
        except Exception as exc:  # pragma: no cover - best effort
            logger.warning("Failed to capture page HTML: %s", exc)
        return saved

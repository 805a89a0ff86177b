"""Page object for the homestay search form."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from playwright.async_api import Locator, Page, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from homestay_e2e.config.settings import Settings
from homestay_e2e.core.dialogs import DialogWatcher
from homestay_e2e.core.errors import ElementNotFoundError, WaitTimeoutError
from homestay_e2e.models import DateInput, SearchResultPage, ValidationAlert, format_date
from homestay_e2e.selectors.search_page import SearchSelectors

logger = logging.getLogger(__name__)


class SearchPage(Protocol):
    """Semantic operations offered by the search form, independent of the DOM backend."""

    @property
    def current_url(self) -> str: ...

    async def select_district(self, name: str) -> None: ...

    async def enter_check_in_date(self, value: DateInput) -> None: ...

    async def enter_check_out_date(self, value: DateInput) -> None: ...

    async def leave_check_out_date_blank(self) -> None: ...

    async def select_guests(self, count: int | str) -> None: ...

    async def click_search_button(self) -> None: ...

    async def check_in_value(self) -> str: ...

    async def check_out_value(self) -> str: ...

    async def wait_for_results_route(self) -> None: ...

    async def read_results(self) -> SearchResultPage: ...

    async def poll_for_dialog(self, timeout_s: Optional[float] = None) -> Optional[ValidationAlert]: ...

    def discard_dialogs(self) -> list[ValidationAlert]: ...


class PlaywrightSearchPage:
    """``SearchPage`` backed by a Playwright page.

    Every lookup waits explicitly (bounded by ``settings.explicit_wait_s``) for the
    control to become visible; a miss is reported as ``ElementNotFoundError``.
    """

    def __init__(self, page: Page, settings: Settings, dialogs: Optional[DialogWatcher] = None) -> None:
        self.page = page
        self.settings = settings
        self.dialogs = dialogs or DialogWatcher().attach(page)

    @property
    def current_url(self) -> str:
        return self.page.url

    async def select_district(self, name: str) -> None:
        logger.info("Selecting district %s", name)
        district = await self._require(SearchSelectors.district_select)
        await district.select_option(name)

    async def enter_check_in_date(self, value: DateInput) -> None:
        text = format_date(value)
        logger.info("Entering check-in date %s", text)
        field = await self._require(SearchSelectors.check_in_input)
        await field.fill(text)

    async def enter_check_out_date(self, value: DateInput) -> None:
        text = format_date(value)
        logger.info("Entering check-out date %s", text)
        field = await self._require(SearchSelectors.check_out_input)
        await field.fill(text)

    async def leave_check_out_date_blank(self) -> None:
        field = await self._require(SearchSelectors.check_out_input)
        await field.fill("")
        await expect(field).to_have_value("", timeout=self.settings.explicit_wait_ms)

    async def select_guests(self, count: int | str) -> None:
        logger.info("Selecting %s guest(s)", count)
        guests = await self._require(SearchSelectors.guests_select)
        tag = await guests.evaluate("element => element.tagName")
        if str(tag).lower() == "select":
            await guests.select_option(str(count))
        else:
            await guests.fill(str(count))

    async def click_search_button(self) -> None:
        logger.info("Submitting search")
        button = await self._require(SearchSelectors.search_button)
        try:
            await button.click()
            await self.page.wait_for_load_state("load", timeout=self.settings.page_load_timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                f"Search submission did not settle within {self.settings.page_load_timeout_s}s"
            ) from exc

    async def check_in_value(self) -> str:
        field = await self._require(SearchSelectors.check_in_input)
        return await field.input_value()

    async def check_out_value(self) -> str:
        field = await self._require(SearchSelectors.check_out_input)
        return await field.input_value()

    async def wait_for_results_route(self) -> None:
        marker = self.settings.results_route_marker
        try:
            await self.page.wait_for_url(lambda url: marker in url, timeout=self.settings.explicit_wait_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                f"URL never contained {marker!r} within {self.settings.explicit_wait_s}s (at {self.page.url})"
            ) from exc

    async def read_results(self) -> SearchResultPage:
        container = await self._require(SearchSelectors.results_container)
        items = container.locator(SearchSelectors.result_items)
        count = await items.count()
        pagination = self.page.locator(SearchSelectors.pagination).first
        snapshot = SearchResultPage(
            current_url=self.page.url,
            results_visible=await container.is_visible(),
            pagination_visible=await pagination.is_visible(),
            first_result_visible=bool(count) and await items.first.is_visible(),
            result_count=count,
        )
        logger.info("Results page: %s", snapshot.to_dict())
        return snapshot

    async def poll_for_dialog(self, timeout_s: Optional[float] = None) -> Optional[ValidationAlert]:
        if timeout_s is None:
            timeout_s = self.settings.dialog_wait_s
        return await self.dialogs.poll(timeout_s)

    def discard_dialogs(self) -> list[ValidationAlert]:
        return self.dialogs.drain()

    async def _require(self, selector: str) -> Locator:
        locator = self.page.locator(selector).first
        try:
            await locator.wait_for(state="visible", timeout=self.settings.explicit_wait_ms)
        except PlaywrightTimeoutError as exc:
            logger.error("Selector %s not visible at %s", selector, self.page.url)
            raise ElementNotFoundError(selector, self.settings.explicit_wait_s) from exc
        return locator

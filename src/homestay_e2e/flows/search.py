"""Search workflow on top of the ``SearchPage`` capability."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from homestay_e2e.config.settings import Settings
from homestay_e2e.core.errors import WaitTimeoutError
from homestay_e2e.models import SearchCriteria, SearchOutcome, ValidationAlert
from homestay_e2e.pages.search_page import SearchPage

logger = logging.getLogger(__name__)

_SUBMIT_POLL_INTERVAL_S = 0.25


class SearchFlow:
    """Fill the search form from a ``SearchCriteria`` and submit it."""

    def __init__(self, page: SearchPage, settings: Settings) -> None:
        self.page = page
        self.settings = settings

    async def apply(self, criteria: SearchCriteria) -> Optional[ValidationAlert]:
        """Enter ``criteria``; return the alert if the page rejected a date."""
        logger.info("Applying search criteria %s", criteria.to_dict())
        self.page.discard_dialogs()
        await self.page.select_district(criteria.district)
        if criteria.check_in is not None:
            await self.page.enter_check_in_date(criteria.check_in)
            alert = await self.page.poll_for_dialog(0)
            if alert:
                return alert
        if criteria.check_out is None:
            await self.page.leave_check_out_date_blank()
        else:
            await self.page.enter_check_out_date(criteria.check_out)
            alert = await self.page.poll_for_dialog(0)
            if alert:
                return alert
        await self.page.select_guests(criteria.guests)
        return None

    async def submit(self) -> SearchOutcome:
        """Click search and wait until either the results route loads or an alert appears."""
        self.page.discard_dialogs()
        await self.page.click_search_button()
        marker = self.settings.results_route_marker
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.settings.explicit_wait_s
        while marker not in self.page.current_url:
            alert = await self.page.poll_for_dialog(_SUBMIT_POLL_INTERVAL_S)
            if alert:
                logger.info("Search rejected: %s", alert.message)
                return SearchOutcome(alert=alert)
            if loop.time() >= deadline:
                raise WaitTimeoutError(
                    f"Neither {marker!r} nor a validation alert appeared within "
                    f"{self.settings.explicit_wait_s}s (at {self.page.current_url})"
                )
        return SearchOutcome(results=await self.page.read_results())

    async def run(self, criteria: SearchCriteria) -> SearchOutcome:
        alert = await self.apply(criteria)
        if alert:
            logger.info("Criteria rejected before submission: %s", alert.message)
            return SearchOutcome(alert=alert)
        return await self.submit()

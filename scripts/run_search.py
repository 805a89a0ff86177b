"""Run one homestay search by hand and print what the page answered."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from datetime import date
from typing import Optional

from homestay_e2e.config.settings import Settings
from homestay_e2e.core.browser import BrowserSession
from homestay_e2e.core.logging import configure_logging
from homestay_e2e.flows.search import SearchFlow
from homestay_e2e.models import SearchCriteria, SearchOutcome
from homestay_e2e.pages.search_page import PlaywrightSearchPage


def _parse_date(value: str) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)


async def run(settings: Settings, criteria: SearchCriteria) -> SearchOutcome:
    async with BrowserSession(settings) as session:
        page = await session.open_page()
        flow = SearchFlow(PlaywrightSearchPage(page, settings), settings)
        try:
            return await flow.run(criteria)
        except Exception:
            await session.capture_debug_artifacts("run_search")
            raise


def main() -> None:
    parser = argparse.ArgumentParser(description="Submit a homestay search and report the outcome")
    parser.add_argument("--district", default="Hải Châu")
    parser.add_argument("--check-in", type=_parse_date, default=None, help="YYYY-MM-DD")
    parser.add_argument("--check-out", type=_parse_date, default=None, help="YYYY-MM-DD; omit to leave blank")
    parser.add_argument("--guests", type=int, default=2)
    parser.add_argument("--base-url", help="Override HOMESTAY_BASE_URL")
    parser.add_argument("--headed", action="store_true")
    args = parser.parse_args()

    overrides: dict[str, object] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.headed:
        overrides["headless"] = False
    settings = Settings(**overrides)
    configure_logging(settings.log_level, settings.log_dir)

    criteria = SearchCriteria(
        district=args.district,
        guests=args.guests,
        check_in=args.check_in,
        check_out=args.check_out,
    )
    outcome = asyncio.run(run(settings, criteria))
    logging.getLogger(__name__).info("Search finished (rejected=%s)", outcome.rejected)
    print(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

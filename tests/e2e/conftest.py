from __future__ import annotations

import html
import logging
import os
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import AsyncIterator, Iterator
from urllib.parse import parse_qs, urlsplit

import pytest
import pytest_asyncio

from homestay_e2e.config.settings import Settings
from homestay_e2e.core.browser import BrowserSession
from homestay_e2e.pages.search_page import PlaywrightSearchPage

logger = logging.getLogger(__name__)

SITE_DIR = Path(__file__).parent / "site"


class _HomestayHandler(BaseHTTPRequestHandler):
    """Serves a replica of the homestay search page and its results servlet."""

    def do_GET(self) -> None:  # noqa: N802
        parts = urlsplit(self.path)
        if parts.path == "/healingland/index.jsp":
            self._send((SITE_DIR / "index.html").read_text(encoding="utf-8"))
        elif parts.path == "/healingland/searchServlet":
            query = parse_qs(parts.query)
            body = (SITE_DIR / "results.html").read_text(encoding="utf-8").format(
                district=html.escape(query.get("district", [""])[0]),
                guests=html.escape(query.get("guests", ["1"])[0]),
            )
            self._send(body)
        else:
            self.send_error(404)

    def _send(self, body: str) -> None:
        payload = body.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.debug("stub site: " + format, *args)


@pytest.fixture(scope="session")
def stub_site() -> Iterator[str]:
    server = ThreadingHTTPServer(("127.0.0.1", 0), _HomestayHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}/healingland/index.jsp"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture(scope="session")
def e2e_settings(request: pytest.FixtureRequest) -> Settings:
    settings = Settings()
    if "HOMESTAY_BASE_URL" not in os.environ:
        settings = settings.model_copy(update={"base_url": request.getfixturevalue("stub_site")})
    logger.info("Running e2e scenarios against %s", settings.base_url)
    return settings


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest_asyncio.fixture
async def browser_session(
    e2e_settings: Settings, request: pytest.FixtureRequest
) -> AsyncIterator[BrowserSession]:
    async with BrowserSession(e2e_settings) as session:
        await session.open_page()
        try:
            yield session
        finally:
            report = getattr(request.node, "rep_call", None)
            if report is not None and report.failed:
                await session.capture_debug_artifacts(request.node.name)


@pytest.fixture
def search_page(browser_session: BrowserSession, e2e_settings: Settings) -> PlaywrightSearchPage:
    return PlaywrightSearchPage(browser_session.page, e2e_settings)

"""Guaranteed teardown of the page and browser created for one request.

Usage::

    async with reclaiming() as scope:
        scope.browser = await launch_browser(pw.chromium)
        scope.page = await new_desktop_page(scope.browser)
        ...

Whatever happens inside the block, the page is closed first and the browser
second.  Errors raised while closing are logged and dropped so they never
replace the exception (or result) the block produced.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, AsyncIterator, Optional

if TYPE_CHECKING:
    from playwright.async_api import Browser, Page

logger = logging.getLogger(__name__)


@dataclass
class SessionScope:
    """The browser and page owned by a single request, if they were created."""

    browser: Optional["Browser"] = None
    page: Optional["Page"] = None


async def release(scope: SessionScope) -> None:
    """Close the page, then the browser.  Safe to call more than once."""
    page, scope.page = scope.page, None
    if page is not None:
        try:
            if not page.is_closed():
                await page.close()
        except Exception as exc:  # noqa: BLE001
            logger.debug("scraper: ignoring error while closing page: %s", exc)

    browser, scope.browser = scope.browser, None
    if browser is not None:
        try:
            await browser.close()
        except Exception as exc:  # noqa: BLE001
            logger.debug("scraper: ignoring error while closing browser: %s", exc)


@asynccontextmanager
async def reclaiming() -> AsyncIterator[SessionScope]:
    """Yield an empty :class:`SessionScope` and release it on exit."""
    scope = SessionScope()
    try:
        yield scope
    finally:
        await release(scope)

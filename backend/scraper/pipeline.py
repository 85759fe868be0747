"""One scrape request, end to end: fragment in, text snippets out."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import async_playwright

from backend.scraper.extractor import extract_text_nodes
from backend.scraper.models import ExtractionResult, LaunchConfiguration
from backend.scraper.navigator import navigate, new_desktop_page
from backend.scraper.reclaimer import reclaiming
from backend.scraper.sanitizer import require_fragment
from backend.scraper.session import launch_browser
from backend.scraper.target import resolve_target

logger = logging.getLogger(__name__)


async def scrape_fragment(
    raw: Optional[str],
    *,
    config: Optional[LaunchConfiguration] = None,
) -> ExtractionResult:
    """Render the trusted page addressed by *raw* and return its long text nodes.

    The fragment is validated before anything is started, so an
    :class:`~backend.scraper.errors.InvalidInputError` never leaves a browser
    behind.  From the launch onwards every step runs inside
    :func:`~backend.scraper.reclaimer.reclaiming`.

    Raises:
        InvalidInputError: The fragment was missing or rejected.
        FatalLaunchError: No browser could be started.
        NavigationError: The page failed to load within the bound.
        ExtractionError: The in-page query failed.
    """
    fragment = require_fragment(raw)
    url = resolve_target(fragment)

    async with async_playwright() as pw:
        async with reclaiming() as scope:
            scope.browser = await launch_browser(pw.chromium, config)
            scope.page = await new_desktop_page(scope.browser)
            await navigate(scope.page, url)
            result = await extract_text_nodes(scope.page)

    logger.info("scraper: %s yielded %d snippets", url, result.count)
    return result

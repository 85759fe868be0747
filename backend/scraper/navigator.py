"""Page creation and bounded navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from backend.config import settings
from backend.scraper.errors import NavigationError

if TYPE_CHECKING:
    from playwright.async_api import Browser, Page, Response

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DESKTOP_VIEWPORT = {"width": 1366, "height": 768}

# Playwright's "network settled" heuristic: no connections for 500 ms.
WAIT_UNTIL = "networkidle"


async def new_desktop_page(browser: "Browser") -> "Page":
    """Open a page that renders like a desktop Chrome window."""
    return await browser.new_page(
        user_agent=DESKTOP_USER_AGENT,
        viewport=DESKTOP_VIEWPORT,
    )


async def navigate(
    page: "Page",
    url: str,
    timeout: Optional[float] = None,
) -> Optional["Response"]:
    """Load *url* in *page* and wait for the network to settle.

    Args:
        page: The page to navigate.
        url: Absolute target URL.
        timeout: Bound in seconds; defaults to ``settings.navigation_timeout``.

    Raises:
        NavigationError: On timeout, connection failure, or a non-2xx response.
    """
    timeout_ms = (
        int(timeout * 1000) if timeout is not None else settings.navigation_timeout_ms
    )
    try:
        response = await page.goto(url, wait_until=WAIT_UNTIL, timeout=timeout_ms)
    except Exception as exc:  # noqa: BLE001
        raise NavigationError(str(exc)) from exc

    if response is not None and not 200 <= response.status < 300:
        raise NavigationError(f"{url} responded with HTTP {response.status}")
    return response

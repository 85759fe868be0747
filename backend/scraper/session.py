"""Browser launch with a single fallback attempt.

The state machine is deliberately small:

    default launch ──ok──▶ ready
          │
        fails
          ▼
    locate executable ──none──▶ FatalLaunchError
          │
        found
          ▼
    fallback launch ──ok──▶ ready
          │
        fails ──────────────▶ FatalLaunchError

At most two launch attempts are made and no browser exists when
:class:`~backend.scraper.errors.FatalLaunchError` is raised.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from backend.scraper.errors import FatalLaunchError
from backend.scraper.locator import locate_executable
from backend.scraper.models import LaunchConfiguration

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserType

logger = logging.getLogger(__name__)


async def launch_browser(
    browser_type: "BrowserType",
    config: Optional[LaunchConfiguration] = None,
    *,
    locate: Optional[Callable[[], Optional[str]]] = None,
) -> "Browser":
    """Launch a browser from *browser_type*, falling back to a located executable.

    Args:
        browser_type: A Playwright ``BrowserType`` (normally ``playwright.chromium``).
        config: Launch arguments for the first attempt.  Defaults to
            :class:`LaunchConfiguration` with the container-safe flags.
        locate: Called once, only after the first attempt fails, to find an
            executable for the second attempt.  Defaults to
            :func:`~backend.scraper.locator.locate_executable`.

    Raises:
        FatalLaunchError: If no executable was found or the fallback also failed.
    """
    config = config or LaunchConfiguration()
    locate = locate or locate_executable

    try:
        return await browser_type.launch(**config.launch_kwargs())
    except Exception as exc:  # noqa: BLE001
        primary = exc

    logger.warning("scraper: default browser launch failed: %s", primary)

    executable_path = locate()
    if not executable_path:
        raise FatalLaunchError(primary) from primary

    logger.warning("scraper: retrying browser launch with %s", executable_path)
    try:
        return await browser_type.launch(
            **config.with_executable(executable_path).launch_kwargs()
        )
    except Exception as exc:  # noqa: BLE001
        raise FatalLaunchError(primary, exc, executable_path) from exc

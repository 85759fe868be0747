"""Exception hierarchy for the scrape pipeline.

Every error carries a short ``category`` so the response layer and the CLI
can report what went wrong without string matching on messages.
"""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for all errors raised by :mod:`backend.scraper`."""

    category = "scraper"


class InvalidInputError(ScraperError):
    """The ``href`` fragment was missing or rejected by the sanitizer."""

    category = "invalid_input"

    def __init__(self, message: str = "Invalid or missing href parameter") -> None:
        super().__init__(message)


class LaunchFailure(ScraperError):
    """The browser could not be started."""

    category = "launch"


class FatalLaunchError(LaunchFailure):
    """Both the default and the fallback launch failed (or no fallback existed)."""

    category = "fatal_launch"
    remediation = (
        "Install a browser with `playwright install chromium` or point "
        "CHROME_PATH at a Chrome/Chromium executable."
    )

    def __init__(
        self,
        primary: BaseException,
        fallback: Optional[BaseException] = None,
        executable_path: Optional[str] = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.executable_path = executable_path
        if fallback is None:
            reason = f"default launch failed ({primary}) and no fallback executable was found"
        else:
            reason = (
                f"default launch failed ({primary}); fallback launch with "
                f"{executable_path!r} failed ({fallback})"
            )
        super().__init__(f"Browser launch failed: {reason}. {self.remediation}")


class NavigationError(ScraperError):
    """Page load timed out, failed at the transport level, or returned non-2xx."""

    category = "navigation"


class ExtractionError(ScraperError):
    """The in-page text query raised inside the rendered document."""

    category = "extraction"

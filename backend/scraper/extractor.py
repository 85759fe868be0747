"""In-page text harvesting: turns a rendered page into an :class:`ExtractionResult`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List

from backend.scraper.errors import ExtractionError
from backend.scraper.models import ExtractionResult

if TYPE_CHECKING:
    from playwright.async_api import Page

MIN_TEXT_LENGTH = 40

# Every element under <body>, in document order; parents and children are
# reported independently.  Length is measured by the page (UTF-16 units after
# JS trim()), so the threshold is applied here and nowhere else.
_TEXT_NODES_SCRIPT = """
(minLength) => Array.from(document.querySelectorAll('body *'))
    .map((el) => (el.textContent || '').trim())
    .filter((text) => text.length > minLength)
"""


def keep_strings(texts: Iterable[Any]) -> List[str]:
    """Drop anything the page returned that is not a non-empty string, keeping order."""
    return [text for text in texts if isinstance(text, str) and text]


async def extract_text_nodes(
    page: "Page",
    min_length: int = MIN_TEXT_LENGTH,
) -> ExtractionResult:
    """Collect the text of every ``body`` descendant longer than *min_length*.

    Raises:
        ExtractionError: If evaluation inside the page fails.
    """
    try:
        texts = await page.evaluate(_TEXT_NODES_SCRIPT, min_length)
    except Exception as exc:  # noqa: BLE001
        raise ExtractionError(str(exc)) from exc

    return ExtractionResult(url=page.url, snippets=keep_strings(texts or []))

"""The fixed JSON envelope returned by the scrape endpoint and the CLI.

Exactly one of two shapes is produced:

    {"success": true,  "count": <int>, "data": [<str>, ...]}
    {"success": false, "error": <str>, "details": <str>}   # details optional
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.scraper.errors import InvalidInputError
from backend.scraper.models import ErrorReport, ExtractionResult

INVALID_INPUT_MESSAGE = "Invalid or missing href parameter"
SCRAPE_FAILED_MESSAGE = "Scraping failed"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeSuccess(BaseModel):
    success: Literal[True] = True
    count: int
    data: List[str]


class ScrapeFailure(BaseModel):
    success: Literal[False] = False
    error: str
    details: Optional[str] = None


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_success(result: ExtractionResult) -> tuple[int, dict[str, Any]]:
    body = ScrapeSuccess(count=result.count, data=list(result.snippets))
    return 200, body.model_dump()


def format_failure(exc: BaseException) -> tuple[int, dict[str, Any]]:
    """Map any exception to its status code and error envelope."""
    if isinstance(exc, InvalidInputError):
        body = ScrapeFailure(error=INVALID_INPUT_MESSAGE)
        return 400, body.model_dump(exclude_none=True)
    report = ErrorReport.from_exception(exc)
    body = ScrapeFailure(error=SCRAPE_FAILED_MESSAGE, details=report.message)
    return 500, body.model_dump(exclude_none=True)


def envelope_response(status_code: int, body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body)

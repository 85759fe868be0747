"""Scrape endpoint.

Routes
------
GET /api/getFullPage?href=widgets/agencies/982   → scrape_fragment
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from backend.api.envelope import (
    ScrapeFailure,
    ScrapeSuccess,
    envelope_response,
    format_failure,
    format_success,
)
from backend.scraper.errors import InvalidInputError
from backend.scraper.pipeline import scrape_fragment

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/getFullPage",
    response_model=ScrapeSuccess,
    responses={400: {"model": ScrapeFailure}, 500: {"model": ScrapeFailure}},
)
async def get_full_page(
    href: Optional[str] = Query(
        None, description="Path fragment appended to the trusted origin."
    ),
) -> JSONResponse:
    """Render the page addressed by ``href`` and return its long text snippets.

    Always answers with the scrape envelope; a missing ``href`` is reported
    as a 400 envelope rather than a validation error.
    """
    try:
        result = await scrape_fragment(href)
    except InvalidInputError as exc:
        return envelope_response(*format_failure(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("scrape API error for href=%r", href)
        return envelope_response(*format_failure(exc))
    return envelope_response(*format_success(result))

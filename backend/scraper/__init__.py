"""Scraper package: fragment validation, headless rendering & text extraction."""

from backend.scraper.errors import (
    ExtractionError,
    FatalLaunchError,
    InvalidInputError,
    LaunchFailure,
    NavigationError,
    ScraperError,
)
from backend.scraper.models import ErrorReport, ExtractionResult, LaunchConfiguration
from backend.scraper.pipeline import scrape_fragment
from backend.scraper.sanitizer import sanitize_fragment

__all__ = [
    "scrape_fragment",
    "sanitize_fragment",
    "ExtractionResult",
    "ErrorReport",
    "LaunchConfiguration",
    "ScraperError",
    "InvalidInputError",
    "LaunchFailure",
    "FatalLaunchError",
    "NavigationError",
    "ExtractionError",
]

"""Centralised settings for the full page scraper backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() not in ("0", "false", "no", "off")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    chrome_path: Optional[str] = field(
        default_factory=lambda: os.environ.get("CHROME_PATH") or None
    )
    headless: bool = field(
        default_factory=lambda: _env_flag("BROWSER_HEADLESS", "true")
    )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("NAVIGATION_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    @property
    def navigation_timeout_ms(self) -> int:
        """Navigation bound in milliseconds, as Playwright expects it."""
        return int(self.navigation_timeout * 1000)


# Module-level singleton, import this everywhere:
#   from backend.config import settings
settings = Settings()

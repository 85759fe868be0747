"""Validation of the untrusted ``href`` fragment.

The fragment is appended to a fixed trusted origin, so anything that could
move the request to another host or out of the path is rejected outright.
There is no best-effort cleaning: a fragment is either accepted as a whole
(minus leading slashes) or refused.
"""

from __future__ import annotations

import re
from typing import Optional

from backend.scraper.errors import InvalidInputError

MAX_FRAGMENT_LENGTH = 200

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)
_ALLOWED = re.compile(r"[A-Za-z0-9\-_./]+")


def sanitize_fragment(raw: Optional[str]) -> Optional[str]:
    """Return the normalised fragment, or ``None`` if *raw* is not acceptable.

    Rules, applied in order:

    1. ``None`` or blank after trimming is rejected.
    2. ``http://`` / ``https://`` prefixes and protocol-relative ``//`` are rejected.
    3. Any ``..`` is rejected.
    4. Characters other than letters, digits, ``-``, ``_``, ``.`` and ``/`` are rejected.
    5. Leading slashes are stripped.
    6. The remainder must be 1–200 characters long.
    """
    if not raw:
        return None

    trimmed = raw.strip()
    if not trimmed:
        return None

    if _ABSOLUTE_URL.match(trimmed) or trimmed.startswith("//"):
        return None

    if ".." in trimmed:
        return None

    if not _ALLOWED.fullmatch(trimmed):
        return None

    normalized = trimmed.lstrip("/")
    if not normalized or len(normalized) > MAX_FRAGMENT_LENGTH:
        return None

    return normalized


def require_fragment(raw: Optional[str]) -> str:
    """Like :func:`sanitize_fragment` but raise :class:`InvalidInputError` on rejection."""
    fragment = sanitize_fragment(raw)
    if fragment is None:
        raise InvalidInputError()
    return fragment

"""Discovery of a browser executable for the fallback launch.

Playwright normally launches the Chromium build it downloaded itself.  When
that build is missing (slim containers, fresh CI images) we look for a
system-installed Chrome/Chromium instead.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from backend.config import settings

# Well-known installation paths, in probe order, per platform family.
CANDIDATE_PATHS: Mapping[str, Sequence[str]] = {
    "linux": (
        "/usr/bin/google-chrome",
        "/usr/bin/google-chrome-stable",
        "/usr/bin/chromium",
        "/usr/bin/chromium-browser",
        "/snap/bin/chromium",
    ),
    "darwin": (
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "/Applications/Chromium.app/Contents/MacOS/Chromium",
    ),
    "win32": (
        r"C:\Program Files\Google\Chrome\Application\chrome.exe",
        r"C:\Program Files (x86)\Google\Chrome\Application\chrome.exe",
    ),
}


def platform_family(platform: Optional[str] = None) -> str:
    """Map ``sys.platform`` values (``linux2``, ``cygwin`` …) onto table keys."""
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "darwin"
    if platform in ("win32", "cygwin"):
        return "win32"
    return platform


def _path_exists(path: str) -> bool:
    return Path(path).is_file()


def _probe(path: str, exists: Callable[[str], bool]) -> bool:
    try:
        return bool(exists(path))
    except (OSError, ValueError):
        return False


def locate_executable(
    override: Optional[str] = None,
    platform: Optional[str] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    """Return the first existing browser executable, or ``None``.

    The override (``settings.chrome_path`` unless given) is checked before the
    platform's entry in :data:`CANDIDATE_PATHS`.  Probe errors count as
    "not found".
    """
    exists = exists or _path_exists
    if override is None:
        override = settings.chrome_path

    candidates: list[str] = []
    if override and override.strip():
        candidates.append(override.strip())
    candidates.extend(CANDIDATE_PATHS.get(platform_family(platform), ()))

    for candidate in candidates:
        if _probe(candidate, exists):
            return candidate
    return None

"""Data models for the scrape pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from backend.config import settings

# Flags required to run Chromium inside containers without a user namespace.
DEFAULT_LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


@dataclass(frozen=True)
class LaunchConfiguration:
    """Arguments for a single ``BrowserType.launch`` attempt."""

    args: tuple[str, ...] = DEFAULT_LAUNCH_ARGS
    headless: bool = field(default_factory=lambda: settings.headless)
    executable_path: Optional[str] = None

    def with_executable(self, path: str) -> "LaunchConfiguration":
        """Return a copy of this configuration launching *path* instead."""
        return replace(self, executable_path=path)

    def launch_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headless": self.headless, "args": list(self.args)}
        if self.executable_path:
            kwargs["executable_path"] = self.executable_path
        return kwargs


@dataclass
class ExtractionResult:
    """Text snippets harvested from one rendered page, in document order."""

    url: str
    snippets: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.snippets)


@dataclass
class ErrorReport:
    """A failure summarised for callers that do not want the exception itself."""

    category: str
    message: str
    remediation: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorReport":
        return cls(
            category=getattr(exc, "category", "unexpected"),
            message=str(exc) or exc.__class__.__name__,
            remediation=getattr(exc, "remediation", None),
        )

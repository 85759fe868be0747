"""Composition of sanitised fragments into absolute target URLs."""

from __future__ import annotations

# The only host this service will ever render.  Never derived from input.
TRUSTED_ORIGIN = "https://connect.pierapps.com"


def resolve_target(fragment: str) -> str:
    """Return the absolute URL for an already-sanitised *fragment*."""
    return f"{TRUSTED_ORIGIN}/{fragment}"

"""Full page scraper CLI: run the scrape pipeline without the HTTP server.

Usage:
    python cli/main.py --help
    python cli/main.py scrape --href widgets/agencies/982
    python cli/main.py locate-browser
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Optional

import typer

from backend.api.envelope import format_failure, format_success
from backend.config import settings

app = typer.Typer(
    name="fullpage",
    help="Full page scraper CLI.",
    no_args_is_help=True,
)


@app.command("scrape")
def scrape(
    href: str = typer.Option(..., help="Path fragment on the trusted origin."),
) -> None:
    """Render a page and print the JSON envelope the API would return."""
    from backend.scraper import scrape_fragment

    try:
        result = asyncio.run(scrape_fragment(href))
    except Exception as exc:  # noqa: BLE001
        status, body = format_failure(exc)
    else:
        status, body = format_success(result)

    typer.echo(json.dumps(body, indent=2, ensure_ascii=False))
    if status != 200:
        raise typer.Exit(1)


@app.command("locate-browser")
def locate_browser(
    override: Optional[str] = typer.Option(
        None, help="Executable to check before the well-known locations."
    ),
) -> None:
    """Show which executable a fallback launch would use."""
    from backend.scraper.locator import locate_executable

    path = locate_executable(override=override)
    if path is None:
        typer.echo("[locate-browser] No browser executable found.")
        if not (override or settings.chrome_path):
            typer.echo("[locate-browser] Set CHROME_PATH to point at one.")
        raise typer.Exit(1)
    typer.echo(f"[locate-browser] {path}")


if __name__ == "__main__":
    app()

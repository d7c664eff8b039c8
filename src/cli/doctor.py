"""`creature-dex doctor`: show the effective settings and try the list endpoint.

`doctor configure` persists `--base-url` / `--limit` to the user `.env`
read by `AppSettings`.
"""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, save_user_settings, user_env_path

app = typer.Typer(no_args_is_help=True, help="Check creature-dex settings and API reachability.")

_console = Console()


async def _fetch_list_once(settings: AppSettings) -> tuple[bool, str]:
    """One GET of the list URL; reports status code and result count."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.list_url)
        response.raise_for_status()
        results = response.json().get("results", [])
    except (httpx.HTTPError, ValueError, AttributeError) as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return True, f"HTTP {response.status_code}, {len(results)} entries"


@app.command()
def run() -> None:
    """Print settings and fetch the list once."""

    settings = AppSettings()

    table = Table(title="creature-dex doctor")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("List URL", settings.list_url)
    table.add_row("Timeout", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Hide delay", f"{settings.loading_hide_delay_seconds:g}s")
    table.add_row("User .env", str(user_env_path()))

    ok, detail = asyncio.run(_fetch_list_once(settings))
    table.add_row("List endpoint", f"[green]{escape(detail)}[/green]" if ok else f"[red]{escape(detail)}[/red]")

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def configure(
    base_url: str | None = typer.Option(None, "--base-url", help="List endpoint of the creature API."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=2000, help="Entries requested from the list."),
) -> None:
    """Save --base-url / --limit to the user .env."""

    updates = {
        key: value
        for key, value in (
            ("CREATURE_DEX_API_BASE_URL", base_url.strip() if base_url else None),
            ("CREATURE_DEX_LIST_LIMIT", None if limit is None else str(limit)),
        )
        if value
    }
    if not updates:
        raise typer.BadParameter("nothing to save; pass --base-url and/or --limit")

    path = save_user_settings(updates)
    _console.print(f"[green]Updated[/green] {', '.join(sorted(updates))} in {path}")

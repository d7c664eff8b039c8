"""creature-dex CLI (Typer).

Commands:
- `list`   load the catalog and print every rendered entry
- `show`   open the detail view of one creature by exact name
- `browse` interactive loop: pick an entry, read its details, close, repeat
- `doctor` diagnostics and user configuration
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import typer
from rich.console import Console

from adapters.creature_api import CreatureApiClient
from cli.doctor import app as doctor_app
from cli.ui_components import (
    RichListSurface,
    RichLoadingSurface,
    RichModalSurface,
    build_list_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.view_models import ClickTarget, ListItem
from core.interfaces.surfaces import CreatureSource
from core.logging_config import setup_logging
from core.services.catalog import CatalogApp
from core.services.modal_controller import ESCAPE_KEY, ModalState

app = typer.Typer(no_args_is_help=True, help="Browse a remote creature catalog from the terminal.")
app.add_typer(doctor_app, name="doctor")

_console = Console()

_CLOSE_INPUTS = {"", "esc", "escape", "q"}
_QUIT_INPUTS = {"x", "quit", "exit"}


@dataclass
class _Session:
    catalog: CatalogApp
    list_surface: RichListSurface
    modal_surface: RichModalSurface
    loading_surface: RichLoadingSurface


def _build_api(settings: AppSettings) -> CreatureSource:
    return CreatureApiClient(settings)


def _build_session(settings: AppSettings) -> _Session:
    list_surface = RichListSurface()
    modal_surface = RichModalSurface(_console)
    loading_surface = RichLoadingSurface(_console)
    catalog = CatalogApp(
        api=_build_api(settings),
        list_surface=list_surface,
        modal_surface=modal_surface,
        loading_surface=loading_surface,
        settings=settings,
    )
    return _Session(catalog, list_surface, modal_surface, loading_surface)


def _resolve_choice(choice: str, items: list[ListItem]) -> ListItem | None:
    if choice.isdigit():
        index = int(choice) - 1
        return items[index] if 0 <= index < len(items) else None
    for item in items:
        if item.label == choice:
            return item
    return None


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override CREATURE_DEX_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    settings = AppSettings()
    setup_logging(log_level or settings.log_level)


@app.command(name="list")
def list_command() -> None:
    """Load the catalog and print every entry whose sprite resolved."""

    session = _build_session(AppSettings())
    try:
        asyncio.run(session.catalog.start())
    finally:
        session.loading_surface.close()

    if not session.list_surface.items:
        _console.print("[dim]Nothing to show.[/dim]")
        return
    _console.print(build_list_table(session.list_surface.items))


@app.command()
def show(name: str = typer.Argument(..., help="Exact creature name, e.g. 'pikachu'.")) -> None:
    """Open the detail view of one creature."""

    session = _build_session(AppSettings())

    async def _run() -> bool:
        await session.catalog.renderer.load_list()
        return await session.catalog.select(name)

    try:
        shown = asyncio.run(_run())
    finally:
        session.loading_surface.close()

    if not shown:
        _console.print(f"[dim]No details for {name!r}.[/dim]")
        raise typer.Exit(code=1)


async def _ask(session: _Session, text: str, **kwargs) -> str:
    # The spinner and the prompt share the terminal; let pending hides finish first.
    await session.catalog.loading.settle()
    session.loading_surface.close()
    answer = await asyncio.to_thread(typer.prompt, text, **kwargs)
    return str(answer).strip()


async def _browse(session: _Session) -> None:
    catalog = session.catalog
    await catalog.start()
    items = session.list_surface.items

    while True:
        _console.print(build_list_table(items))
        choice = await _ask(session, "Number or name (x to quit)")
        if choice.lower() in _QUIT_INPUTS:
            return

        item = _resolve_choice(choice, items)
        if item is None:
            _console.print(f"[yellow]Unknown entry:[/yellow] {choice}")
            continue

        await item.select()
        while catalog.modal.state is ModalState.VISIBLE:
            action = (
                await _ask(
                    session,
                    "[esc/q] close  [b] backdrop  [c] close button",
                    default="",
                    show_default=False,
                )
            ).lower()
            if action in _CLOSE_INPUTS:
                catalog.modal.handle_key(ESCAPE_KEY)
            elif action == "b":
                catalog.modal.handle_click(ClickTarget.BACKDROP)
            elif action == "c":
                catalog.modal.hide()
            else:
                catalog.modal.handle_click(ClickTarget.CONTENT)


@app.command()
def browse() -> None:
    """Interactive catalog browser."""

    print_banner(_console)
    session = _build_session(AppSettings())
    try:
        asyncio.run(_browse(session))
    finally:
        session.loading_surface.close()


def run() -> None:
    app()


if __name__ == "__main__":
    run()

"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The surface classes implement the Core's presentation protocols, so the
  catalog services render to the terminal without knowing about Rich.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from core.domain.view_models import ListItem, ModalContent


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive mode only)."""

    title = Text("CREATURE-DEX", style="bold cyan")
    subtitle = Text("Catalog viewer • Sprites • Details", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_list_table(items: list[ListItem]) -> Table:
    """Rich table of rendered list items, numbered in render order."""

    table = Table(title="Creatures")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Sprite", style="magenta")
    for index, item in enumerate(items, start=1):
        table.add_row(str(index), item.label, item.sprite_url or "-")
    return table


def build_modal_panel(content: ModalContent) -> Panel:
    """Panel for the detail view."""

    body = Text()
    if content.artwork_url:
        body.append("Artwork: ", style="bold")
        body.append(content.artwork_url + "\n", style="magenta")
    body.append(f"Height: {content.height}\n")
    body.append(f"Weight: {content.weight}\n")
    body.append(content.type_names, style="yellow")

    title = Text(content.title, style="bold cyan")
    return Panel(body, title=title, border_style="cyan", subtitle="esc: close")


class RichListSurface:
    """Collects list items; the command decides when to print the table."""

    def __init__(self) -> None:
        self.items: list[ListItem] = []

    def append_item(self, item: ListItem) -> None:
        self.items.append(item)


class RichModalSurface:
    """Prints the modal panel whenever it becomes visible."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self.content: ModalContent | None = None
        self.is_visible = False

    def clear(self) -> None:
        self.content = None

    def render(self, content: ModalContent) -> None:
        self.content = content

    def set_visible(self, visible: bool) -> None:
        self.is_visible = visible
        if visible and self.content is not None:
            self._console.print(build_modal_panel(self.content))


class RichLoadingSurface:
    """Spinner shown while at least one message is pending.

    Rich allows a single live display at a time, so overlapping messages
    share one spinner.
    """

    def __init__(self, console: Console) -> None:
        self._console = console
        self._pending = 0
        self._status: Status | None = None

    @property
    def is_active(self) -> bool:
        return self._status is not None

    def push_message(self, text: str) -> None:
        self._pending += 1
        if self._status is None:
            self._status = self._console.status(text)
            self._status.start()

    def pop_message(self) -> None:
        if self._pending == 0:
            return
        self._pending -= 1
        if self._pending == 0:
            self.close()

    def close(self) -> None:
        self._pending = 0
        if self._status is not None:
            self._status.stop()
            self._status = None

"""Presentation and data-source contracts.

Why Protocol:
- Services receive their surfaces and API client at construction instead of
  looking up globals, so a terminal UI, a web view or a test double can be
  swapped in without touching the Core.
- Structural typing: implementations do not inherit from anything.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CreatureDetailPayload, NamedResource
from core.domain.view_models import ListItem, ModalContent


@runtime_checkable
class CreatureSource(Protocol):
    """Remote catalog. Every call is I/O and therefore asynchronous."""

    async def fetch_list(self) -> list[NamedResource]:
        ...

    async def fetch_detail(self, url: str) -> CreatureDetailPayload:
        ...

    async def fetch_sprite(self, url: str) -> str | None:
        ...


@runtime_checkable
class ListSurface(Protocol):
    """Container that receives rendered list items."""

    def append_item(self, item: ListItem) -> None:
        ...


@runtime_checkable
class ModalSurface(Protocol):
    """The single shared overlay."""

    def clear(self) -> None:
        ...

    def render(self, content: ModalContent) -> None:
        ...

    def set_visible(self, visible: bool) -> None:
        ...


@runtime_checkable
class LoadingSurface(Protocol):
    """Where the transient loading message is shown."""

    def push_message(self, text: str) -> None:
        ...

    def pop_message(self) -> None:
        ...

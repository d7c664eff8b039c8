"""View models handed to presentation surfaces.

Surfaces receive plain, already formatted values. They never see the raw
API payloads and never format units themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable

from core.domain.models import CreatureSummary


class ClickTarget(str, Enum):
    """Where a pointer click landed, relative to the modal."""

    BACKDROP = "backdrop"
    CONTENT = "content"


@dataclass(frozen=True)
class ModalContent:
    """Formatted detail view of one creature."""

    name: str
    identifier: str
    artwork_url: str | None
    height: str
    weight: str
    type_names: str

    @property
    def title(self) -> str:
        return f"{self.name} #{self.identifier}"


@dataclass
class ListItem:
    """A clickable list entry bound to one repository record."""

    creature: CreatureSummary
    on_select: Callable[[CreatureSummary], Awaitable[bool]] = field(repr=False)

    @property
    def label(self) -> str:
        return self.creature.name

    @property
    def sprite_url(self) -> str | None:
        return self.creature.sprite_url

    async def select(self) -> bool:
        """Equivalent of clicking the item's button."""

        return await self.on_select(self.creature)

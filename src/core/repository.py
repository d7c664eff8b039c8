"""In-memory creature repository.

Ordered, append-only while loading. Insertion order is the API order and
names are not required to be unique.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from core.domain.models import CreatureSummary

log = logging.getLogger(__name__)


class CreatureRepository:
    def __init__(self) -> None:
        self._items: list[CreatureSummary] = []

    def add(self, item: CreatureSummary | Mapping[str, Any]) -> bool:
        """Append `item` if it carries a name and a details URL.

        Malformed items are logged and discarded; the load goes on.
        """

        if isinstance(item, CreatureSummary):
            self._items.append(item)
            return True

        if not isinstance(item, Mapping):
            log.warning("Creature does not contain expected values: %r", item)
            return False

        try:
            creature = CreatureSummary.model_validate(dict(item))
        except ValidationError as exc:
            log.warning(
                "Creature does not contain expected values (%s): %r",
                ", ".join(str(e["loc"][0]) for e in exc.errors() if e.get("loc")),
                item,
            )
            return False

        self._items.append(creature)
        return True

    def get_all(self) -> list[CreatureSummary]:
        """Live list; callers must not assume it is immutable."""

        return self._items

    def find(self, name: str) -> list[CreatureSummary]:
        return [creature for creature in self._items if creature.name == name]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CreatureSummary]:
        return iter(self._items)

"""List loading and rendering.

Flow:
- `load_list` fills the repository from one list call (inside the loading
  indicator).
- `render_all` fetches each entry's sprite independently and appends the
  list item as soon as its sprite resolves. Items can therefore appear out of
  repository order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from core.domain.models import CreatureSummary
from core.domain.view_models import ListItem
from core.errors import FETCH_ERRORS
from core.interfaces.surfaces import CreatureSource, ListSurface
from core.loading import LoadingIndicator
from core.repository import CreatureRepository

log = logging.getLogger(__name__)


class ListRenderer:
    def __init__(
        self,
        *,
        repository: CreatureRepository,
        api: CreatureSource,
        surface: ListSurface,
        on_select: Callable[[CreatureSummary], Awaitable[bool]],
        loading: LoadingIndicator,
    ) -> None:
        self._repository = repository
        self._api = api
        self._surface = surface
        self._on_select = on_select
        self._loading = loading

    async def load_list(self) -> int:
        """Fetch the list and add every entry. Returns how many were added."""

        try:
            async with self._loading.track():
                results = await self._api.fetch_list()
        except FETCH_ERRORS:
            log.exception("Could not load the creature list")
            return 0

        added = 0
        for entry in results:
            if self._repository.add({"name": entry.name, "detailsUrl": entry.url}):
                added += 1
        log.info("Loaded %d creatures", added)
        return added

    async def add_list_item(self, creature: CreatureSummary) -> ListItem | None:
        """Fetch the sprite, then render a clickable item for `creature`."""

        try:
            creature.sprite_url = await self._api.fetch_sprite(creature.details_url)
        except FETCH_ERRORS:
            log.exception("Could not load sprite for %s", creature.name)
            return None

        item = ListItem(creature=creature, on_select=self._on_select)
        self._surface.append_item(item)
        return item

    async def render_all(self) -> list[ListItem]:
        """Render every repository entry; first resolved, first rendered."""

        tasks = [asyncio.ensure_future(self.add_list_item(c)) for c in self._repository.get_all()]
        rendered: list[ListItem] = []
        try:
            for next_done in asyncio.as_completed(tasks):
                item = await next_done
                if item is not None:
                    rendered.append(item)
        finally:
            leftovers = [task for task in tasks if not task.done()]
            for task in leftovers:
                task.cancel()
            await asyncio.gather(*leftovers, return_exceptions=True)
        return rendered

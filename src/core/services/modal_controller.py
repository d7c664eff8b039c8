"""Modal controller: the single shared detail overlay.

States and transitions:
- HIDDEN  -> LOADING  item selected (details are always refetched)
- LOADING -> VISIBLE  details resolved; surface cleared and repopulated
- LOADING -> HIDDEN   fetch failed (logged, nothing shown to the user)
- VISIBLE -> HIDDEN   close button, Escape key, or a click on the backdrop
- VISIBLE -> LOADING  another item selected; content replaced in place

Requests cannot be cancelled. When selections overlap, every response is
still merged onto its own creature, but only the most recent selection may
update the surface.
"""

from __future__ import annotations

import logging
from enum import Enum

from core.domain.models import CreatureSummary
from core.domain.view_models import ClickTarget
from core.errors import FETCH_ERRORS
from core.formatters import build_modal_content
from core.interfaces.surfaces import CreatureSource, ModalSurface
from core.loading import LoadingIndicator

log = logging.getLogger(__name__)

ESCAPE_KEY = "Escape"


class ModalState(str, Enum):
    HIDDEN = "hidden"
    LOADING = "loading"
    VISIBLE = "visible"


class ModalController:
    def __init__(
        self,
        *,
        api: CreatureSource,
        surface: ModalSurface,
        loading: LoadingIndicator,
    ) -> None:
        self._api = api
        self._surface = surface
        self._loading = loading
        self._state = ModalState.HIDDEN
        self._current: CreatureSummary | None = None
        self._latest_request = 0

    @property
    def state(self) -> ModalState:
        return self._state

    @property
    def current(self) -> CreatureSummary | None:
        """Creature on display, or `None` while hidden."""

        return self._current if self._state is ModalState.VISIBLE else None

    async def show_details(self, creature: CreatureSummary) -> bool:
        """Fetch `creature`'s details and display them. Returns `True` if shown."""

        self._latest_request += 1
        request = self._latest_request
        self._state = ModalState.LOADING

        try:
            async with self._loading.track():
                details = await self._api.fetch_detail(creature.details_url)
        except FETCH_ERRORS:
            log.exception("Could not load details for %s", creature.name)
            if request == self._latest_request:
                self.hide()
            return False

        creature.merge_details(details)

        if request != self._latest_request:
            log.debug("Dropping stale details for %s", creature.name)
            return False

        self._surface.clear()
        self._surface.render(build_modal_content(creature))
        self._surface.set_visible(True)
        self._current = creature
        self._state = ModalState.VISIBLE
        return True

    def hide(self) -> None:
        self._surface.set_visible(False)
        self._current = None
        self._state = ModalState.HIDDEN

    def handle_key(self, key: str) -> bool:
        """Escape closes the modal, only while it is visible."""

        if key == ESCAPE_KEY and self._state is ModalState.VISIBLE:
            self.hide()
            return True
        return False

    def handle_click(self, target: ClickTarget) -> bool:
        """A click outside the modal content closes it."""

        if target is ClickTarget.BACKDROP and self._state is ModalState.VISIBLE:
            self.hide()
            return True
        return False

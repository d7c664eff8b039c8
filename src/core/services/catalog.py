"""Catalog orchestration.

One `CatalogApp` owns the repository, the loading indicator, the modal
controller and the list renderer. Entry points (CLI, tests) build one per
session and drive it; nothing lives in module-level state.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.models import CreatureSummary
from core.domain.view_models import ListItem
from core.interfaces.surfaces import CreatureSource, ListSurface, LoadingSurface, ModalSurface
from core.loading import LoadingIndicator
from core.repository import CreatureRepository
from core.services.list_renderer import ListRenderer
from core.services.modal_controller import ModalController

log = logging.getLogger(__name__)


class CatalogApp:
    def __init__(
        self,
        *,
        api: CreatureSource,
        list_surface: ListSurface,
        modal_surface: ModalSurface,
        loading_surface: LoadingSurface,
        settings: AppSettings | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self.repository = CreatureRepository()
        self.loading = LoadingIndicator(
            loading_surface,
            hide_delay=settings.loading_hide_delay_seconds,
        )
        self.modal = ModalController(api=api, surface=modal_surface, loading=self.loading)
        self.renderer = ListRenderer(
            repository=self.repository,
            api=api,
            surface=list_surface,
            on_select=self.modal.show_details,
            loading=self.loading,
        )

    async def start(self) -> list[ListItem]:
        """Page-load flow: fetch the list, then render every entry."""

        await self.renderer.load_list()
        rendered = await self.renderer.render_all()
        await self.loading.settle()
        return rendered

    def find(self, name: str) -> list[CreatureSummary]:
        return self.repository.find(name)

    async def select(self, name: str) -> bool:
        """Open the modal for the first creature called `name`."""

        matches = self.repository.find(name)
        if not matches:
            log.info("No creature named %r", name)
            return False
        shown = await self.modal.show_details(matches[0])
        await self.loading.settle()
        return shown

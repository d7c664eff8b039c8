"""Creature API client (PokeAPI compatible).

Two endpoints:
- list:   GET {api_base_url}?limit=N  -> {"results": [{"name", "url"}]}
- detail: GET {url}                   -> {"id", "height", "weight", "types", "sprites"}

Errors are not handled here. `httpx.HTTPError` (transport and non-2xx),
`ValueError` (bad JSON) and `pydantic.ValidationError` (unexpected shape)
propagate to the caller, which decides what to log.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import (
    CreatureDetailPayload,
    CreatureListPage,
    CreatureSpritePayload,
    NamedResource,
)
from core.interfaces.surfaces import CreatureSource


class CreatureApiClient(CreatureSource):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def list_url(self) -> str:
        return self._settings.list_url

    async def _get_json(self, url: str) -> Any:
        async with build_async_client(self._settings, transport=self._transport) as client:
            resp = await client.get(url)
        resp.raise_for_status()
        return resp.json()

    async def fetch_list(self) -> list[NamedResource]:
        data = await self._get_json(self.list_url)
        return CreatureListPage.model_validate(data).results

    async def fetch_detail(self, url: str) -> CreatureDetailPayload:
        data = await self._get_json(url)
        return CreatureDetailPayload.model_validate(data)

    async def fetch_sprite(self, url: str) -> str | None:
        """Thumbnail only; reads the same detail endpoint."""

        data = await self._get_json(url)
        return CreatureSpritePayload.model_validate(data).sprite_url

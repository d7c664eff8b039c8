from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest

from adapters.creature_api import CreatureApiClient
from core.config import AppSettings
from core.domain.models import CreatureDetailPayload, CreatureListPage, NamedResource
from core.domain.view_models import ListItem, ModalContent

BASE_URL = "https://api.test/pokemon/"


def detail_url(creature_id: int) -> str:
    return f"{BASE_URL}{creature_id}/"


def detail_payload(
    creature_id: int,
    *,
    height: int,
    weight: int,
    types: list[str],
) -> dict[str, Any]:
    return {
        "id": creature_id,
        "height": height,
        "weight": weight,
        "types": [
            {"slot": slot, "type": {"name": name, "url": f"https://api.test/type/{name}/"}}
            for slot, name in enumerate(types, start=1)
        ],
        "sprites": {
            "front_default": f"https://img.test/sprites/{creature_id}.png",
            "other": {
                "official-artwork": {"front_default": f"https://img.test/artwork/{creature_id}.png"},
                "dream_world": {"front_default": None},
            },
        },
        "abilities": [],
    }


LIST_PAYLOAD: dict[str, Any] = {
    "count": 1302,
    "next": f"{BASE_URL}?offset=2&limit=2",
    "previous": None,
    "results": [
        {"name": "bulbasaur", "url": detail_url(1)},
        {"name": "pikachu", "url": detail_url(25)},
    ],
}

DETAILS: dict[str, dict[str, Any]] = {
    detail_url(1): detail_payload(1, height=7, weight=69, types=["grass", "poison"]),
    detail_url(25): detail_payload(25, height=4, weight=60, types=["electric"]),
}


def catalog_routes() -> dict[str, Any]:
    return {f"{BASE_URL}?limit=2": LIST_PAYLOAD, **DETAILS}


def json_transport(routes: dict[str, Any], seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
    """Serve `routes[url]` as JSON; unknown URLs get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        url = str(request.url)
        if url not in routes:
            return httpx.Response(404, json={"detail": "Not found."})
        return httpx.Response(200, content=json.dumps(routes[url]).encode("utf-8"))

    return httpx.MockTransport(handler)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url=BASE_URL,
        list_limit=2,
        loading_hide_delay_seconds=0,
    )


@pytest.fixture
def api(settings: AppSettings) -> CreatureApiClient:
    return CreatureApiClient(settings, transport=json_transport(catalog_routes()))


class FakeApi:
    """In-memory `CreatureSource` with optional per-URL delays and failures."""

    def __init__(
        self,
        *,
        results: list[dict[str, Any]] | None = None,
        details: dict[str, dict[str, Any]] | None = None,
        delays: dict[str, float] | None = None,
        gates: dict[str, asyncio.Event] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self.results = results if results is not None else LIST_PAYLOAD["results"]
        self.details = details if details is not None else DETAILS
        self.delays = delays or {}
        self.gates = gates or {}
        self.failures = failures or {}
        self.detail_calls: list[str] = []
        self.sprite_calls: list[str] = []

    async def _wait(self, key: str) -> None:
        if key in self.gates:
            await self.gates[key].wait()
        if key in self.delays:
            await asyncio.sleep(self.delays[key])
        if key in self.failures:
            raise self.failures[key]

    async def fetch_list(self) -> list[NamedResource]:
        await self._wait("list")
        return CreatureListPage.model_validate({"results": self.results}).results

    async def fetch_detail(self, url: str) -> CreatureDetailPayload:
        self.detail_calls.append(url)
        await self._wait(url)
        return CreatureDetailPayload.model_validate(self.details[url])

    async def fetch_sprite(self, url: str) -> str | None:
        self.sprite_calls.append(url)
        await self._wait(f"sprite:{url}")
        return self.details[url]["sprites"]["front_default"]


class FakeListSurface:
    def __init__(self) -> None:
        self.items: list[ListItem] = []

    def append_item(self, item: ListItem) -> None:
        self.items.append(item)

    @property
    def labels(self) -> list[str]:
        return [item.label for item in self.items]


class FakeModalSurface:
    def __init__(self) -> None:
        self.content: ModalContent | None = None
        self.visible = False
        self.events: list[str] = []

    def clear(self) -> None:
        self.events.append("clear")
        self.content = None

    def render(self, content: ModalContent) -> None:
        self.events.append(f"render:{content.name}")
        self.content = content

    def set_visible(self, visible: bool) -> None:
        self.events.append("show" if visible else "hide")
        self.visible = visible


class FakeLoadingSurface:
    def __init__(self) -> None:
        self.messages: list[str] = []
        self.pushes = 0
        self.pops = 0

    def push_message(self, text: str) -> None:
        self.pushes += 1
        self.messages.append(text)

    def pop_message(self) -> None:
        self.pops += 1
        if self.messages:
            self.messages.pop(0)


from __future__ import annotations

import logging

import pytest

from core.domain.models import CreatureSummary
from core.repository import CreatureRepository


def test_add_accepts_api_shaped_mapping() -> None:
    repo = CreatureRepository()

    assert repo.add({"name": "pikachu", "detailsUrl": "https://api.test/pokemon/25/"})

    (creature,) = repo.get_all()
    assert creature.name == "pikachu"
    assert creature.details_url == "https://api.test/pokemon/25/"
    assert creature.sprite_url is None


def test_add_accepts_model() -> None:
    repo = CreatureRepository()
    creature = CreatureSummary(name="eevee", details_url="https://api.test/pokemon/133/")

    assert repo.add(creature)
    assert repo.get_all()[0] is creature


@pytest.mark.parametrize(
    "item",
    [
        {"detailsUrl": "https://api.test/pokemon/25/"},
        {"name": "pikachu"},
        {"name": "", "detailsUrl": "https://api.test/pokemon/25/"},
        {"name": "pikachu", "detailsUrl": None},
        "pikachu",
        None,
    ],
)
def test_add_discards_malformed_items(item: object, caplog: pytest.LogCaptureFixture) -> None:
    repo = CreatureRepository()
    repo.add({"name": "bulbasaur", "detailsUrl": "https://api.test/pokemon/1/"})

    with caplog.at_level(logging.WARNING, logger="core.repository"):
        assert repo.add(item) is False  # type: ignore[arg-type]

    assert len(repo.get_all()) == 1
    assert "does not contain expected values" in caplog.text


def test_get_all_keeps_insertion_order_and_is_live() -> None:
    repo = CreatureRepository()
    for name in ("bulbasaur", "ivysaur", "venusaur"):
        repo.add({"name": name, "detailsUrl": f"https://api.test/pokemon/{name}/"})

    items = repo.get_all()
    assert [c.name for c in items] == ["bulbasaur", "ivysaur", "venusaur"]

    repo.add({"name": "charmander", "detailsUrl": "https://api.test/pokemon/4/"})
    assert len(items) == 4
    assert len(repo) == 4


def test_find_returns_exact_matches_only() -> None:
    repo = CreatureRepository()
    repo.add({"name": "pikachu", "detailsUrl": "https://api.test/pokemon/25/"})
    repo.add({"name": "raichu", "detailsUrl": "https://api.test/pokemon/26/"})

    found = repo.find("pikachu")

    assert [c.name for c in found] == ["pikachu"]
    assert repo.find("Pikachu") == []
    assert repo.find("chu") == []


def test_find_allows_duplicate_names() -> None:
    repo = CreatureRepository()
    repo.add({"name": "unown", "detailsUrl": "https://api.test/pokemon/201/"})
    repo.add({"name": "unown", "detailsUrl": "https://api.test/pokemon/10001/"})

    assert len(repo.find("unown")) == 2

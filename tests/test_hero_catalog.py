"""Tests for the load-once hero catalog."""

from __future__ import annotations

import asyncio

from application.services import HeroCatalog
from domain.entities import Hero
from domain.interfaces import IHeroRepository

HEROES = [
    Hero(id=1, name="npc_dota_hero_antimage", localized_name="Anti-Mage"),
    Hero(id=2, name="npc_dota_hero_axe", localized_name="Axe"),
]


class CountingHeroRepository(IHeroRepository):
    def __init__(self, results):
        self.results = list(results)
        self.calls = 0

    async def get_heroes(self):
        self.calls += 1
        await asyncio.sleep(0)
        return self.results.pop(0) if self.results else []

    async def get_global_heroes(self):
        return []


def test_catalog_is_loaded_once() -> None:
    repo = CountingHeroRepository([HEROES])
    catalog = HeroCatalog(repo)

    async def scenario() -> None:
        await catalog.ensure_loaded()
        await catalog.ensure_loaded()

    asyncio.run(scenario())
    assert repo.calls == 1
    assert catalog.is_loaded
    assert len(catalog) == 2
    assert catalog.hero_name(1) == "Anti-Mage"
    assert catalog.internal_name(2) == "npc_dota_hero_axe"


def test_concurrent_callers_share_one_fetch() -> None:
    repo = CountingHeroRepository([HEROES])
    catalog = HeroCatalog(repo)

    async def scenario() -> None:
        await asyncio.gather(*(catalog.ensure_loaded() for _ in range(5)))

    asyncio.run(scenario())
    assert repo.calls == 1


def test_empty_catalogue_is_retried_on_next_call() -> None:
    repo = CountingHeroRepository([[], HEROES])
    catalog = HeroCatalog(repo)

    asyncio.run(catalog.ensure_loaded())
    assert not catalog.is_loaded
    assert catalog.hero_name(1) == "hero_1"

    asyncio.run(catalog.ensure_loaded())
    assert repo.calls == 2
    assert catalog.hero_name(1) == "Anti-Mage"


def test_unknown_hero_falls_back_to_id() -> None:
    catalog = HeroCatalog.from_heroes(HEROES)
    assert catalog.hero_name(999) == "hero_999"
    assert catalog.get(999) is None
    assert catalog.internal_name(999) is None


def test_catalog_without_repository_never_loads() -> None:
    catalog = HeroCatalog()
    asyncio.run(catalog.ensure_loaded())
    assert not catalog.is_loaded
    assert catalog.hero_name(7) == "hero_7"

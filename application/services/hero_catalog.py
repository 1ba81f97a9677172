"""Hero id → name lookup, loaded once per catalog instance."""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from core.logging import get_logger
from domain.entities import Hero
from domain.interfaces import IHeroRepository

logger = get_logger(__name__, service="heroes")


def default_hero_name(hero_id: int) -> str:
    return f"hero_{hero_id}"


class HeroCatalog:
    """
    Explicitly owned hero lookup.

    ``ensure_loaded`` fetches the catalogue the first time it is awaited
    and is a no-op afterwards; concurrent callers share one fetch. An
    empty or failed fetch leaves the catalog unloaded so the next call
    tries again. Lookups never fail: unknown ids fall back to ``hero_<id>``.
    """

    def __init__(self, repository: Optional[IHeroRepository] = None):
        self._repository = repository
        self._heroes: Dict[int, Hero] = {}
        self._lock = asyncio.Lock()

    @classmethod
    def from_heroes(cls, heroes: list[Hero]) -> "HeroCatalog":
        catalog = cls()
        catalog._heroes = {h.id: h for h in heroes}
        return catalog

    @property
    def is_loaded(self) -> bool:
        return bool(self._heroes)

    def __len__(self) -> int:
        return len(self._heroes)

    async def ensure_loaded(self) -> None:
        if self._heroes or self._repository is None:
            return
        async with self._lock:
            if self._heroes:
                return
            heroes = await self._repository.get_heroes()
            if not heroes:
                logger.warning("hero catalogue unavailable, falling back to hero ids")
                return
            self._heroes = {h.id: h for h in heroes}
            logger.info(lambda: f"hero catalogue loaded: {len(self._heroes)} heroes")

    def get(self, hero_id: int) -> Optional[Hero]:
        return self._heroes.get(hero_id)

    def hero_name(self, hero_id: int) -> str:
        hero = self._heroes.get(hero_id)
        return hero.localized_name if hero and hero.localized_name else default_hero_name(hero_id)

    def internal_name(self, hero_id: int) -> Optional[str]:
        hero = self._heroes.get(hero_id)
        return hero.name if hero else None

"""Hero catalogue repository implementation."""
import logging
from typing import List

from domain.entities import GlobalHero, Hero
from domain.entities.hero import RANK_BRACKETS
from domain.interfaces import IHeroRepository
from infrastructure.api import OpenDotaClient
from ._parsing import PARSE_ERRORS, as_int, as_str

logger = logging.getLogger(__name__)


class HeroRepository(IHeroRepository):
    """Repository for hero data using the OpenDota API."""

    def __init__(self, api_client: OpenDotaClient):
        self.api_client = api_client

    async def get_heroes(self) -> List[Hero]:
        heroes = []
        for row in await self.api_client.get_heroes():
            try:
                heroes.append(Hero(**self._hero_fields(row)))
            except PARSE_ERRORS as e:
                logger.warning(f"Skipping malformed hero: {e!r}")
        return heroes

    async def get_global_heroes(self) -> List[GlobalHero]:
        heroes = []
        for row in await self.api_client.get_hero_stats():
            try:
                heroes.append(GlobalHero(
                    **self._hero_fields(row),
                    img=as_str(row.get('img')),
                    icon=as_str(row.get('icon')),
                    pro_pick=as_int(row.get('pro_pick')),
                    pro_win=as_int(row.get('pro_win')),
                    bracket_picks=tuple(as_int(row.get(f'{n}_pick')) for n in RANK_BRACKETS),
                    bracket_wins=tuple(as_int(row.get(f'{n}_win')) for n in RANK_BRACKETS),
                ))
            except PARSE_ERRORS as e:
                logger.warning(f"Skipping malformed hero stats: {e!r}")
        return heroes

    def _hero_fields(self, row: dict) -> dict:
        return {
            'id': int(row['id']),
            'name': as_str(row.get('name')),
            'localized_name': as_str(row.get('localized_name')),
            'primary_attr': as_str(row.get('primary_attr')),
            'attack_type': as_str(row.get('attack_type')),
            'roles': tuple(row.get('roles') or ()),
        }

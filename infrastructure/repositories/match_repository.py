"""Match repository implementation."""
import logging
from typing import Optional, List

from domain.entities import MatchDetail, MatchPlayerDetail, MatchSummary, ProMatch
from domain.interfaces import IMatchRepository
from infrastructure.api import OpenDotaClient
from ._parsing import PARSE_ERRORS, as_int, as_optional_int, as_str

logger = logging.getLogger(__name__)

INVENTORY_SLOTS = 6
BACKPACK_SLOTS = 3


class MatchRepository(IMatchRepository):
    """Repository for match data using the OpenDota API."""

    def __init__(self, api_client: OpenDotaClient):
        self.api_client = api_client

    async def get_recent_matches(self, account_id: int, limit: int = 50) -> List[MatchSummary]:
        """
        Get a player's recent match history.

        Rows that cannot be parsed are dropped; an unreachable upstream
        yields an empty list.
        """
        rows = await self.api_client.get_recent_matches(account_id, limit=limit)
        summaries = []
        for row in rows:
            try:
                summaries.append(self._parse_summary(row))
            except PARSE_ERRORS as e:
                logger.warning(f"Skipping malformed match row for {account_id}: {e!r}")
        return summaries

    async def get_match_details(self, match_id: int) -> Optional[MatchDetail]:
        """
        Get a single match by ID.

        Returns:
            MatchDetail entity or None if not found
        """
        match_data = await self.api_client.get_match_details(match_id)
        if not match_data:
            logger.warning(f"Match {match_id} not found in API")
            return None

        try:
            return self._parse_detail(match_data)
        except PARSE_ERRORS as e:
            logger.error(f"Error parsing match {match_id}: {e!r}")
            return None

    async def get_pro_matches(self) -> List[ProMatch]:
        rows = await self.api_client.get_pro_matches()
        matches = []
        for row in rows:
            try:
                matches.append(self._parse_pro_match(row))
            except PARSE_ERRORS as e:
                logger.warning(f"Skipping malformed pro match: {e!r}")
        return matches

    def _parse_summary(self, data: dict) -> MatchSummary:
        """Parse one row of /players/{id}/matches into a MatchSummary."""
        return MatchSummary(
            match_id=int(data['match_id']),
            player_slot=int(data['player_slot']),
            radiant_win=bool(data.get('radiant_win')),
            duration=as_int(data.get('duration')),
            start_time=as_int(data.get('start_time')),
            hero_id=as_int(data.get('hero_id')),
            kills=as_int(data.get('kills')),
            deaths=as_int(data.get('deaths')),
            assists=as_int(data.get('assists')),
            party_size=as_optional_int(data.get('party_size')),
            lobby_type=as_optional_int(data.get('lobby_type')),
            skill=as_optional_int(data.get('skill')),
        )

    def _parse_detail(self, data: dict) -> MatchDetail:
        """Parse raw /matches/{id} data into a MatchDetail entity."""
        players = tuple(self._parse_player(p) for p in data.get('players') or [])
        return MatchDetail(
            match_id=int(data['match_id']),
            radiant_win=bool(data.get('radiant_win')),
            duration=as_int(data.get('duration')),
            start_time=as_int(data.get('start_time')),
            radiant_score=as_int(data.get('radiant_score')),
            dire_score=as_int(data.get('dire_score')),
            players=players,
        )

    def _parse_player(self, p_data: dict) -> MatchPlayerDetail:
        """Parse one participant; a missing account_id means the player is anonymous."""
        return MatchPlayerDetail(
            account_id=as_optional_int(p_data.get('account_id')),
            player_slot=int(p_data['player_slot']),
            hero_id=as_int(p_data.get('hero_id')),
            personaname=p_data.get('personaname') or None,
            # Combat
            kills=as_int(p_data.get('kills')),
            deaths=as_int(p_data.get('deaths')),
            assists=as_int(p_data.get('assists')),
            win=as_int(p_data.get('win')),
            # Economy & damage
            gold_per_min=as_int(p_data.get('gold_per_min')),
            xp_per_min=as_int(p_data.get('xp_per_min')),
            hero_damage=as_int(p_data.get('hero_damage')),
            tower_damage=as_int(p_data.get('tower_damage')),
            # Items
            items=tuple(as_int(p_data.get(f'item_{i}')) for i in range(INVENTORY_SLOTS)),
            backpack=tuple(as_int(p_data.get(f'backpack_{i}')) for i in range(BACKPACK_SLOTS)),
            neutral_item=as_int(p_data.get('item_neutral', p_data.get('neutral_item'))),
        )

    def _parse_pro_match(self, data: dict) -> ProMatch:
        return ProMatch(
            match_id=int(data['match_id']),
            duration=as_int(data.get('duration')),
            start_time=as_int(data.get('start_time')),
            radiant_win=bool(data.get('radiant_win')),
            radiant_team_id=as_optional_int(data.get('radiant_team_id')),
            radiant_name=as_str(data.get('radiant_name')),
            dire_team_id=as_optional_int(data.get('dire_team_id')),
            dire_name=as_str(data.get('dire_name')),
            leagueid=as_int(data.get('leagueid')),
            league_name=as_str(data.get('league_name')),
            series_id=as_int(data.get('series_id')),
            series_type=as_int(data.get('series_type')),
            radiant_score=as_int(data.get('radiant_score')),
            dire_score=as_int(data.get('dire_score')),
        )

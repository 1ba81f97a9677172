"""Player repository implementation."""
import logging
from typing import Optional, List

from domain.entities import CountBucket, Peer, PlayerCounts, PlayerHeroStats, PlayerProfile, WinLoss
from domain.interfaces import IPlayerRepository
from infrastructure.api import OpenDotaClient
from ._parsing import PARSE_ERRORS, as_int, as_optional_int, as_str

logger = logging.getLogger(__name__)


class PlayerRepository(IPlayerRepository):
    """Repository for player data using the OpenDota API."""

    def __init__(self, api_client: OpenDotaClient):
        self.api_client = api_client

    async def get_profile(self, account_id: int) -> Optional[PlayerProfile]:
        """
        Get the public profile of an account.

        Upstream answers unknown or private accounts with a payload whose
        ``profile`` is missing; that is reported as None.
        """
        data = await self.api_client.get_player_profile(account_id)
        if not data or not data.get('profile'):
            return None
        try:
            profile = data['profile']
            return PlayerProfile(
                account_id=int(profile.get('account_id', account_id)),
                personaname=as_str(profile.get('personaname'), f"Unknown ({account_id})"),
                avatarfull=as_str(profile.get('avatarfull')),
                profileurl=as_str(profile.get('profileurl')),
                loccountrycode=profile.get('loccountrycode') or None,
                plus=bool(profile.get('plus')),
                rank_tier=as_optional_int(data.get('rank_tier')),
                leaderboard_rank=as_optional_int(data.get('leaderboard_rank')),
            )
        except PARSE_ERRORS as e:
            logger.error(f"Error parsing profile {account_id}: {e!r}")
            return None

    async def get_win_loss(self, account_id: int) -> Optional[WinLoss]:
        data = await self.api_client.get_player_win_loss(account_id)
        if data is None:
            return None
        try:
            return WinLoss(win=as_int(data.get('win')), lose=as_int(data.get('lose')))
        except PARSE_ERRORS as e:
            logger.error(f"Error parsing win/loss {account_id}: {e!r}")
            return None

    async def get_counts(self, account_id: int) -> Optional[PlayerCounts]:
        data = await self.api_client.get_player_counts(account_id)
        if data is None:
            return None
        try:
            categories = {
                name: {
                    str(key): CountBucket(games=as_int(b.get('games')), win=as_int(b.get('win')))
                    for key, b in buckets.items()
                }
                for name, buckets in data.items()
                if isinstance(buckets, dict)
            }
        except (PARSE_ERRORS + (AttributeError,)) as e:
            logger.error(f"Error parsing counts {account_id}: {e!r}")
            return None
        return PlayerCounts(categories=categories)

    async def get_peers(self, account_id: int) -> List[Peer]:
        rows = await self.api_client.get_player_peers(account_id)
        peers = []
        for row in rows:
            try:
                peers.append(Peer(
                    account_id=int(row['account_id']),
                    personaname=as_str(row.get('personaname')),
                    avatar=as_str(row.get('avatar')),
                    last_played=as_int(row.get('last_played')),
                    win=as_int(row.get('win')),
                    games=as_int(row.get('games')),
                    with_win=as_int(row.get('with_win')),
                    with_games=as_int(row.get('with_games')),
                    against_win=as_int(row.get('against_win')),
                    against_games=as_int(row.get('against_games')),
                ))
            except PARSE_ERRORS as e:
                logger.warning(f"Skipping malformed peer of {account_id}: {e!r}")
        return peers

    async def get_hero_stats(self, account_id: int) -> List[PlayerHeroStats]:
        rows = await self.api_client.get_player_heroes(account_id)
        stats = []
        for row in rows:
            try:
                stats.append(PlayerHeroStats(
                    hero_id=int(row['hero_id']),
                    last_played=as_int(row.get('last_played')),
                    games=as_int(row.get('games')),
                    win=as_int(row.get('win')),
                    with_games=as_int(row.get('with_games')),
                    with_win=as_int(row.get('with_win')),
                    against_games=as_int(row.get('against_games')),
                    against_win=as_int(row.get('against_win')),
                ))
            except PARSE_ERRORS as e:
                logger.warning(f"Skipping malformed hero stats of {account_id}: {e!r}")
        return stats

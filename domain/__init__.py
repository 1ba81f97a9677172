"""Domain layer - Entities, enums, ratios and interfaces."""
from .entities import (
    SOLO_PARTY_ID, CountBucket, ExtendedMatch, GlobalHero, Hero, MatchDetail,
    MatchPlayerDetail, MatchSummary, PartyGroup, PartyTeammate, Peer, PlayerCounts,
    PlayerHeroStats, PlayerProfile, ProMatch, Teammate, WinLoss,
)
from .enums import MatchResult, TeamSide
from .interfaces import IHeroRepository, IMatchRepository, IPlayerRepository
from .rates import kda_ratio, win_rate

__all__ = [
    # Entities
    'SOLO_PARTY_ID',
    'CountBucket',
    'ExtendedMatch',
    'GlobalHero',
    'Hero',
    'MatchDetail',
    'MatchPlayerDetail',
    'MatchSummary',
    'PartyGroup',
    'PartyTeammate',
    'Peer',
    'PlayerCounts',
    'PlayerHeroStats',
    'PlayerProfile',
    'ProMatch',
    'Teammate',
    'WinLoss',
    # Enums
    'MatchResult',
    'TeamSide',
    # Interfaces
    'IHeroRepository',
    'IMatchRepository',
    'IPlayerRepository',
    # Ratios
    'kda_ratio',
    'win_rate',
]

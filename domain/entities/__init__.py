"""Domain entities."""
from .match_summary import MatchSummary
from .match_detail import MatchDetail, MatchPlayerDetail
from .party import SOLO_PARTY_ID, ExtendedMatch, PartyGroup, PartyTeammate, Teammate
from .player import CountBucket, Peer, PlayerCounts, PlayerHeroStats, PlayerProfile, WinLoss
from .hero import GlobalHero, Hero
from .pro_match import ProMatch

__all__ = [
    'MatchSummary',
    'MatchDetail',
    'MatchPlayerDetail',
    'SOLO_PARTY_ID',
    'ExtendedMatch',
    'PartyGroup',
    'PartyTeammate',
    'Teammate',
    'CountBucket',
    'Peer',
    'PlayerCounts',
    'PlayerHeroStats',
    'PlayerProfile',
    'WinLoss',
    'GlobalHero',
    'Hero',
    'ProMatch',
]

"""Domain enumerations."""
from .team_side import TeamSide
from .match_result import MatchResult

__all__ = [
    'TeamSide',
    'MatchResult',
]

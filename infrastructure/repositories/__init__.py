"""Infrastructure repositories module."""
from .match_repository import MatchRepository
from .player_repository import PlayerRepository
from .hero_repository import HeroRepository

__all__ = [
    'MatchRepository',
    'PlayerRepository',
    'HeroRepository',
]

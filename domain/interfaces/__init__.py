"""Domain interfaces."""
from .repository import IHeroRepository, IMatchRepository, IPlayerRepository

__all__ = [
    'IHeroRepository',
    'IMatchRepository',
    'IPlayerRepository',
]

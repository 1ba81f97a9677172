"""Infrastructure layer - API gateway, client and repositories."""
from .api import OpenDotaClient, RequestGateway
from .repositories import HeroRepository, MatchRepository, PlayerRepository

__all__ = [
    'OpenDotaClient',
    'RequestGateway',
    'HeroRepository',
    'MatchRepository',
    'PlayerRepository',
]

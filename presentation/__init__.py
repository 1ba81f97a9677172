"""Presentation layer - terminal front-end over the core."""
from .cli import DashboardSession, GlobalCommand, MatchCommand, PartyCommand, PlayerCommand

__all__ = [
    'DashboardSession',
    'GlobalCommand',
    'MatchCommand',
    'PartyCommand',
    'PlayerCommand',
]

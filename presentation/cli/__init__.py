"""Presentation CLI exports."""
from .session import DashboardSession
from .party_command import PartyCommand
from .player_command import PlayerCommand
from .match_command import MatchCommand
from .global_command import GlobalCommand

__all__ = [
    "DashboardSession",
    "PartyCommand",
    "PlayerCommand",
    "MatchCommand",
    "GlobalCommand",
]

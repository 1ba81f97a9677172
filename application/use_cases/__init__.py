"""Application use cases."""
from .build_party_report import BuildPartyReportUseCase, PartyReport
from .player_overview import PlayerOverview, PlayerOverviewUseCase

__all__ = [
    'BuildPartyReportUseCase',
    'PartyReport',
    'PlayerOverview',
    'PlayerOverviewUseCase',
]

"""Application layer - Services and use cases."""
from .services import HeroCatalog, analyze_match, group_matches_by_party
from .use_cases import BuildPartyReportUseCase, PlayerOverviewUseCase

__all__ = [
    'HeroCatalog',
    'analyze_match',
    'group_matches_by_party',
    'BuildPartyReportUseCase',
    'PlayerOverviewUseCase',
]

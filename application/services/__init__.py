"""Application services root exports."""
from .hero_catalog import HeroCatalog, default_hero_name
from .party_analysis import analyze_match, best_combo, group_matches_by_party, party_key, win_rate

__all__ = [
    "HeroCatalog",
    "default_hero_name",
    "analyze_match",
    "best_combo",
    "group_matches_by_party",
    "party_key",
    "win_rate",
]

"""Ratio helpers shared by entities and the aggregation engine."""


def win_rate(wins: int, games: int) -> float:
    """Fraction of games won, 0.0 when no games were recorded."""
    if games <= 0:
        return 0.0
    return wins / games


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / deaths, or kills + assists for a deathless game."""
    if deaths == 0:
        return float(kills + assists)
    return (kills + assists) / deaths

"""Hero catalogue entities."""
from dataclasses import dataclass, field
from ..rates import win_rate

HERO_NAME_PREFIX = "npc_dota_hero_"

# heroStats reports {N}_pick / {N}_win for rank brackets 1..8.
RANK_BRACKETS = range(1, 9)


@dataclass(frozen=True)
class Hero:
    id: int
    name: str  # internal name, e.g. npc_dota_hero_antimage
    localized_name: str
    primary_attr: str = ""
    attack_type: str = ""
    roles: tuple[str, ...] = field(default_factory=tuple)

    @property
    def short_name(self) -> str:
        """Internal name without the npc prefix, e.g. 'antimage'."""
        return self.name.replace(HERO_NAME_PREFIX, "").lower()


@dataclass(frozen=True)
class GlobalHero(Hero):
    """A hero with public pick/win totals across rank brackets."""

    img: str = ""
    icon: str = ""
    pro_pick: int = 0
    pro_win: int = 0
    bracket_picks: tuple[int, ...] = field(default_factory=tuple)
    bracket_wins: tuple[int, ...] = field(default_factory=tuple)

    @property
    def total_picks(self) -> int:
        return sum(self.bracket_picks)

    @property
    def total_wins(self) -> int:
        return sum(self.bracket_wins)

    @property
    def win_rate(self) -> float:
        return win_rate(self.total_wins, self.total_picks)

    @property
    def pro_win_rate(self) -> float:
        return win_rate(self.pro_win, self.pro_pick)

"""Party reconstruction from a player's match history.

Two pure steps. :func:`analyze_match` turns one history row plus the
match detail into an :class:`ExtendedMatch` carrying the subject's
teammates and an outcome recomputed from the detail. :func:`group_matches_by_party`
folds those into one :class:`PartyGroup` per exact teammate set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from core.logging import get_logger
from domain.entities import (
    SOLO_PARTY_ID,
    ExtendedMatch,
    MatchDetail,
    MatchSummary,
    PartyGroup,
    PartyTeammate,
    Teammate,
)
from domain.enums import MatchResult
from domain.rates import win_rate
from .hero_catalog import default_hero_name

logger = get_logger(__name__, service="analysis")

HeroNamer = Callable[[int], str]

__all__ = [
    "analyze_match",
    "group_matches_by_party",
    "party_key",
    "best_combo",
    "win_rate",
]


def analyze_match(
    subject_id: int,
    summary: MatchSummary,
    detail: Optional[MatchDetail],
    hero_name: HeroNamer = default_hero_name,
) -> Optional[ExtendedMatch]:
    """
    Enrich one history row with the subject's teammates.

    The subject's side and the outcome come from the detail record, not
    from the summary. Returns None when the detail is missing or does not
    list the subject under its account id.
    """
    if detail is None:
        return None
    subject = detail.find_player(subject_id)
    if subject is None:
        logger.debug(lambda: f"subject {subject_id} not in match {detail.match_id}, skipped")
        return None

    side = subject.side
    teammates = tuple(
        Teammate(
            account_id=p.account_id,
            personaname=p.personaname or f"Unknown ({p.account_id})",
            hero_id=p.hero_id,
        )
        for p in detail.players_on(side)
        if p.account_id is not None and p.account_id != subject_id
    )
    return ExtendedMatch(
        summary=summary,
        teammates=teammates,
        result=MatchResult.from_flag(side is detail.winning_side),
        played_hero_name=hero_name(summary.hero_id),
    )


def party_key(teammate_ids: Iterable[int]) -> str:
    """Canonical, order-independent id of a teammate set."""
    ordered = sorted(teammate_ids)
    return ",".join(str(i) for i in ordered) if ordered else SOLO_PARTY_ID


@dataclass
class _PartyAccumulator:
    key: str
    player_ids: List[int]
    wins: int = 0
    losses: int = 0
    matches: List[ExtendedMatch] = field(default_factory=list)
    names: Dict[int, str] = field(default_factory=dict)
    # account_id -> hero_id -> games, both in first-seen order
    hero_counts: Dict[int, Dict[int, int]] = field(default_factory=dict)

    def add(self, match: ExtendedMatch) -> None:
        if match.won:
            self.wins += 1
        else:
            self.losses += 1
        self.matches.append(match)
        for mate in match.teammates:
            self.names[mate.account_id] = mate.personaname
            counts = self.hero_counts.setdefault(mate.account_id, {})
            counts[mate.hero_id] = counts.get(mate.hero_id, 0) + 1

    def most_played_hero(self, account_id: int) -> int:
        # Strictly greater: the first hero seen keeps a tie.
        best_hero, best_count = 0, -1
        for hero_id, count in self.hero_counts.get(account_id, {}).items():
            if count > best_count:
                best_hero, best_count = hero_id, count
        return best_hero

    def build(self) -> PartyGroup:
        return PartyGroup(
            id=self.key,
            player_ids=tuple(self.player_ids),
            teammates=tuple(
                PartyTeammate(
                    account_id=pid,
                    personaname=self.names.get(pid, "Unknown"),
                    most_played_hero_id=self.most_played_hero(pid),
                )
                for pid in self.player_ids
            ),
            wins=self.wins,
            losses=self.losses,
            matches=tuple(self.matches),
        )


def group_matches_by_party(matches: Iterable[ExtendedMatch]) -> List[PartyGroup]:
    """
    Partition matches by the exact set of teammates.

    Groups come back with the most played party first. Groups of equal
    size keep the order in which they were first seen, but callers should
    not rely on that and sort themselves if they need a tie-break.
    """
    groups: Dict[str, _PartyAccumulator] = {}
    for match in matches:
        ids = sorted(match.teammate_ids)
        key = party_key(ids)
        group = groups.get(key)
        if group is None:
            group = groups[key] = _PartyAccumulator(key=key, player_ids=ids)
        group.add(match)

    parties = [g.build() for g in groups.values()]
    parties.sort(key=lambda p: p.games, reverse=True)
    return parties


def best_combo(
    parties: Sequence[PartyGroup],
    min_matches: int = 2,
    include_solo: bool = False,
) -> Optional[PartyGroup]:
    """
    Pick the party with the best win rate.

    Only parties with at least ``min_matches`` games qualify, and the solo
    cohort only when ``include_solo`` is set. A candidate replaces the
    current pick when its win rate is strictly higher, or equal with a
    strictly larger sample; otherwise the earlier party stays.
    """
    best: Optional[PartyGroup] = None
    for party in parties:
        if party.games < min_matches or (party.is_solo and not include_solo):
            continue
        if best is None:
            best = party
            continue
        if party.win_rate > best.win_rate:
            best = party
        elif party.win_rate == best.win_rate and party.games > best.games:
            best = party
    return best

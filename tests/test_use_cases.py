"""Tests for the party report and player overview use cases."""

from __future__ import annotations

import asyncio

import pytest

from application.services import HeroCatalog
from application.use_cases import BuildPartyReportUseCase, PlayerOverviewUseCase
from domain.entities import Hero, PlayerHeroStats, PlayerProfile, WinLoss
from domain.interfaces import IMatchRepository, IPlayerRepository
from tests.factories import SUBJECT_ID, detail, party_detail, player, summary

A, B = 2001, 2002


class FakeMatchRepository(IMatchRepository):
    def __init__(self, summaries, details):
        self.summaries = summaries
        self.details = details
        self.requested_limits: list[int] = []

    async def get_recent_matches(self, account_id, limit=50):
        self.requested_limits.append(limit)
        return list(self.summaries)

    async def get_match_details(self, match_id):
        return self.details.get(match_id)

    async def get_pro_matches(self):
        return []


class FakePlayerRepository(IPlayerRepository):
    def __init__(self, profile=None, win_loss=None, heroes=()):
        self.profile = profile
        self.win_loss = win_loss
        self.heroes = list(heroes)

    async def get_profile(self, account_id):
        return self.profile

    async def get_win_loss(self, account_id):
        return self.win_loss

    async def get_counts(self, account_id):
        return None

    async def get_peers(self, account_id):
        return []

    async def get_hero_stats(self, account_id):
        return self.heroes


def test_party_report_skips_unusable_matches() -> None:
    details = {
        1: party_detail(1, [A, B], won=True),
        2: party_detail(2, [B, A], won=False),
        3: party_detail(3, [], won=True),
        # 4 has no detail; 5 does not list the subject.
        5: detail(5, radiant=[player(A, 0)], dire=[player(9000, 128)]),
    }
    repo = FakeMatchRepository([summary(i) for i in range(1, 6)], details)
    use_case = BuildPartyReportUseCase(repo, HeroCatalog.from_heroes([Hero(1, "npc_dota_hero_antimage", "Anti-Mage")]))

    report = asyncio.run(use_case.execute(SUBJECT_ID, limit=5))

    assert repo.requested_limits == [5]
    assert report.skipped_match_ids == (4, 5)
    assert [m.match_id for m in report.matches] == [1, 2, 3]
    assert report.matches[0].played_hero_name == "Anti-Mage"
    assert sum(p.games for p in report.parties) == len(report.matches)
    assert (report.wins, report.losses) == (2, 1)
    assert report.parties[0].id == f"{A},{B}"
    assert report.best_combo is not None
    assert report.best_combo.id == f"{A},{B}"


def test_party_report_without_history_has_no_data() -> None:
    report = asyncio.run(BuildPartyReportUseCase(FakeMatchRepository([], {}), HeroCatalog()).execute(SUBJECT_ID))
    assert not report.has_data
    assert report.parties == ()
    assert report.best_combo is None


def test_best_combo_threshold_is_configurable() -> None:
    details = {1: party_detail(1, [A], won=True), 2: party_detail(2, [A], won=True)}
    repo = FakeMatchRepository([summary(1), summary(2)], details)

    strict = asyncio.run(BuildPartyReportUseCase(repo, HeroCatalog(), best_combo_min_matches=3).execute(SUBJECT_ID))
    loose = asyncio.run(BuildPartyReportUseCase(repo, HeroCatalog(), best_combo_min_matches=2).execute(SUBJECT_ID))

    assert strict.best_combo is None
    assert loose.best_combo is not None


def test_player_overview_aggregates_recent_matches() -> None:
    profile = PlayerProfile(account_id=SUBJECT_ID, personaname="subject", rank_tier=52)
    rows = [summary(1), summary(2)]  # 5/2/10 in 40 minutes each
    use_case = PlayerOverviewUseCase(
        FakePlayerRepository(profile, WinLoss(win=6, lose=4)),
        FakeMatchRepository(rows, {}),
    )

    overview = asyncio.run(use_case.execute(SUBJECT_ID, limit=2))

    assert overview.found
    assert overview.win_rate == pytest.approx(0.6)
    assert overview.average_kda == pytest.approx(7.5)
    assert overview.average_duration_minutes == pytest.approx(40.0)


def test_player_overview_of_unknown_account() -> None:
    use_case = PlayerOverviewUseCase(FakePlayerRepository(), FakeMatchRepository([], {}))
    overview = asyncio.run(use_case.execute(1))
    assert not overview.found
    assert overview.win_rate == 0.0
    assert overview.average_kda == 0.0


def test_player_heroes_are_most_played_first() -> None:
    heroes = [PlayerHeroStats(hero_id=1, games=2), PlayerHeroStats(hero_id=2, games=9), PlayerHeroStats(hero_id=3)]
    use_case = PlayerOverviewUseCase(FakePlayerRepository(heroes=heroes), FakeMatchRepository([], {}))
    ordered = asyncio.run(use_case.load_heroes(1))
    assert [h.hero_id for h in ordered] == [2, 1, 3]

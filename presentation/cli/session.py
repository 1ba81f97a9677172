"""Composition root: one client, its repositories and the hero catalog."""
from __future__ import annotations

from typing import Any, Optional

import httpx

from application.services import HeroCatalog
from infrastructure import HeroRepository, MatchRepository, OpenDotaClient, PlayerRepository


class DashboardSession:
    """Owns everything a command needs for one run; use as ``async with``."""

    def __init__(self, config: Any = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        if config is None:
            from config import settings as config
        self.config = config
        self.client = OpenDotaClient.from_settings(config, transport=transport)
        self.match_repo = MatchRepository(self.client)
        self.player_repo = PlayerRepository(self.client)
        self.hero_repo = HeroRepository(self.client)
        self.hero_catalog = HeroCatalog(self.hero_repo)

    async def __aenter__(self) -> "DashboardSession":
        await self.client.__aenter__()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.client.__aexit__(*exc)

"""OpenDota API client."""
from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

import httpx

from core.logging import get_logger
from .request_gateway import GatewayClosedError, RequestGateway

logger = get_logger(__name__, service="opendota")


class OpenDotaClient:
    """
    Typed, best-effort wrappers over :class:`RequestGateway`.

    Every lookup returns ``None`` (single entities) or ``[]`` (lists) on
    any failure: non-2xx status, undecodable or unexpected JSON, network
    error. Callers treat both as "no data" and never see an exception.
    """

    def __init__(self, gateway: RequestGateway):
        self.gateway = gateway
        self._background: set[asyncio.Task] = set()

    @classmethod
    def from_settings(
        cls,
        config: Any = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OpenDotaClient":
        if config is None:
            from config import settings as config
        params = {"api_key": config.OPENDOTA_API_KEY} if config.OPENDOTA_API_KEY else {}
        gateway = RequestGateway(
            config.OPENDOTA_BASE_URL,
            min_interval_ms=config.MIN_REQUEST_INTERVAL_MS,
            throttle_penalty_ms=config.THROTTLE_PENALTY_MS,
            max_throttle_retries=config.MAX_THROTTLE_RETRIES,
            timeout=config.REQUEST_TIMEOUT,
            default_params=params,
            transport=transport,
        )
        return cls(gateway)

    async def __aenter__(self) -> "OpenDotaClient":
        await self.gateway.start()
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Let pending parse requests go out, then close the gateway.

        Parse requests scheduled while waiting are waited for as well.
        """
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)
        await self.gateway.close()

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = await self.gateway.fetch(path, params=params)
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {path}: {exc!r}")
            return None
        except GatewayClosedError as exc:
            logger.warning(f"Dropped {path}: {exc}")
            return None

        if not response.is_success:
            logger.warning(f"HTTP {response.status_code} for {path}")
            return None

        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"Invalid JSON for {path}: {exc}")
            return None

    async def _get_object(self, path: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict]:
        data = await self._get_json(path, params)
        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning(f"Expected an object for {path}, got {type(data).__name__}")
            return None
        return data

    async def _get_list(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict]:
        data = await self._get_json(path, params)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"Expected a list for {path}, got {type(data).__name__}")
            return []
        return data

    # ── Players ────────────────────────────────────────────────────────

    async def get_player_profile(self, account_id: int) -> Optional[Dict]:
        return await self._get_object(f"/players/{account_id}")

    async def get_player_win_loss(self, account_id: int) -> Optional[Dict]:
        return await self._get_object(f"/players/{account_id}/wl")

    async def get_player_counts(self, account_id: int) -> Optional[Dict]:
        return await self._get_object(f"/players/{account_id}/counts")

    async def get_recent_matches(self, account_id: int, limit: int = 50) -> List[Dict]:
        return await self._get_list(f"/players/{account_id}/matches", {"limit": limit})

    async def get_player_peers(self, account_id: int) -> List[Dict]:
        return await self._get_list(f"/players/{account_id}/peers")

    async def get_player_heroes(self, account_id: int) -> List[Dict]:
        return await self._get_list(f"/players/{account_id}/heroes")

    # ── Matches ────────────────────────────────────────────────────────

    async def get_match_details(self, match_id: int) -> Optional[Dict]:
        return await self._get_object(f"/matches/{match_id}")

    async def get_pro_matches(self) -> List[Dict]:
        return await self._get_list("/proMatches")

    def request_match_parse(self, match_id: int) -> asyncio.Task:
        """
        Ask upstream to (re)parse a replay without blocking the caller.

        The POST still goes through the gateway queue. The returned task
        resolves to True when upstream accepted the request; callers may
        ignore it, the client keeps a reference until it finishes.
        """
        task = asyncio.create_task(self._post_parse_request(match_id), name=f"parse-{match_id}")
        self._background.add(task)
        task.add_done_callback(self._background.discard)
        return task

    async def _post_parse_request(self, match_id: int) -> bool:
        path = f"/request/{match_id}"
        try:
            response = await self.gateway.fetch(path, method="POST")
        except httpx.HTTPError as exc:
            logger.error(f"Network error requesting parse of {match_id}: {exc!r}")
            return False
        except GatewayClosedError as exc:
            logger.warning(f"Parse of {match_id} not requested: {exc}")
            return False
        if not response.is_success:
            logger.warning(f"HTTP {response.status_code} requesting parse of {match_id}")
            return False
        logger.info(f"parse requested match_id={match_id}")
        return True

    # ── Heroes ─────────────────────────────────────────────────────────

    async def get_heroes(self) -> List[Dict]:
        return await self._get_list("/heroes")

    async def get_hero_stats(self) -> List[Dict]:
        return await self._get_list("/heroStats")

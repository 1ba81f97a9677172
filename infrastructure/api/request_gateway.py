"""Serialized, throttled gateway for every call to the OpenDota API."""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

import httpx

from core.logging import get_logger

logger = get_logger(__name__, service="gateway")

TOO_MANY_REQUESTS = 429


class GatewayClosedError(RuntimeError):
    """Raised by fetch once the gateway is not running or has begun closing."""


Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


@dataclass
class _PendingRequest:
    method: str
    path: str
    params: Dict[str, Any]
    future: asyncio.Future


class RequestGateway:
    """
    Single choke point for upstream traffic.

    Requests are put on one FIFO queue and executed by one worker task, so
    no two requests are ever in flight at the same time and they leave in
    submission order. Before each request the worker waits until at least
    ``min_interval_ms`` have passed since the previous one was issued.

    A 429 is never handed back to the caller: the worker sleeps
    ``throttle_penalty_ms`` and re-issues the same request, forever unless
    ``max_throttle_retries`` is set. Transport failures are not retried;
    they are raised from :meth:`fetch` for that one call only.
    """

    def __init__(
        self,
        base_url: str,
        *,
        min_interval_ms: int = 250,
        throttle_penalty_ms: int = 5000,
        max_throttle_retries: Optional[int] = None,
        timeout: float = 30.0,
        default_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ):
        self.base_url = base_url
        self.min_interval_ms = min_interval_ms
        self.throttle_penalty_ms = throttle_penalty_ms
        self.max_throttle_retries = max_throttle_retries
        self.timeout = timeout
        self.default_params: Dict[str, Any] = dict(default_params or {})
        self.headers: Dict[str, str] = {"Accept": "application/json", **(headers or {})}
        self.session: Optional[httpx.AsyncClient] = None
        self.throttle_retries = 0

        self._transport = transport
        self._clock = clock
        self._sleep = sleep
        self._queue: Optional[asyncio.Queue[Optional[_PendingRequest]]] = None
        self._worker: Optional[asyncio.Task] = None
        self._last_issued_at: Optional[float] = None
        self._closing = False

    async def __aenter__(self) -> "RequestGateway":
        await self.start()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    @property
    def is_running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    async def start(self) -> None:
        if self.is_running:
            return
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.headers,
            transport=self._transport,
        )
        self._queue = asyncio.Queue()
        self._closing = False
        self._worker = asyncio.create_task(self._run(), name="opendota-gateway")
        logger.debug(lambda: f"gateway started base_url={self.base_url} spacing={self.min_interval_ms}ms")

    async def close(self) -> None:
        """Finish every queued request, then stop the worker and the HTTP session.

        New requests are refused from the moment closing begins.
        """
        self._closing = True
        if self._worker is not None and self._queue is not None:
            await self._queue.put(None)
            await self._worker
        self._worker = None
        self._queue = None
        if self.session is not None:
            await self.session.aclose()
            self.session = None

    async def fetch(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Queue a request and wait for its (non-429) response."""
        if self._closing:
            raise GatewayClosedError("RequestGateway is closing")
        if not self.is_running or self._queue is None:
            raise GatewayClosedError("RequestGateway is not running; use 'async with' or start()")
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        request = _PendingRequest(
            method=method.upper(),
            path=path,
            params={**self.default_params, **(params or {})},
            future=future,
        )
        await self._queue.put(request)
        return await future

    async def _run(self) -> None:
        assert self._queue is not None
        while True:
            request = await self._queue.get()
            try:
                if request is None:
                    self._reject_remaining()
                    return
                try:
                    response = await self._execute(request)
                except Exception as exc:
                    if not request.future.done():
                        request.future.set_exception(exc)
                else:
                    if not request.future.done():
                        request.future.set_result(response)
            finally:
                self._queue.task_done()

    def _reject_remaining(self) -> None:
        # Anything behind the stop marker would never be served.
        assert self._queue is not None
        while not self._queue.empty():
            request = self._queue.get_nowait()
            self._queue.task_done()
            if request is not None and not request.future.done():
                request.future.set_exception(GatewayClosedError("RequestGateway closed before the request ran"))

    async def _wait_for_spacing(self) -> None:
        if self._last_issued_at is None:
            return
        elapsed = self._clock() - self._last_issued_at
        remaining = self.min_interval_ms / 1000.0 - elapsed
        if remaining > 0:
            logger.trace(lambda: f"spacing: waiting {remaining * 1000:.0f}ms")
            await self._sleep(remaining)

    async def _execute(self, request: _PendingRequest) -> httpx.Response:
        assert self.session is not None
        await self._wait_for_spacing()

        attempts = 0
        while True:
            self._last_issued_at = self._clock()
            try:
                response = await self.session.request(
                    request.method, request.path, params=request.params or None
                )
            except httpx.TransportError as exc:
                logger.error(lambda: f"network error {request.method} {request.path}: {exc!r}")
                raise

            if response.status_code != TOO_MANY_REQUESTS:
                return response

            attempts += 1
            if self.max_throttle_retries is not None and attempts > self.max_throttle_retries:
                logger.error(
                    lambda: f"429 on {request.path}, giving up after {self.max_throttle_retries} retries"
                )
                return response

            self.throttle_retries += 1
            logger.warning(
                lambda: f"429 on {request.path}, backing off {self.throttle_penalty_ms}ms (retry {attempts})"
            )
            await self._sleep(self.throttle_penalty_ms / 1000.0)

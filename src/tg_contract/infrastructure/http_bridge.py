"""BridgeTransport over HTTP: talks to a bridge host (see src.main).

Request:  POST {BRIDGE_URL} {"route": "...", "args": ["<json>", ...]}
Response: unified ApiResponse envelope; non-zero code is re-raised as the
matching AppError subclass.

Log format:
    INFO bridge contract.0xabc.erc20.balanceOf → 200 (12ms)
"""

import logging
import time
from typing import Any

import httpx

from config.settings import settings
from src.tg_common.errors import BridgeError
from src.tg_common.response import unwrap_response

logger = logging.getLogger(__name__)


class HttpBridgeTransport:
    def __init__(
        self,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._url = url or settings.BRIDGE_URL
        self._client = client or httpx.AsyncClient(
            timeout=timeout or settings.BRIDGE_TIMEOUT_SECONDS
        )

    async def invoke(self, route: str, args: list[str]) -> Any:
        start = time.perf_counter()
        try:
            response = await self._client.post(
                self._url, json={"route": route, "args": args}
            )
        except httpx.HTTPError as exc:
            raise BridgeError(route, str(exc)) from exc
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("bridge %s → %d (%.0fms)", route, response.status_code, elapsed_ms)

        try:
            body = response.json()
        except ValueError:
            raise BridgeError(
                route, f"non-JSON response (HTTP {response.status_code})"
            ) from None
        if not isinstance(body, dict) or "code" not in body:
            raise BridgeError(route, f"unexpected response shape (HTTP {response.status_code})")
        return unwrap_response(body)

    async def aclose(self) -> None:
        await self._client.aclose()

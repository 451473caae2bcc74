"""Request logging middleware.

Logs every bridge request with method, path, bridge route, status code,
latency, and a short request ID for correlation. The request_id is also
injected into request.state so the router can put it in the ApiResponse.

Log format:
    INFO [POST] /api/v1/bridge/invoke contract.0xabc.erc20.balanceOf → 200 (23ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("tg.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "[%s] %s %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            getattr(request.state, "bridge_route", "-"),
            response.status_code,
            elapsed_ms,
            request.state.request_id,
        )
        return response

"""FastAPI bridge host.

Serves the ERC20 bridge routes for restricted runtimes out of process. The
host application owns the chain connection, so it builds the SdkContext
(reader, writer, wallet) and passes it in:

    # host_app.py
    def build() -> FastAPI:
        return create_app(SdkContext(wallet=..., reader=..., writer=...))

Run with: uvicorn host_app:build --factory --port 8000
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.tg_common.errors import AppError
from src.tg_common.logging_config import configure_logging
from src.tg_common.response import error_response
from src.tg_contract.context import SdkContext
from src.tg_gateway.api.router import router as bridge_router
from src.tg_gateway.application.dispatcher import BridgeRouteDispatcher
from src.tg_gateway.middleware.request_log import RequestLogMiddleware

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def create_app(context: SdkContext) -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: log the connected chain. Shutdown: nothing to dispose."""
        chain_id = await context.wallet.get_chain_id()
        logger.info("%s bridge host ready: chain_id=%d", settings.APP_NAME, chain_id)
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.dispatcher = BridgeRouteDispatcher(context)

    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        logger.warning("AppError %d on %s: %s", exc.code, request.url.path, exc.message)
        resp = error_response(exc.code, exc.message)
        resp.request_id = getattr(request.state, "request_id", resp.request_id)
        return JSONResponse(
            status_code=exc.http_status,
            content=resp.model_dump(),
        )

    app.include_router(bridge_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": VERSION}

    return app

"""Bridge host REST endpoint.

POST /bridge/invoke   {"route": "...", "args": ["<json>", ...]} → ApiResponse
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.tg_common.response import ApiResponse, success_response
from src.tg_gateway.application.dispatcher import BridgeRouteDispatcher
from src.tg_gateway.application.schemas import BridgeInvokeRequest

router = APIRouter(prefix="/bridge", tags=["bridge"])


def get_dispatcher(request: Request) -> BridgeRouteDispatcher:
    return request.app.state.dispatcher


@router.post("/invoke")
async def invoke(
    body: BridgeInvokeRequest,
    request: Request,
    dispatcher: Annotated[BridgeRouteDispatcher, Depends(get_dispatcher)],
) -> ApiResponse:
    request.state.bridge_route = body.route
    result = await dispatcher.dispatch(body.route, body.args)
    resp = success_response(result)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp

"""Unified bridge response wrapper.

Every bridge invocation returns this format:
{
    "code": 0,           // 0=success, non-0=AppError code
    "message": "success",
    "data": ...,         // null on error
    "timestamp": "...",
    "request_id": "..."
}
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from src.tg_common.errors import error_from_code


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def success_response(data: Any = None) -> ApiResponse:
    return ApiResponse(code=0, message="success", data=data)


def error_response(code: int, message: str) -> ApiResponse:
    return ApiResponse(code=code, message=message, data=None)


def unwrap_response(body: dict[str, Any]) -> Any:
    """Return `data` from a response envelope, or raise the AppError it carries."""
    resp = ApiResponse.model_validate(body)
    if resp.code != 0:
        raise error_from_code(resp.code, resp.message)
    return resp.data

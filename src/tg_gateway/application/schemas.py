"""Pydantic schemas for the bridge invoke endpoint."""

from pydantic import BaseModel, Field


class BridgeInvokeRequest(BaseModel):
    route: str = Field(min_length=1)
    args: list[str] = Field(default_factory=list)

"""Pydantic request/response schemas for tn_tracking.

All responses are wrapped in ApiResponse at the router layer.
"""

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    country: str = Field(..., min_length=1, max_length=128)
    local_address: str = Field(..., min_length=1, max_length=64)
    count: int = Field(default=1, ge=1, le=100)


class GenerateResponse(BaseModel):
    tracking_numbers: list[str]


class DecodedIdResponse(BaseModel):
    packed_id: int
    timestamp_ms: int
    generated_at: str | None  # ISO-8601 UTC; None when past datetime's range
    datacenter_id: int
    worker_id: int
    sequence: int

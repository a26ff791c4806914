"""Unified API response wrapper.

All API endpoints return this format:
{
    "code": 0,           // 0=success, non-0=AppError code
    "message": "success",
    "data": { ... },     // null on error
    "timestamp": "...",
    "request_id": "..."
}
"""

from typing import Any

from pydantic import BaseModel, Field

from src.tn_common.datetime_utils import utc_now


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    request_id: str = "req_unknown"


def success_response(data: Any = None, request_id: str = "req_unknown") -> ApiResponse:
    return ApiResponse(code=0, message="success", data=data, request_id=request_id)


def error_response(code: int, message: str, request_id: str = "req_unknown") -> ApiResponse:
    return ApiResponse(code=code, message=message, data=None, request_id=request_id)

"""Tracking number API router: generate, decode.

request_id is read from request.state (injected by RequestLogMiddleware).
"""

from fastapi import APIRouter, Depends, Path, Request, status

from src.tn_common.datetime_utils import millis_to_datetime
from src.tn_common.response import ApiResponse, success_response
from src.tn_tracking.api.schemas import DecodedIdResponse, GenerateRequest, GenerateResponse
from src.tn_tracking.engine.generator import TrackingNumberGenerator, get_default_generator

router = APIRouter(prefix="/tracking-numbers", tags=["tracking"])


def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "req_unknown")


def _iso_or_none(timestamp_ms: int) -> str | None:
    # Wide timestamp layouts can decode past year 9999.
    try:
        return millis_to_datetime(timestamp_ms).isoformat()
    except (ValueError, OverflowError, OSError):
        return None


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    summary="Generate tracking numbers",
)
def generate(
    request: Request,
    body: GenerateRequest,
    generator: TrackingNumberGenerator = Depends(get_default_generator),
) -> ApiResponse:
    # Sync handler: runs in the threadpool so the generator lock never blocks the event loop.
    numbers = [generator.generate(body.country, body.local_address) for _ in range(body.count)]
    data = GenerateResponse(tracking_numbers=numbers)
    return success_response(data.model_dump(), request_id=_get_request_id(request))


@router.get(
    "/decode/{packed_id}",
    response_model=ApiResponse,
    summary="Decode a packed snowflake id",
)
def decode(
    request: Request,
    packed_id: int = Path(..., ge=0, le=(1 << 63) - 1),
    generator: TrackingNumberGenerator = Depends(get_default_generator),
) -> ApiResponse:
    decoded = generator.decode(packed_id)
    data = DecodedIdResponse(
        packed_id=packed_id,
        timestamp_ms=decoded.timestamp_ms,
        generated_at=_iso_or_none(decoded.timestamp_ms),
        datacenter_id=decoded.datacenter_id,
        worker_id=decoded.worker_id,
        sequence=decoded.sequence,
    )
    return success_response(data.model_dump(), request_id=_get_request_id(request))

"""Insurance estimate routes."""

import logging

from fastapi import APIRouter, HTTPException, Request

from dealroom.api.schemas import EstimateResponse
from dealroom.engine.insurance import estimate_insurance
from dealroom.exceptions import EstimateValidationError
from dealroom.models.insurance import FieldError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/insurance", tags=["insurance"])


async def _read_payload(request: Request):
    """JSON request body; a missing or malformed body fails on field ``input``."""
    try:
        return await request.json()
    except ValueError:
        error = EstimateValidationError(
            [FieldError(field="input", message="invalid input: body must be a JSON object")]
        )
        raise HTTPException(status_code=400, detail=error.to_dict())


@router.post("/estimate", response_model=EstimateResponse)
async def estimate(request: Request):
    """Estimate annual and monthly insurance cost for a property."""
    payload = await _read_payload(request)
    try:
        result = estimate_insurance(payload)
    except EstimateValidationError as e:
        logger.info("Rejected insurance estimate request: %s", e)
        raise HTTPException(status_code=400, detail=e.to_dict())

    return EstimateResponse.model_validate(result.to_dict())

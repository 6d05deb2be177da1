"""Deal listing routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from dealroom.api.deps import get_default_occupancy
from dealroom.api.schemas import DealInsuranceSnapshotEnvelope, DealInsuranceSnapshotResponse
from dealroom.engine.deal_insurance import build_deal_insurance_snapshot

router = APIRouter(prefix="/api/v1/deals", tags=["deals"])


@router.post("/insurance-snapshot", response_model=DealInsuranceSnapshotEnvelope)
async def insurance_snapshot(
    form: dict[str, Any] = Body(...),
    default_occupancy: str = Depends(get_default_occupancy),
):
    """Insurance snapshot stored alongside a submitted deal.

    A deal without square footage, or with inputs the estimator rejects, gets
    no snapshot rather than an error.
    """
    snapshot = build_deal_insurance_snapshot(form, default_occupancy=default_occupancy)
    if snapshot is None:
        return DealInsuranceSnapshotEnvelope(snapshot=None)

    return DealInsuranceSnapshotEnvelope(
        snapshot=DealInsuranceSnapshotResponse(
            annual=snapshot.annual,
            monthly=snapshot.monthly,
            inputs=snapshot.inputs,
            updated_at=snapshot.updated_at,
        )
    )

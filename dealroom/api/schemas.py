"""Pydantic schemas for API responses.

Responses keep the camelCase keys the web client already reads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EstimateBreakdownResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    replacement_cost: float = Field(..., alias="replacementCost")
    cost_per_sqft: float = Field(..., alias="costPerSqft")
    base_rate: float = Field(..., alias="baseRate")
    base_rate_adjustments: list[str] = Field(default_factory=list, alias="baseRateAdjustments")
    occupancy_multiplier: float = Field(..., alias="occupancyMultiplier")
    deductible_multiplier: float = Field(..., alias="deductibleMultiplier")
    risk_multiplier: float = Field(..., alias="riskMultiplier")
    annual: float
    monthly: float


class EstimateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    replacement_cost: float = Field(..., alias="replacementCost")
    annual: float
    monthly: float
    breakdown: EstimateBreakdownResponse


class DealInsuranceSnapshotResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    annual: float
    monthly: float
    inputs: dict[str, Any]
    updated_at: str = Field(..., alias="updatedAt")


class DealInsuranceSnapshotEnvelope(BaseModel):
    snapshot: DealInsuranceSnapshotResponse | None = None

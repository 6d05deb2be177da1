"""Insurance estimate data types.

EstimateInputSchema is the wire contract (camelCase keys, strict types). It is
validated once and converted into the immutable EstimateInput the engine works
on, so the arithmetic never sees missing or malformed data.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, Strict, StrictBool


class Occupancy(Enum):
    OWNER = "owner"
    RENTAL = "rental"
    VACANT = "vacant"


class Construction(Enum):
    FRAME = "frame"
    MASONRY = "masonry"
    UNKNOWN = "unknown"


DEDUCTIBLE_OPTIONS: tuple[int, ...] = (1000, 2500, 5000)
DEFAULT_DEDUCTIBLE = 2500


@dataclass(frozen=True)
class RiskFlags:
    flood: bool | None = None
    wildfire: bool | None = None
    hurricane: bool | None = None
    hail: bool | None = None

    def to_dict(self) -> dict:
        return {
            name: value
            for name, value in (
                ("flood", self.flood),
                ("wildfire", self.wildfire),
                ("hurricane", self.hurricane),
                ("hail", self.hail),
            )
            if value is not None
        }


@dataclass(frozen=True)
class EstimateInput:
    sqft: float
    year_built: int | None = None
    occupancy: Occupancy = Occupancy.OWNER
    roof_age_years: int | None = None
    construction: Construction = Construction.UNKNOWN
    deductible: int = DEFAULT_DEDUCTIBLE
    risk_flags: RiskFlags | None = None
    replacement_cost_override: float | None = None
    cost_per_sqft_override: float | None = None

    def to_dict(self) -> dict:
        """camelCase mapping with defaults applied; absent optionals are omitted."""
        data: dict = {
            "sqft": self.sqft,
            "occupancy": self.occupancy.value,
            "construction": self.construction.value,
            "deductible": self.deductible,
        }
        if self.year_built is not None:
            data["yearBuilt"] = self.year_built
        if self.roof_age_years is not None:
            data["roofAgeYears"] = self.roof_age_years
        if self.risk_flags is not None:
            data["riskFlags"] = self.risk_flags.to_dict()
        if self.replacement_cost_override is not None:
            data["replacementCostOverride"] = self.replacement_cost_override
        if self.cost_per_sqft_override is not None:
            data["costPerSqftOverride"] = self.cost_per_sqft_override
        return data


@dataclass(frozen=True)
class EstimateBreakdown:
    replacement_cost: float
    cost_per_sqft: float
    base_rate: float
    base_rate_adjustments: tuple[str, ...]
    occupancy_multiplier: float
    deductible_multiplier: float
    risk_multiplier: float
    annual: float
    monthly: float

    def to_dict(self) -> dict:
        return {
            "replacementCost": self.replacement_cost,
            "costPerSqft": self.cost_per_sqft,
            "baseRate": self.base_rate,
            "baseRateAdjustments": list(self.base_rate_adjustments),
            "occupancyMultiplier": self.occupancy_multiplier,
            "deductibleMultiplier": self.deductible_multiplier,
            "riskMultiplier": self.risk_multiplier,
            "annual": self.annual,
            "monthly": self.monthly,
        }


@dataclass(frozen=True)
class EstimateResult:
    replacement_cost: float
    annual: float
    monthly: float
    breakdown: EstimateBreakdown

    def to_dict(self) -> dict:
        return {
            "replacementCost": self.replacement_cost,
            "annual": self.annual,
            "monthly": self.monthly,
            "breakdown": self.breakdown.to_dict(),
        }


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class DealInsuranceSnapshot:
    """Insurance figures stored on a deal at submission time."""
    annual: float
    monthly: float
    inputs: dict = field(default_factory=dict)
    updated_at: str = ""


@dataclass(frozen=True)
class DealInsuranceFigures:
    annual: float | None = None
    monthly: float | None = None


# ---- Validation schema ----


def _whole_number(value):
    """Accept whole-number floats (1940.0) as ints; strings and bools are not numbers."""
    if isinstance(value, (bool, str)):
        raise ValueError("Input should be a valid integer")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


PositiveNumber = Annotated[float, Strict(), Field(gt=0, allow_inf_nan=False)]
WholeNumber = Annotated[int, BeforeValidator(_whole_number)]
NonNegativeWholeNumber = Annotated[int, BeforeValidator(_whole_number), Field(ge=0)]
DeductibleOption = Annotated[Literal[1000, 2500, 5000], BeforeValidator(_whole_number)]


class RiskFlagsSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    flood: StrictBool = None
    wildfire: StrictBool = None
    hurricane: StrictBool = None
    hail: StrictBool = None


class EstimateInputSchema(BaseModel):
    """Optional fields default to None only when the key is absent; an explicit null fails."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sqft: PositiveNumber
    year_built: WholeNumber = Field(None, alias="yearBuilt")
    occupancy: Literal["owner", "rental", "vacant"] = "owner"
    roof_age_years: NonNegativeWholeNumber = Field(None, alias="roofAgeYears")
    construction: Literal["frame", "masonry", "unknown"] = "unknown"
    deductible: DeductibleOption = DEFAULT_DEDUCTIBLE
    risk_flags: RiskFlagsSchema = Field(None, alias="riskFlags")
    replacement_cost_override: PositiveNumber = Field(None, alias="replacementCostOverride")
    cost_per_sqft_override: PositiveNumber = Field(None, alias="costPerSqftOverride")

    def to_input(self) -> EstimateInput:
        flags = None
        if self.risk_flags is not None:
            flags = RiskFlags(
                flood=self.risk_flags.flood,
                wildfire=self.risk_flags.wildfire,
                hurricane=self.risk_flags.hurricane,
                hail=self.risk_flags.hail,
            )
        return EstimateInput(
            sqft=self.sqft,
            year_built=self.year_built,
            occupancy=Occupancy(self.occupancy),
            roof_age_years=self.roof_age_years,
            construction=Construction(self.construction),
            deductible=self.deductible,
            risk_flags=flags,
            replacement_cost_override=self.replacement_cost_override,
            cost_per_sqft_override=self.cost_per_sqft_override,
        )

"""Property insurance cost estimator.

Pure function: property attributes in, EstimateResult out. No I/O.

replacement cost x base rate x occupancy x deductible x risk = annual premium.
Replacement cost comes from a $/sqft figure driven by age and construction,
unless the caller overrides it. The base rate carries an audit trail of the
adjustments that fired.
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from dealroom.exceptions import EstimateValidationError
from dealroom.models.insurance import (
    Construction,
    EstimateBreakdown,
    EstimateInput,
    EstimateInputSchema,
    EstimateResult,
    FieldError,
    Occupancy,
)

logger = logging.getLogger(__name__)

BASE_COST_PER_SQFT = 200.0
PRE_1980_COST_PER_SQFT = 215.0
PRE_1950_COST_PER_SQFT = 230.0
CONSTRUCTION_COST_DELTA: dict[Construction, float] = {
    Construction.MASONRY: -10.0,
    Construction.FRAME: 10.0,
}

BASE_RATE = 0.005  # 0.5% of replacement cost

OCCUPANCY_MULTIPLIERS: dict[Occupancy, float] = {
    Occupancy.OWNER: 1.0,
    Occupancy.RENTAL: 1.15,
    Occupancy.VACANT: 1.35,
}

DEDUCTIBLE_MULTIPLIERS: dict[int, float] = {
    1000: 1.10,
    2500: 1.0,
    5000: 0.90,
}

# Applied in this order; each flag compounds independently.
RISK_MULTIPLIERS: tuple[tuple[str, float], ...] = (
    ("flood", 1.20),
    ("wildfire", 1.20),
    ("hurricane", 1.15),
    ("hail", 1.10),
)

_WIRE_NAMES = {
    name: info.alias or name for name, info in EstimateInputSchema.model_fields.items()
}


def _field_path(loc: tuple) -> str:
    if not loc:
        return "input"
    head = _WIRE_NAMES.get(loc[0], loc[0])
    return ".".join(str(part) for part in (head, *loc[1:]))


def _field_errors(exc: ValidationError) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        path = _field_path(tuple(err["loc"]))
        top = path.split(".")[0]
        errors.append(FieldError(field=path, message=f"invalid {top}: {err['msg']}"))
    return errors


def validate_estimate_input(data: Mapping | EstimateInput) -> EstimateInput:
    """Validate raw input and apply defaults.

    Accepts a camelCase (or snake_case) mapping, or an EstimateInput built by
    hand, which is re-checked through the same rules.

    Raises EstimateValidationError naming the offending field.
    """
    if isinstance(data, EstimateInput):
        data = data.to_dict()
    try:
        schema = EstimateInputSchema.model_validate(data)
    except ValidationError as e:
        raise EstimateValidationError(_field_errors(e)) from e
    return schema.to_input()


def resolve_cost_per_sqft(inp: EstimateInput) -> float:
    """Replacement $/sqft.

    Steps run in order against one running value: the pre-1950 figure lands
    after the pre-1980 one, construction shifts whichever figure won, and an
    explicit override discards all of it.
    """
    cost = BASE_COST_PER_SQFT

    if inp.year_built is not None and inp.year_built < 1980:
        cost = PRE_1980_COST_PER_SQFT
    if inp.year_built is not None and inp.year_built < 1950:
        cost = PRE_1950_COST_PER_SQFT

    cost += CONSTRUCTION_COST_DELTA.get(inp.construction, 0.0)

    if inp.cost_per_sqft_override is not None:
        cost = inp.cost_per_sqft_override

    return cost


def resolve_replacement_cost(inp: EstimateInput, cost_per_sqft: float) -> float:
    if inp.replacement_cost_override is not None:
        return inp.replacement_cost_override
    return inp.sqft * cost_per_sqft


def resolve_base_rate(inp: EstimateInput) -> tuple[float, tuple[str, ...]]:
    """Annual rate per dollar of replacement cost, plus the labels applied."""
    rate = BASE_RATE
    adjustments = []

    if inp.year_built is not None and inp.year_built < 1980:
        rate += 0.0005
        adjustments.append("yearBuilt<1980:+0.05%")
    if inp.year_built is not None and inp.year_built < 1950:
        rate += 0.001
        adjustments.append("yearBuilt<1950:+0.10%")
    if inp.roof_age_years is not None and inp.roof_age_years >= 15:
        rate += 0.0005
        adjustments.append("roofAge>=15:+0.05%")

    return rate, tuple(adjustments)


def occupancy_multiplier(occupancy: Occupancy) -> float:
    return OCCUPANCY_MULTIPLIERS.get(occupancy, 1.0)


def deductible_multiplier(deductible: int) -> float:
    return DEDUCTIBLE_MULTIPLIERS.get(deductible, 1.0)


def risk_multiplier(inp: EstimateInput) -> float:
    multiplier = 1.0
    flags = inp.risk_flags
    if flags is None:
        return multiplier
    for name, factor in RISK_MULTIPLIERS:
        if getattr(flags, name):
            multiplier *= factor
    return multiplier


def estimate_insurance(data: Mapping | EstimateInput) -> EstimateResult:
    """Estimate annual and monthly insurance cost.

    Validation runs first; EstimateValidationError is the only failure mode.
    """
    inp = validate_estimate_input(data)

    cost_per_sqft = resolve_cost_per_sqft(inp)
    replacement_cost = resolve_replacement_cost(inp, cost_per_sqft)
    base_rate, adjustments = resolve_base_rate(inp)
    occ_mult = occupancy_multiplier(inp.occupancy)
    ded_mult = deductible_multiplier(inp.deductible)
    risk_mult = risk_multiplier(inp)

    annual = replacement_cost * base_rate * occ_mult * ded_mult * risk_mult
    monthly = annual / 12

    logger.debug(
        "Insurance estimate: replacement $%.0f, rate %.4f, occ %.2fx, ded %.2fx, risk %.4fx -> $%.2f/yr",
        replacement_cost, base_rate, occ_mult, ded_mult, risk_mult, annual,
    )

    breakdown = EstimateBreakdown(
        replacement_cost=replacement_cost,
        cost_per_sqft=cost_per_sqft,
        base_rate=base_rate,
        base_rate_adjustments=adjustments,
        occupancy_multiplier=occ_mult,
        deductible_multiplier=ded_mult,
        risk_multiplier=risk_mult,
        annual=annual,
        monthly=monthly,
    )
    return EstimateResult(
        replacement_cost=replacement_cost,
        annual=annual,
        monthly=monthly,
        breakdown=breakdown,
    )

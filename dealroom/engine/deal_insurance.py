"""Insurance figures attached to deal listings.

Deal submission collects the estimator inputs as loose form fields. Nothing
here raises on bad input: a deal is still accepted without an insurance
estimate, so validation failures are logged and turned into None.
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime, timezone

from dealroom.engine.insurance import estimate_insurance, validate_estimate_input
from dealroom.exceptions import EstimateValidationError
from dealroom.models.insurance import (
    DEDUCTIBLE_OPTIONS,
    DealInsuranceFigures,
    DealInsuranceSnapshot,
)

logger = logging.getLogger(__name__)

RISK_FORM_FIELDS: dict[str, str] = {
    "flood": "riskFlood",
    "wildfire": "riskWildfire",
    "hurricane": "riskHurricane",
    "hail": "riskHail",
}


def _form_number(value) -> int | float | None:
    """Parse a form value as a number. Blank or unparseable values are None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (int, float)):
        return None

    try:
        num = float(value)
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(num):
        return None
    # Whole numbers come back as int so integer-only fields (year, roof age) accept them.
    if num.is_integer():
        return int(num)
    return num


def _form_text(value, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _form_checked(value) -> bool:
    # Checkboxes post their value only when ticked.
    return bool(value)


def insurance_input_from_form(
    form: Mapping,
    default_occupancy: str = "rental",
) -> dict | None:
    """Map deal-submission form fields onto estimator input.

    Returns None when the form carries no square footage, since no estimate
    can be made without it.
    """
    sqft = _form_number(form.get("squareFeet"))
    if not sqft:
        return None

    data: dict = {
        "sqft": sqft,
        "occupancy": _form_text(form.get("occupancy"), default_occupancy),
        "construction": _form_text(form.get("construction"), "unknown"),
        "riskFlags": {
            flag: _form_checked(form.get(field_name))
            for flag, field_name in RISK_FORM_FIELDS.items()
        },
    }

    year_built = _form_number(form.get("yearBuilt"))
    if year_built is not None:
        data["yearBuilt"] = year_built

    roof_age = _form_number(form.get("roofAgeYears"))
    if roof_age is not None:
        data["roofAgeYears"] = roof_age

    # Off-menu deductibles fall back to the estimator default rather than failing.
    deductible = _form_number(form.get("deductible"))
    if deductible in DEDUCTIBLE_OPTIONS:
        data["deductible"] = deductible

    override = _form_number(form.get("replacementCostOverride"))
    if override is not None:
        data["replacementCostOverride"] = override

    return data


def build_deal_insurance_snapshot(
    form: Mapping,
    now: datetime | None = None,
    default_occupancy: str = "rental",
) -> DealInsuranceSnapshot | None:
    """Estimate insurance for a submitted deal.

    Returns None if the form has no square footage or its inputs don't validate.
    """
    data = insurance_input_from_form(form, default_occupancy=default_occupancy)
    if data is None:
        return None

    try:
        inp = validate_estimate_input(data)
    except EstimateValidationError as e:
        logger.warning("Skipping deal insurance estimate: %s", e)
        return None

    result = estimate_insurance(inp)
    stamp = now or datetime.now(timezone.utc)
    return DealInsuranceSnapshot(
        annual=result.annual,
        monthly=result.monthly,
        inputs=inp.to_dict(),
        updated_at=stamp.isoformat(),
    )


def resolve_deal_insurance(
    stored_annual: float | None,
    stored_monthly: float | None,
    stored_inputs: Mapping | None,
) -> DealInsuranceFigures:
    """Insurance figures to show for a stored deal.

    Stored figures win. Missing ones are recomputed from the stored inputs
    when those still validate.
    """
    recomputed = None
    if stored_inputs:
        try:
            recomputed = estimate_insurance(stored_inputs)
        except EstimateValidationError as e:
            logger.warning("Stored insurance inputs no longer validate: %s", e)

    annual = stored_annual
    if annual is None and recomputed is not None:
        annual = recomputed.annual

    monthly = stored_monthly
    if monthly is None and recomputed is not None:
        monthly = recomputed.monthly

    return DealInsuranceFigures(annual=annual, monthly=monthly)

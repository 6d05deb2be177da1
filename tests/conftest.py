"""Shared insurance estimator fixtures.

Scenario A: 2,000 sqft 2005 owner-occupied home, nothing unusual.
Scenario B: 1,500 sqft 1940 frame home with a 20-year-old roof.
Scenario C: 1,800 sqft 2010 masonry rental, $1,000 deductible, flood + hail.
"""

import pytest


@pytest.fixture
def baseline_input() -> dict:
    return {
        "sqft": 2000,
        "yearBuilt": 2005,
        "occupancy": "owner",
        "construction": "unknown",
    }


@pytest.fixture
def vintage_frame_input() -> dict:
    return {
        "sqft": 1500,
        "yearBuilt": 1940,
        "roofAgeYears": 20,
        "occupancy": "owner",
        "construction": "frame",
    }


@pytest.fixture
def risky_rental_input() -> dict:
    return {
        "sqft": 1800,
        "yearBuilt": 2010,
        "occupancy": "rental",
        "deductible": 1000,
        "riskFlags": {"flood": True, "hail": True},
        "construction": "masonry",
    }


@pytest.fixture
def deal_form() -> dict:
    """Deal submission form fields as posted by the browser."""
    return {
        "title": "Duplex on Elm",
        "squareFeet": "1800",
        "yearBuilt": "2010",
        "occupancy": "rental",
        "construction": "masonry",
        "deductible": "1000",
        "riskFlood": "on",
        "riskHail": "on",
        "roofAgeYears": "",
        "replacementCostOverride": "",
    }

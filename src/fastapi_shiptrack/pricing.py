"""Shipment cost estimation."""

from fastapi_shiptrack.models import PackageDetails

BASE_COST = 10.0
COST_PER_WEIGHT_UNIT = 2.0
VALUE_RATE = 0.01
FRAGILE_SURCHARGE = 5.0


def estimate_cost(package: PackageDetails) -> float:
    """Price a package from weight, declared value and fragility.

    Addresses and distance do not affect the price.
    """
    return (
        BASE_COST
        + package.weight * COST_PER_WEIGHT_UNIT
        + package.value * VALUE_RATE
        + (FRAGILE_SURCHARGE if package.fragile else 0.0)
    )

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from vehicle_costs.domain.constraints import VEHICLE_CONSTRAINTS, enforce, values_of
from vehicle_costs.domain.enums import FuelType

DEFAULT_FUEL_CONSUMPTION = Decimal("7.5")


@dataclass(frozen=True, slots=True)
class VehicleProfile:
    """
    Vehicle record supplied by the catalog.

    Only the fields the cost engine reads are modelled here. Consumption is
    liters per 100 km for liquid fuels and kWh-equivalent per 100 km for
    electric vehicles.
    """

    price: Decimal
    manufacture_year: int
    fuel_type: FuelType
    city_name: str
    combined_fuel_consumption: Decimal = DEFAULT_FUEL_CONSUMPTION

    def age_in(self, current_year: int) -> int:
        """Vehicle age in whole years at ``current_year`` (never negative)."""
        return max(0, current_year - self.manufacture_year)

    def validate(self, current_year: int) -> None:
        """
        Validate profile invariants.

        Raises:
            ValidationError: Listing every violated constraint
        """
        enforce(VEHICLE_CONSTRAINTS, values_of(self), current_year=current_year)

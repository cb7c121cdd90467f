from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from vehicle_costs.domain.constraints import OWNERSHIP_CONSTRAINTS, enforce, values_of
from vehicle_costs.domain.enums import FuelType
from vehicle_costs.domain.rules import AdjustmentRule, RuleLadder

DEFAULT_DEPRECIATION_RATE = Decimal("0.15")
BASE_INSURANCE_RATE = Decimal("0.03")
BASE_MAINTENANCE = Decimal("2000")
MAINTENANCE_PER_1000_KM = Decimal("50")
MAINTENANCE_ESCALATION = Decimal("0.05")

CATEGORIES: tuple[str, ...] = (
    "depreciation",
    "fuel",
    "insurance",
    "maintenance",
    "registration",
    "financing",
)


@dataclass(frozen=True, slots=True)
class OwnershipParams:
    car_price: Decimal
    car_age_years: int
    annual_mileage_km: Decimal
    fuel_type: FuelType
    fuel_consumption_per_100km: Decimal
    holding_period_years: int
    city_name: str

    def validate(self) -> None:
        enforce(OWNERSHIP_CONSTRAINTS, values_of(self))


@dataclass(frozen=True, slots=True)
class FinancingAssumption:
    """Loan structure assumed for every projection, whether or not the buyer finances."""

    loan_to_value: Decimal = Decimal("0.80")
    annual_interest_rate_percent: Decimal = Decimal("7.5")


@dataclass(frozen=True, slots=True)
class CostBreakdown:
    depreciation: Decimal
    fuel: Decimal
    insurance: Decimal
    maintenance: Decimal
    registration: Decimal
    financing: Decimal

    @property
    def total(self) -> Decimal:
        return sum((getattr(self, category) for category in CATEGORIES), Decimal("0"))


@dataclass(frozen=True, slots=True)
class YearlyCost:
    year: int
    depreciation: Decimal
    fuel: Decimal
    insurance: Decimal
    maintenance: Decimal
    registration: Decimal
    financing: Decimal
    total: Decimal


@dataclass(frozen=True, slots=True)
class AcquisitionTerms:
    """
    Annual figures fixed once at the start of ownership.

    Age tiers are evaluated against the vehicle's age at acquisition and are
    not re-evaluated per simulated year.
    """

    depreciation_rate: Decimal
    annual_fuel_cost: Decimal
    annual_insurance: Decimal
    annual_maintenance: Decimal
    annual_registration: Decimal
    total_financing_cost: Decimal


@dataclass(frozen=True, slots=True)
class OwnershipResult:
    total_cost: Decimal
    average_monthly_cost: Decimal
    breakdown: CostBreakdown
    yearly_breakdown: tuple[YearlyCost, ...]
    holding_period_years: int
    currency: str
    terms: AcquisitionTerms


# ==============================================================================
# Acquisition-time ladders
# ==============================================================================

DEPRECIATION_RATE_TIERS = RuleLadder(
    "depreciation_rate",
    (
        AdjustmentRule("older_than_10", lambda p: p.car_age_years > 10, Decimal("0.05")),
        AdjustmentRule("older_than_5", lambda p: p.car_age_years > 5, Decimal("0.08")),
    ),
)

INSURANCE_LADDERS: tuple[RuleLadder, ...] = (
    RuleLadder(
        "insurance_age_reduction",
        (AdjustmentRule("older_than_5", lambda p: p.car_age_years > 5, Decimal("0.8")),),
    ),
    RuleLadder(
        "insurance_old_vehicle_reduction",
        (AdjustmentRule("older_than_10", lambda p: p.car_age_years > 10, Decimal("0.7")),),
    ),
)

MAINTENANCE_LADDERS: tuple[RuleLadder, ...] = (
    RuleLadder(
        "maintenance_age_surcharge",
        (AdjustmentRule("older_than_5", lambda p: p.car_age_years > 5, Decimal("1.3")),),
    ),
    RuleLadder(
        "maintenance_old_vehicle_surcharge",
        (AdjustmentRule("older_than_10", lambda p: p.car_age_years > 10, Decimal("1.6")),),
    ),
    RuleLadder(
        "maintenance_electric_discount",
        (AdjustmentRule("electric", lambda p: p.fuel_type is FuelType.ELECTRIC, Decimal("0.6")),),
    ),
)

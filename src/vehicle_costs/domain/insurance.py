from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from vehicle_costs.domain.constraints import INSURANCE_CONSTRAINTS, enforce, values_of
from vehicle_costs.domain.enums import CoverageTier
from vehicle_costs.domain.rules import AdjustmentRule, AppliedAdjustment, RuleLadder

BASE_PREMIUM_RATE = Decimal("0.03")


@dataclass(frozen=True, slots=True)
class InsuranceParams:
    car_value: Decimal
    car_age_years: int
    driver_age_years: int
    city_name: str
    coverage_tier: CoverageTier
    deductible: int
    annual_mileage_km: Decimal

    def validate(self, allowed_deductibles: frozenset[int]) -> None:
        enforce(INSURANCE_CONSTRAINTS, values_of(self), allowed_deductibles=allowed_deductibles)


@dataclass(frozen=True, slots=True)
class CoverageBreakdown:
    liability: Decimal
    collision: Decimal
    theft_fire: Decimal
    personal_injury: Decimal

    @property
    def total(self) -> Decimal:
        return self.liability + self.collision + self.theft_fire + self.personal_injury


@dataclass(frozen=True, slots=True)
class InsuranceResult:
    monthly_premium: Decimal
    annual_premium: Decimal
    coverage_breakdown: CoverageBreakdown
    currency: str
    adjustments: tuple[AppliedAdjustment, ...] = ()


# ==============================================================================
# Premium ladders, applied in this order
# ==============================================================================

VEHICLE_AGE_LADDER = RuleLadder(
    "vehicle_age",
    (
        AdjustmentRule("older_than_10", lambda p: p.car_age_years > 10, Decimal("0.8")),
        AdjustmentRule("newer_than_3", lambda p: p.car_age_years < 3, Decimal("1.2")),
    ),
)

DRIVER_AGE_LADDER = RuleLadder(
    "driver_age",
    (
        AdjustmentRule("under_25", lambda p: p.driver_age_years < 25, Decimal("1.5")),
        AdjustmentRule("under_30", lambda p: p.driver_age_years < 30, Decimal("1.2")),
        AdjustmentRule("over_65", lambda p: p.driver_age_years > 65, Decimal("1.1")),
    ),
)

COVERAGE_TIER_LADDER = RuleLadder(
    "coverage_tier",
    (
        AdjustmentRule("basic", lambda p: p.coverage_tier is CoverageTier.BASIC, Decimal("0.6")),
        AdjustmentRule(
            "comprehensive", lambda p: p.coverage_tier is CoverageTier.COMPREHENSIVE, Decimal("1.0")
        ),
        AdjustmentRule("full", lambda p: p.coverage_tier is CoverageTier.FULL, Decimal("1.4")),
    ),
)

DEDUCTIBLE_LADDER = RuleLadder(
    "deductible",
    (
        AdjustmentRule("at_least_2000", lambda p: p.deductible >= 2000, Decimal("0.85")),
        AdjustmentRule("at_least_1500", lambda p: p.deductible >= 1500, Decimal("0.9")),
        AdjustmentRule("at_most_500", lambda p: p.deductible <= 500, Decimal("1.15")),
    ),
)

MILEAGE_LADDER = RuleLadder(
    "annual_mileage",
    (
        AdjustmentRule("over_20000_km", lambda p: p.annual_mileage_km > 20000, Decimal("1.2")),
        AdjustmentRule("under_10000_km", lambda p: p.annual_mileage_km < 10000, Decimal("0.9")),
    ),
)

PREMIUM_LADDERS: tuple[RuleLadder, ...] = (
    VEHICLE_AGE_LADDER,
    DRIVER_AGE_LADDER,
    COVERAGE_TIER_LADDER,
    DEDUCTIBLE_LADDER,
    MILEAGE_LADDER,
)

# Shares of the annual premium; liability is the largest and takes the rounding remainder
COVERAGE_SHARES: tuple[tuple[str, Decimal], ...] = (
    ("liability", Decimal("0.4")),
    ("collision", Decimal("0.3")),
    ("theft_fire", Decimal("0.2")),
    ("personal_injury", Decimal("0.1")),
)

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from vehicle_costs.domain.insurance import (
    BASE_PREMIUM_RATE,
    COVERAGE_SHARES,
    PREMIUM_LADDERS,
    CoverageBreakdown,
    InsuranceParams,
    InsuranceResult,
)
from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig
from vehicle_costs.domain.money import MONTHS_PER_YEAR, to_units
from vehicle_costs.domain.rules import AppliedAdjustment, RuleLadder, apply_ladders

logger = logging.getLogger(__name__)


def split_premium(annual_premium: Decimal) -> CoverageBreakdown:
    """
    Split a whole-unit annual premium into coverage shares.

    Each share is rounded to whole units independently; whatever the four
    roundings leave over goes to the first (largest) share so the parts add
    up to the premium exactly.
    """
    shares = {name: to_units(annual_premium * share) for name, share in COVERAGE_SHARES}
    largest = COVERAGE_SHARES[0][0]
    shares[largest] += annual_premium - sum(shares.values())
    return CoverageBreakdown(**shares)


@dataclass(frozen=True, slots=True)
class EstimateInsurancePremium:
    """
    Estimated annual and monthly premium from a multiplicative risk model.

    premium = car_value * 3%, then multiplied by one factor per ladder
    (vehicle age, driver age, coverage tier, deductible, mileage) and finally
    by the market's location multiplier. Premiums are whole currency units.
    """

    market: MarketConfig = DEFAULT_MARKET
    ladders: tuple[RuleLadder, ...] = PREMIUM_LADDERS

    def execute(self, params: InsuranceParams) -> InsuranceResult:
        params.validate(self.market.allowed_deductibles)

        base = params.car_value * BASE_PREMIUM_RATE
        premium, adjustments = apply_ladders(base, self.ladders, params)

        if self.market.knows_city(params.city_name):
            location = self.market.city_multiplier(params.city_name)
            premium *= location
            adjustments += (AppliedAdjustment(ladder="location", rule=params.city_name, factor=location),)

        annual_premium = to_units(premium)
        monthly_premium = to_units(annual_premium / MONTHS_PER_YEAR)

        logger.debug(
            "Insurance premium estimated",
            extra={
                "annual_premium": str(annual_premium),
                "adjustments": [f"{a.ladder}:{a.rule}" for a in adjustments],
            },
        )

        return InsuranceResult(
            monthly_premium=monthly_premium,
            annual_premium=annual_premium,
            coverage_breakdown=split_premium(annual_premium),
            currency=self.market.currency,
            adjustments=adjustments,
        )

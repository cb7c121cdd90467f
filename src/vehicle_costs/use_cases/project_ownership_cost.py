from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from vehicle_costs.domain.financing import amortize
from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig
from vehicle_costs.domain.money import MONTHS_PER_YEAR, ONE, to_cents
from vehicle_costs.domain.ownership import (
    BASE_INSURANCE_RATE,
    BASE_MAINTENANCE,
    CATEGORIES,
    DEFAULT_DEPRECIATION_RATE,
    DEPRECIATION_RATE_TIERS,
    INSURANCE_LADDERS,
    MAINTENANCE_ESCALATION,
    MAINTENANCE_LADDERS,
    MAINTENANCE_PER_1000_KM,
    AcquisitionTerms,
    CostBreakdown,
    FinancingAssumption,
    OwnershipParams,
    OwnershipResult,
    YearlyCost,
)
from vehicle_costs.domain.rules import apply_ladders

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectOwnershipCost:
    """
    Total cost of ownership over a holding period of 1 to 10 years.

    Every annual figure is captured once at acquisition (AcquisitionTerms).
    Year ``i`` (0-indexed) is then a pure function of those terms and ``i``:

    - depreciation: price * rate * (1 - rate)^i
    - maintenance: annual_maintenance * (1 + 0.05 * i)
    - fuel, insurance, registration: constant
    - financing: total interest of the assumed loan / holding period

    Aggregates use closed forms and must agree with the sum of the years:

    - depreciation: price * (1 - (1 - rate)^n)
    - maintenance: annual_maintenance * (n + 0.05 * n * (n - 1) / 2)

    Per-year figures and aggregates are rounded to cents independently, so
    the two views agree within one cent per year.
    """

    market: MarketConfig = DEFAULT_MARKET
    financing: FinancingAssumption = FinancingAssumption()

    def execute(self, params: OwnershipParams) -> OwnershipResult:
        params.validate()

        terms = self.acquisition_terms(params)
        years = params.holding_period_years

        yearly = tuple(self._year(params, terms, index) for index in range(years))
        aggregate = self._aggregate(params, terms)
        total = aggregate.total

        result = OwnershipResult(
            total_cost=to_cents(total),
            average_monthly_cost=to_cents(total / (years * MONTHS_PER_YEAR)),
            breakdown=CostBreakdown(
                **{category: to_cents(getattr(aggregate, category)) for category in CATEGORIES}
            ),
            yearly_breakdown=yearly,
            holding_period_years=years,
            currency=self.market.currency,
            terms=terms,
        )

        logger.debug(
            "Ownership cost projected",
            extra={
                "holding_period_years": years,
                "depreciation_rate": str(terms.depreciation_rate),
                "total_cost": str(result.total_cost),
            },
        )
        return result

    def acquisition_terms(self, params: OwnershipParams) -> AcquisitionTerms:
        """Fix every rate and annual figure from the vehicle's age at acquisition."""
        depreciation_rate = DEPRECIATION_RATE_TIERS.value_for(params, default=DEFAULT_DEPRECIATION_RATE)

        annual_fuel_cost = (
            params.annual_mileage_km
            / Decimal("100")
            * params.fuel_consumption_per_100km
            * self.market.fuel_price(params.fuel_type)
        )

        annual_insurance, _ = apply_ladders(
            params.car_price * BASE_INSURANCE_RATE, INSURANCE_LADDERS, params
        )

        maintenance_base = BASE_MAINTENANCE + params.annual_mileage_km / Decimal("1000") * MAINTENANCE_PER_1000_KM
        annual_maintenance, _ = apply_ladders(maintenance_base, MAINTENANCE_LADDERS, params)

        loan = amortize(
            params.car_price * self.financing.loan_to_value,
            self.financing.annual_interest_rate_percent,
            params.holding_period_years * MONTHS_PER_YEAR,
        )

        return AcquisitionTerms(
            depreciation_rate=depreciation_rate,
            annual_fuel_cost=annual_fuel_cost,
            annual_insurance=annual_insurance,
            annual_maintenance=annual_maintenance,
            annual_registration=self.market.annual_registration_fee,
            total_financing_cost=loan.total_interest,
        )

    @staticmethod
    def _year(params: OwnershipParams, terms: AcquisitionTerms, index: int) -> YearlyCost:
        rate = terms.depreciation_rate
        costs = CostBreakdown(
            depreciation=params.car_price * rate * (ONE - rate) ** index,
            fuel=terms.annual_fuel_cost,
            insurance=terms.annual_insurance,
            maintenance=terms.annual_maintenance * (ONE + MAINTENANCE_ESCALATION * index),
            registration=terms.annual_registration,
            financing=terms.total_financing_cost / params.holding_period_years,
        )
        return YearlyCost(
            year=index + 1,
            **{category: to_cents(getattr(costs, category)) for category in CATEGORIES},
            total=to_cents(costs.total),
        )

    @staticmethod
    def _aggregate(params: OwnershipParams, terms: AcquisitionTerms) -> CostBreakdown:
        years = params.holding_period_years
        rate = terms.depreciation_rate
        escalation_steps = Decimal(years * (years - 1)) / Decimal("2")
        return CostBreakdown(
            depreciation=params.car_price * (ONE - (ONE - rate) ** years),
            fuel=terms.annual_fuel_cost * years,
            insurance=terms.annual_insurance * years,
            maintenance=terms.annual_maintenance * (years + MAINTENANCE_ESCALATION * escalation_steps),
            registration=terms.annual_registration * years,
            financing=terms.total_financing_cost,
        )

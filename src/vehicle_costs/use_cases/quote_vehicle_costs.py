from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable

from vehicle_costs.domain.enums import CoverageTier
from vehicle_costs.domain.errors import ValidationError
from vehicle_costs.domain.financing import LoanParams, LoanResult
from vehicle_costs.domain.insurance import InsuranceParams, InsuranceResult
from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig
from vehicle_costs.domain.money import ZERO, to_units
from vehicle_costs.domain.ownership import OwnershipParams, OwnershipResult
from vehicle_costs.domain.vehicle import VehicleProfile
from vehicle_costs.use_cases.calculate_loan import CalculateLoan
from vehicle_costs.use_cases.estimate_insurance_premium import EstimateInsurancePremium
from vehicle_costs.use_cases.project_ownership_cost import ProjectOwnershipCost

logger = logging.getLogger(__name__)

DEFAULT_DOWN_PAYMENT_SHARE = Decimal("0.20")


@dataclass(frozen=True, slots=True)
class QuoteRequest:
    """
    A vehicle plus the user-adjustable parameters of all three calculators.

    Every parameter has the catalog's default; ``down_payment`` defaults to
    20% of the price.
    """

    vehicle: VehicleProfile
    down_payment: Decimal | None = None
    term_months: int = 60
    annual_interest_rate_percent: Decimal = Decimal("7.5")
    trade_in_value: Decimal = ZERO
    driver_age_years: int = 35
    coverage_tier: CoverageTier = CoverageTier.COMPREHENSIVE
    deductible: int = 1000
    annual_mileage_km: Decimal = Decimal("15000")
    holding_period_years: int = 5


@dataclass(frozen=True, slots=True)
class VehicleQuote:
    vehicle: VehicleProfile
    loan: LoanResult
    insurance: InsuranceResult
    ownership: OwnershipResult


@dataclass(frozen=True, slots=True)
class QuoteVehicleCosts:
    """
    Financing, insurance and ownership figures for one catalog vehicle.

    Derives the three parameter sets from the vehicle profile and runs each
    calculator. Quotes are independent of each other, so batches need no
    coordination.
    """

    market: MarketConfig = DEFAULT_MARKET
    today: Callable[[], date] = field(default=date.today)

    def execute(self, request: QuoteRequest) -> VehicleQuote:
        current_year = self.today().year
        vehicle = request.vehicle
        vehicle.validate(current_year)

        loan_params, insurance_params, ownership_params = self.derive_params(request, current_year)
        self._validate_together(loan_params, insurance_params, ownership_params)

        quote = VehicleQuote(
            vehicle=vehicle,
            loan=CalculateLoan(market=self.market).execute(loan_params),
            insurance=EstimateInsurancePremium(market=self.market).execute(insurance_params),
            ownership=ProjectOwnershipCost(market=self.market).execute(ownership_params),
        )

        logger.debug(
            "Vehicle quoted",
            extra={"price": str(vehicle.price), "car_age_years": insurance_params.car_age_years},
        )
        return quote

    def execute_many(self, requests: Iterable[QuoteRequest]) -> list[VehicleQuote]:
        """Quote each request in order; the first invalid request raises."""
        return [self.execute(request) for request in requests]

    @staticmethod
    def derive_params(
        request: QuoteRequest, current_year: int
    ) -> tuple[LoanParams, InsuranceParams, OwnershipParams]:
        """Build the three calculator inputs from the vehicle and the request defaults."""
        vehicle = request.vehicle
        car_age = vehicle.age_in(current_year)
        down_payment = (
            request.down_payment
            if request.down_payment is not None
            else to_units(vehicle.price * DEFAULT_DOWN_PAYMENT_SHARE)
        )

        loan = LoanParams(
            principal_price=vehicle.price,
            down_payment=down_payment,
            term_months=request.term_months,
            annual_interest_rate_percent=request.annual_interest_rate_percent,
            trade_in_value=request.trade_in_value,
        )
        insurance = InsuranceParams(
            car_value=vehicle.price,
            car_age_years=car_age,
            driver_age_years=request.driver_age_years,
            city_name=vehicle.city_name,
            coverage_tier=request.coverage_tier,
            deductible=request.deductible,
            annual_mileage_km=request.annual_mileage_km,
        )
        ownership = OwnershipParams(
            car_price=vehicle.price,
            car_age_years=car_age,
            annual_mileage_km=request.annual_mileage_km,
            fuel_type=vehicle.fuel_type,
            fuel_consumption_per_100km=vehicle.combined_fuel_consumption,
            holding_period_years=request.holding_period_years,
            city_name=vehicle.city_name,
        )
        return loan, insurance, ownership

    def _validate_together(
        self, loan: LoanParams, insurance: InsuranceParams, ownership: OwnershipParams
    ) -> None:
        """
        Validate all three parameter sets and report every problem at once.

        Field names are prefixed with their calculator ("loan.term_months").

        Raises:
            ValidationError: If any parameter set is invalid
        """
        checks: tuple[tuple[str, Callable[[], None]], ...] = (
            ("loan", loan.validate),
            ("insurance", lambda: insurance.validate(self.market.allowed_deductibles)),
            ("ownership", ownership.validate),
        )
        errors = []
        for section, check in checks:
            try:
                check()
            except ValidationError as exc:
                errors.extend(
                    {**error, "field": f"{section}.{error['field']}"} for error in exc.errors or []
                )
        if errors:
            raise ValidationError(errors=errors)

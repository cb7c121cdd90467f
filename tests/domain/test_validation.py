"""
Tests for the shared input validator.

The validator must report every violated constraint in a single
ValidationError, never only the first one.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from vehicle_costs.domain.constraints import MAX_AMOUNT
from vehicle_costs.domain.enums import CoverageTier, FuelType
from vehicle_costs.domain.errors import ValidationError
from vehicle_costs.domain.financing import LoanParams
from vehicle_costs.domain.market import MarketConfig
from vehicle_costs.domain.ownership import OwnershipParams
from vehicle_costs.domain.validation import (
    parse_insurance_params,
    parse_loan_params,
    parse_ownership_params,
    parse_vehicle_profile,
)


def codes_by_field(exc: ValidationError) -> dict[str, str]:
    return {error["field"]: error["code"] for error in exc.errors or []}


VALID_LOAN = {
    "principal_price": "100000",
    "down_payment": "20000",
    "term_months": 60,
    "annual_interest_rate_percent": "7.5",
}

VALID_INSURANCE = {
    "car_value": "50000",
    "car_age_years": 4,
    "driver_age_years": 40,
    "city_name": "Iasi",
    "coverage_tier": "comprehensive",
    "deductible": 1000,
    "annual_mileage_km": "15000",
}

VALID_OWNERSHIP = {
    "car_price": "60000",
    "car_age_years": 1,
    "annual_mileage_km": "15000",
    "fuel_type": "diesel",
    "fuel_consumption_per_100km": "6.0",
    "holding_period_years": 5,
    "city_name": "Bucharest",
}


# ============================================================================
# LOAN
# ============================================================================


def test_parses_valid_loan_params() -> None:
    params = parse_loan_params(VALID_LOAN)

    assert params == LoanParams(
        principal_price=Decimal("100000"),
        down_payment=Decimal("20000"),
        term_months=60,
        annual_interest_rate_percent=Decimal("7.5"),
        trade_in_value=Decimal("0"),
        include_schedule=False,
    )


def test_reports_every_missing_loan_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({})

    assert codes_by_field(exc_info.value) == {
        "principal_price": "REQUIRED",
        "down_payment": "REQUIRED",
        "term_months": "REQUIRED",
        "annual_interest_rate_percent": "REQUIRED",
    }


def test_reports_parse_and_range_errors_together() -> None:
    raw = {
        "principal_price": "-5",
        "down_payment": "abc",
        "term_months": 0,
        "annual_interest_rate_percent": "-1",
        "trade_in_value": "-10",
    }

    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params(raw)

    assert codes_by_field(exc_info.value) == {
        "down_payment": "INVALID_NUMBER",
        "principal_price": "OUT_OF_RANGE",
        "term_months": "OUT_OF_RANGE",
        "annual_interest_rate_percent": "OUT_OF_RANGE",
        "trade_in_value": "OUT_OF_RANGE",
    }


def test_reports_one_error_per_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({**VALID_LOAN, "down_payment": "-1"})

    assert exc_info.value.fields == ["down_payment"]


def test_down_payment_above_price_is_a_range_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({**VALID_LOAN, "down_payment": "150000"})

    assert codes_by_field(exc_info.value) == {"down_payment": "INVALID_RANGE"}


def test_down_payment_equal_to_price_is_valid() -> None:
    params = parse_loan_params({**VALID_LOAN, "down_payment": "100000"})

    assert params.financed_amount == 0


def test_trade_in_may_over_cover_the_price() -> None:
    params = parse_loan_params({**VALID_LOAN, "trade_in_value": "90000"})

    assert params.financed_amount == 0


def test_any_positive_term_is_accepted() -> None:
    assert parse_loan_params({**VALID_LOAN, "term_months": 30}).term_months == 30


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (100000, Decimal("100000")),
        (100000.5, Decimal("100000.5")),
        (" 100000.00 ", Decimal("100000.00")),
        (Decimal("99999.99"), Decimal("99999.99")),
    ],
)
def test_accepts_numbers_and_decimal_strings(value: object, expected: Decimal) -> None:
    assert parse_loan_params({**VALID_LOAN, "principal_price": value}).principal_price == expected


@pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", float("nan"), float("inf"), True, [1]])
def test_rejects_non_finite_or_non_numeric_amounts(value: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({**VALID_LOAN, "principal_price": value})

    assert codes_by_field(exc_info.value) == {"principal_price": "INVALID_NUMBER"}


@pytest.mark.parametrize(("value", "expected"), [("60", 60), (60.0, 60), (Decimal("48"), 48)])
def test_accepts_integral_terms(value: object, expected: int) -> None:
    assert parse_loan_params({**VALID_LOAN, "term_months": value}).term_months == expected


@pytest.mark.parametrize("value", ["60.5", 12.5, "twelve", False])
def test_rejects_non_integral_terms(value: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({**VALID_LOAN, "term_months": value})

    assert codes_by_field(exc_info.value) == {"term_months": "INVALID_INTEGER"}


def test_rejects_terms_and_rates_beyond_sane_limits() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({**VALID_LOAN, "term_months": 481, "annual_interest_rate_percent": "100.01"})

    assert codes_by_field(exc_info.value) == {
        "term_months": "OUT_OF_RANGE",
        "annual_interest_rate_percent": "OUT_OF_RANGE",
    }


@pytest.mark.parametrize(("value", "expected"), [(True, True), ("true", True), ("False", False), (None, False)])
def test_include_schedule_flag(value: object, expected: bool) -> None:
    assert parse_loan_params({**VALID_LOAN, "include_schedule": value}).include_schedule is expected


def test_typed_loan_params_reject_floats() -> None:
    params = LoanParams(
        principal_price=100000.0,  # type: ignore[arg-type]
        down_payment=Decimal("0"),
        term_months=60,
        annual_interest_rate_percent=Decimal("5"),
    )

    with pytest.raises(ValidationError) as exc_info:
        params.validate()

    assert codes_by_field(exc_info.value) == {"principal_price": "INVALID_NUMBER"}


@pytest.mark.parametrize("field", ["principal_price", "trade_in_value"])
def test_rejects_amounts_above_the_maximum(field: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_params({**VALID_LOAN, field: "1e26"})

    assert codes_by_field(exc_info.value) == {field: "OUT_OF_RANGE"}


def test_maximum_amount_is_accepted() -> None:
    params = parse_loan_params({**VALID_LOAN, "principal_price": str(MAX_AMOUNT)})

    assert params.principal_price == MAX_AMOUNT


# ============================================================================
# INSURANCE
# ============================================================================


def test_parses_valid_insurance_params() -> None:
    params = parse_insurance_params(VALID_INSURANCE)

    assert params.car_value == Decimal("50000")
    assert params.coverage_tier is CoverageTier.COMPREHENSIVE
    assert params.deductible == 1000


def test_reports_every_insurance_violation() -> None:
    raw = {
        **VALID_INSURANCE,
        "car_value": "0",
        "car_age_years": -1,
        "driver_age_years": 17,
        "coverage_tier": "platinum",
        "deductible": 750,
        "annual_mileage_km": "-1",
    }

    with pytest.raises(ValidationError) as exc_info:
        parse_insurance_params(raw)

    assert codes_by_field(exc_info.value) == {
        "coverage_tier": "INVALID_CHOICE",
        "car_value": "OUT_OF_RANGE",
        "car_age_years": "OUT_OF_RANGE",
        "driver_age_years": "OUT_OF_RANGE",
        "deductible": "INVALID_CHOICE",
        "annual_mileage_km": "OUT_OF_RANGE",
    }


def test_driver_age_18_is_accepted() -> None:
    assert parse_insurance_params({**VALID_INSURANCE, "driver_age_years": 18}).driver_age_years == 18


def test_allowed_deductibles_come_from_the_market() -> None:
    market = MarketConfig(allowed_deductibles=frozenset({750}))

    assert parse_insurance_params({**VALID_INSURANCE, "deductible": 750}, market).deductible == 750
    with pytest.raises(ValidationError):
        parse_insurance_params(VALID_INSURANCE, market)


@pytest.mark.parametrize("tier", ["FULL", "Full", " full "])
def test_coverage_tier_is_case_insensitive(tier: str) -> None:
    assert parse_insurance_params({**VALID_INSURANCE, "coverage_tier": tier}).coverage_tier is CoverageTier.FULL


def test_city_name_must_be_text() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_insurance_params({**VALID_INSURANCE, "city_name": 42})

    assert codes_by_field(exc_info.value) == {"city_name": "INVALID_TEXT"}


# ============================================================================
# OWNERSHIP
# ============================================================================


def test_parses_valid_ownership_params() -> None:
    params = parse_ownership_params(VALID_OWNERSHIP)

    assert params == OwnershipParams(
        car_price=Decimal("60000"),
        car_age_years=1,
        annual_mileage_km=Decimal("15000"),
        fuel_type=FuelType.DIESEL,
        fuel_consumption_per_100km=Decimal("6.0"),
        holding_period_years=5,
        city_name="Bucharest",
    )


@pytest.mark.parametrize(("value", "expected"), [("LPG", FuelType.LPG), ("Electric", FuelType.ELECTRIC)])
def test_fuel_type_is_case_insensitive(value: str, expected: FuelType) -> None:
    assert parse_ownership_params({**VALID_OWNERSHIP, "fuel_type": value}).fuel_type is expected


@pytest.mark.parametrize("years", [0, -1, 11])
def test_holding_period_must_be_between_1_and_10(years: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_ownership_params({**VALID_OWNERSHIP, "holding_period_years": years})

    assert codes_by_field(exc_info.value) == {"holding_period_years": "OUT_OF_RANGE"}


def test_reports_every_ownership_violation() -> None:
    raw = {
        "car_price": "-1",
        "car_age_years": -2,
        "annual_mileage_km": "-5",
        "fuel_type": "steam",
        "fuel_consumption_per_100km": "-6",
        "holding_period_years": 0,
    }

    with pytest.raises(ValidationError) as exc_info:
        parse_ownership_params(raw)

    assert set(exc_info.value.fields) == {
        "car_price",
        "car_age_years",
        "annual_mileage_km",
        "fuel_type",
        "fuel_consumption_per_100km",
        "holding_period_years",
        "city_name",
    }


# ============================================================================
# VEHICLE PROFILE
# ============================================================================


def test_parses_vehicle_profile_with_default_consumption() -> None:
    vehicle = parse_vehicle_profile(
        {"price": "75000", "manufacture_year": 2021, "fuel_type": "hybrid", "city_name": "Timișoara"},
        current_year=2026,
    )

    assert vehicle.combined_fuel_consumption == Decimal("7.5")
    assert vehicle.age_in(2026) == 5


def test_vehicle_from_the_future_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_vehicle_profile(
            {"price": "0", "manufacture_year": 2030, "fuel_type": "petrol", "city_name": "Iasi"},
            current_year=2026,
        )

    assert codes_by_field(exc_info.value) == {
        "price": "OUT_OF_RANGE",
        "manufacture_year": "OUT_OF_RANGE",
    }


def test_rejects_oversized_insurance_amounts() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_insurance_params({**VALID_INSURANCE, "car_value": "1e26", "annual_mileage_km": "1000001"})

    assert codes_by_field(exc_info.value) == {
        "car_value": "OUT_OF_RANGE",
        "annual_mileage_km": "OUT_OF_RANGE",
    }


def test_rejects_oversized_ownership_amounts() -> None:
    raw = {
        **VALID_OWNERSHIP,
        "car_price": "1e26",
        "annual_mileage_km": "1e20",
        "fuel_consumption_per_100km": "1001",
    }

    with pytest.raises(ValidationError) as exc_info:
        parse_ownership_params(raw)

    assert codes_by_field(exc_info.value) == {
        "car_price": "OUT_OF_RANGE",
        "annual_mileage_km": "OUT_OF_RANGE",
        "fuel_consumption_per_100km": "OUT_OF_RANGE",
    }


def test_rejects_oversized_vehicle_price() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_vehicle_profile(
            {"price": "1e26", "manufacture_year": 2020, "fuel_type": "petrol", "city_name": "Iasi"},
            current_year=2026,
        )

    assert codes_by_field(exc_info.value) == {"price": "OUT_OF_RANGE"}

"""Declarative field constraints shared by every calculator.

Each constraint is one data row: the field it reports on, the fields it needs,
a predicate over the field values and the error it produces. Evaluation never
stops at the first failure; every violated field is reported once.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping

from vehicle_costs.domain.enums import CoverageTier, FuelType
from vehicle_costs.domain.errors import ValidationError

MAX_TERM_MONTHS = 480
MAX_ANNUAL_RATE_PERCENT = Decimal("100")
MIN_DRIVER_AGE = 18
MIN_HOLDING_PERIOD_YEARS = 1
MAX_HOLDING_PERIOD_YEARS = 10
MAX_AMOUNT = Decimal("1000000000000")
MAX_ANNUAL_MILEAGE_KM = Decimal("1000000")
MAX_FUEL_CONSUMPTION = Decimal("1000")


@dataclass(frozen=True, slots=True)
class Constraint:
    field: str
    check: Callable[[Mapping[str, Any]], bool]
    message: str
    code: str = "OUT_OF_RANGE"
    requires: tuple[str, ...] = ()

    def applies_to(self, values: Mapping[str, Any]) -> bool:
        return all(values.get(name) is not None for name in (self.field, *self.requires))

    def error(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


def violations(
    constraints: Iterable[Constraint],
    values: Mapping[str, Any],
    skip: Iterable[str] = (),
) -> list[dict[str, str]]:
    """Return one error per violated field, in constraint order."""
    reported = set(skip)
    errors = []
    for constraint in constraints:
        if constraint.field in reported or not constraint.applies_to(values):
            continue
        if not constraint.check(values):
            errors.append(constraint.error())
            reported.add(constraint.field)
    return errors


def enforce(constraints: Iterable[Constraint], values: Mapping[str, Any], **context: Any) -> None:
    """
    Check ``values`` against ``constraints``.

    ``context`` supplies non-field inputs some rows need (e.g. ``current_year``).

    Raises:
        ValidationError: If any constraint is violated
    """
    errors = violations(constraints, {**context, **values})
    if errors:
        raise ValidationError(errors=errors)


def values_of(record: Any) -> dict[str, Any]:
    return {f.name: getattr(record, f.name) for f in fields(record)}


# ==============================================================================
# Row builders
# ==============================================================================


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_amount(value: Any) -> bool:
    return isinstance(value, Decimal) and value.is_finite()


def integer(name: str) -> Constraint:
    return Constraint(name, lambda v: is_integer(v[name]), "Must be an integer", "INVALID_INTEGER")


def amount(name: str) -> Constraint:
    return Constraint(
        name, lambda v: is_amount(v[name]), "Must be a finite decimal amount", "INVALID_NUMBER"
    )


def positive(name: str) -> Constraint:
    return Constraint(name, lambda v: v[name] > 0, "Must be > 0")


def at_least(name: str, minimum: Any) -> Constraint:
    return Constraint(name, lambda v: v[name] >= minimum, f"Must be >= {minimum}")


def at_most(name: str, maximum: Any) -> Constraint:
    return Constraint(name, lambda v: v[name] <= maximum, f"Must be <= {maximum}")


def member_of(name: str, enum: type) -> Constraint:
    choices = ", ".join(member.value for member in enum)
    return Constraint(
        name, lambda v: isinstance(v[name], enum), f"Must be one of: {choices}", "INVALID_CHOICE"
    )


def text(name: str) -> Constraint:
    return Constraint(name, lambda v: isinstance(v[name], str), "Must be a string", "INVALID_TEXT")


# ==============================================================================
# Constraint tables
# ==============================================================================

VEHICLE_CONSTRAINTS: tuple[Constraint, ...] = (
    amount("price"),
    positive("price"),
    at_most("price", MAX_AMOUNT),
    integer("manufacture_year"),
    Constraint(
        "manufacture_year",
        lambda v: v["manufacture_year"] <= v["current_year"],
        "Must not be in the future",
        requires=("current_year",),
    ),
    member_of("fuel_type", FuelType),
    text("city_name"),
    amount("combined_fuel_consumption"),
    at_least("combined_fuel_consumption", 0),
    at_most("combined_fuel_consumption", MAX_FUEL_CONSUMPTION),
)

LOAN_CONSTRAINTS: tuple[Constraint, ...] = (
    amount("principal_price"),
    positive("principal_price"),
    at_most("principal_price", MAX_AMOUNT),
    amount("down_payment"),
    at_least("down_payment", 0),
    Constraint(
        "down_payment",
        lambda v: v["down_payment"] <= v["principal_price"],
        "Must be less than or equal to principal_price",
        "INVALID_RANGE",
        requires=("principal_price",),
    ),
    integer("term_months"),
    positive("term_months"),
    at_most("term_months", MAX_TERM_MONTHS),
    amount("annual_interest_rate_percent"),
    at_least("annual_interest_rate_percent", 0),
    at_most("annual_interest_rate_percent", MAX_ANNUAL_RATE_PERCENT),
    amount("trade_in_value"),
    at_least("trade_in_value", 0),
    at_most("trade_in_value", MAX_AMOUNT),
)

INSURANCE_CONSTRAINTS: tuple[Constraint, ...] = (
    amount("car_value"),
    positive("car_value"),
    at_most("car_value", MAX_AMOUNT),
    integer("car_age_years"),
    at_least("car_age_years", 0),
    integer("driver_age_years"),
    at_least("driver_age_years", MIN_DRIVER_AGE),
    text("city_name"),
    member_of("coverage_tier", CoverageTier),
    integer("deductible"),
    Constraint(
        "deductible",
        lambda v: v["deductible"] in v["allowed_deductibles"],
        "Must be one of the allowed deductibles",
        "INVALID_CHOICE",
        requires=("allowed_deductibles",),
    ),
    amount("annual_mileage_km"),
    at_least("annual_mileage_km", 0),
    at_most("annual_mileage_km", MAX_ANNUAL_MILEAGE_KM),
)

OWNERSHIP_CONSTRAINTS: tuple[Constraint, ...] = (
    amount("car_price"),
    positive("car_price"),
    at_most("car_price", MAX_AMOUNT),
    integer("car_age_years"),
    at_least("car_age_years", 0),
    amount("annual_mileage_km"),
    at_least("annual_mileage_km", 0),
    at_most("annual_mileage_km", MAX_ANNUAL_MILEAGE_KM),
    member_of("fuel_type", FuelType),
    amount("fuel_consumption_per_100km"),
    at_least("fuel_consumption_per_100km", 0),
    at_most("fuel_consumption_per_100km", MAX_FUEL_CONSUMPTION),
    integer("holding_period_years"),
    at_least("holding_period_years", MIN_HOLDING_PERIOD_YEARS),
    at_most("holding_period_years", MAX_HOLDING_PERIOD_YEARS),
    text("city_name"),
)

"""Input validator shared by all calculators.

Turns a raw parameter bag (strings, ints, floats, Decimals) into a typed
parameter record, or raises a ValidationError enumerating every problem:
missing fields, unparseable values and constraint violations together.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Mapping, TypeVar

from vehicle_costs.domain.constraints import (
    INSURANCE_CONSTRAINTS,
    LOAN_CONSTRAINTS,
    OWNERSHIP_CONSTRAINTS,
    VEHICLE_CONSTRAINTS,
    Constraint,
    violations,
)
from vehicle_costs.domain.enums import CoverageTier, FuelType
from vehicle_costs.domain.errors import ValidationError
from vehicle_costs.domain.financing import LoanParams
from vehicle_costs.domain.insurance import InsuranceParams
from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig
from vehicle_costs.domain.money import ZERO
from vehicle_costs.domain.ownership import OwnershipParams
from vehicle_costs.domain.vehicle import DEFAULT_FUEL_CONSUMPTION, VehicleProfile

E = TypeVar("E", bound=Enum)

_MISSING: Any = object()


class FieldReader:
    """Reads typed values out of a raw mapping, collecting errors instead of raising."""

    def __init__(self, raw: Mapping[str, Any]) -> None:
        self._raw = raw
        self.errors: list[dict[str, str]] = []

    def _get(self, name: str, default: Any) -> Any:
        value = self._raw.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            if default is _MISSING:
                self._fail(name, "Field is required", "REQUIRED")
            return default
        return value

    def _fail(self, name: str, message: str, code: str) -> None:
        self.errors.append({"field": name, "message": message, "code": code})

    def decimal(self, name: str, default: Any = _MISSING) -> Decimal | None:
        value = self._get(name, default)
        if value is _MISSING or value is None:
            return None
        if isinstance(value, bool):
            self._fail(name, f"Must be a valid decimal: {value}", "INVALID_NUMBER")
            return None
        try:
            parsed = Decimal(value.strip()) if isinstance(value, str) else Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            self._fail(name, f"Must be a valid decimal: {value}", "INVALID_NUMBER")
            return None
        if not parsed.is_finite():
            self._fail(name, f"Must be a finite number: {value}", "INVALID_NUMBER")
            return None
        return parsed

    def integer(self, name: str, default: Any = _MISSING) -> int | None:
        value = self._get(name, default)
        if value is _MISSING or value is None:
            return None
        if isinstance(value, bool):
            self._fail(name, f"Must be an integer: {value}", "INVALID_INTEGER")
            return None
        if isinstance(value, int):
            return value
        try:
            parsed = Decimal(value.strip()) if isinstance(value, str) else Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            parsed = None
        if parsed is None or not parsed.is_finite() or parsed != parsed.to_integral_value():
            self._fail(name, f"Must be an integer: {value}", "INVALID_INTEGER")
            return None
        return int(parsed)

    def choice(self, name: str, enum: type[E], default: Any = _MISSING) -> E | None:
        value = self._get(name, default)
        if value is _MISSING or value is None:
            return None
        if isinstance(value, enum):
            return value
        if isinstance(value, str):
            wanted = value.strip().casefold()
            for member in enum:
                if wanted in (member.value.casefold(), member.name.casefold()):
                    return member
        choices = ", ".join(member.value for member in enum)
        self._fail(name, f"Must be one of: {choices}", "INVALID_CHOICE")
        return None

    def text(self, name: str, default: Any = _MISSING) -> str | None:
        value = self._get(name, default)
        if value is _MISSING or value is None:
            return None
        if not isinstance(value, str):
            self._fail(name, "Must be a string", "INVALID_TEXT")
            return None
        return value.strip()

    def flag(self, name: str, default: bool = False) -> bool | None:
        value = self._raw.get(name)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().casefold() in ("true", "false"):
            return value.strip().casefold() == "true"
        self._fail(name, "Must be a boolean", "INVALID_BOOLEAN")
        return None

    def finish(self, constraints: Iterable[Constraint], values: Mapping[str, Any], **context: Any) -> None:
        """
        Run constraint rows on every field that parsed, then raise if anything failed.

        Raises:
            ValidationError: With parse errors first, then constraint violations
        """
        failed = [error["field"] for error in self.errors]
        errors = self.errors + violations(constraints, {**context, **values}, skip=failed)
        if errors:
            raise ValidationError(errors=errors)


def parse_vehicle_profile(raw: Mapping[str, Any], current_year: int) -> VehicleProfile:
    reader = FieldReader(raw)
    values = {
        "price": reader.decimal("price"),
        "manufacture_year": reader.integer("manufacture_year"),
        "fuel_type": reader.choice("fuel_type", FuelType),
        "city_name": reader.text("city_name"),
        "combined_fuel_consumption": reader.decimal(
            "combined_fuel_consumption", default=DEFAULT_FUEL_CONSUMPTION
        ),
    }
    reader.finish(VEHICLE_CONSTRAINTS, values, current_year=current_year)
    return VehicleProfile(**values)


def parse_loan_params(raw: Mapping[str, Any]) -> LoanParams:
    reader = FieldReader(raw)
    values = {
        "principal_price": reader.decimal("principal_price"),
        "down_payment": reader.decimal("down_payment"),
        "term_months": reader.integer("term_months"),
        "annual_interest_rate_percent": reader.decimal("annual_interest_rate_percent"),
        "trade_in_value": reader.decimal("trade_in_value", default=ZERO),
        "include_schedule": reader.flag("include_schedule"),
    }
    reader.finish(LOAN_CONSTRAINTS, values)
    return LoanParams(**values)


def parse_insurance_params(
    raw: Mapping[str, Any], market: MarketConfig = DEFAULT_MARKET
) -> InsuranceParams:
    reader = FieldReader(raw)
    values = {
        "car_value": reader.decimal("car_value"),
        "car_age_years": reader.integer("car_age_years"),
        "driver_age_years": reader.integer("driver_age_years"),
        "city_name": reader.text("city_name"),
        "coverage_tier": reader.choice("coverage_tier", CoverageTier),
        "deductible": reader.integer("deductible"),
        "annual_mileage_km": reader.decimal("annual_mileage_km"),
    }
    reader.finish(INSURANCE_CONSTRAINTS, values, allowed_deductibles=market.allowed_deductibles)
    return InsuranceParams(**values)


def parse_ownership_params(raw: Mapping[str, Any]) -> OwnershipParams:
    reader = FieldReader(raw)
    values = {
        "car_price": reader.decimal("car_price"),
        "car_age_years": reader.integer("car_age_years"),
        "annual_mileage_km": reader.decimal("annual_mileage_km"),
        "fuel_type": reader.choice("fuel_type", FuelType),
        "fuel_consumption_per_100km": reader.decimal("fuel_consumption_per_100km"),
        "holding_period_years": reader.integer("holding_period_years"),
        "city_name": reader.text("city_name"),
    }
    reader.finish(OWNERSHIP_CONSTRAINTS, values)
    return OwnershipParams(**values)

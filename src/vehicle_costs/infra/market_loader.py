"""Market table loader: reads a YAML document and builds a MarketConfig.

Any subset of the tables may be given; omitted tables keep the defaults.

    currency: RON
    annual_registration_fee: 500
    city_risk_multipliers:
      Bucharest: 1.3
    city_aliases:
      Bucuresti: Bucharest
    fuel_prices:
      diesel: 6.8
    allowed_loan_terms: [12, 24, 36, 48, 60, 72, 84]
    allowed_deductibles: [500, 1000, 1500, 2000, 3000]
    ownership_period_options: [1, 2, 3, 5, 7, 10]
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from vehicle_costs.domain.enums import FuelType
from vehicle_costs.domain.errors import MarketConfigError
from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset(
    {
        "currency",
        "annual_registration_fee",
        "city_risk_multipliers",
        "city_aliases",
        "fuel_prices",
        "allowed_loan_terms",
        "allowed_deductibles",
        "ownership_period_options",
    }
)


def load_market_config(path: Path) -> MarketConfig:
    """
    Load market tables from a YAML file.

    Raises:
        MarketConfigError: If the file cannot be read or a table is malformed
    """
    try:
        with path.open(encoding="utf-8") as fh:
            document = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise MarketConfigError(f"Cannot read market file: {exc}", path=str(path)) from exc

    market = market_from_mapping(document or {})
    logger.info(
        "Market tables loaded",
        extra={"path": str(path), "currency": market.currency, "cities": len(market.city_risk_multipliers)},
    )
    return market


def market_from_mapping(document: Any) -> MarketConfig:
    if not isinstance(document, dict):
        raise MarketConfigError("Market document must be a mapping")

    unknown = sorted(set(document) - KNOWN_KEYS)
    if unknown:
        raise MarketConfigError(f"Unknown market keys: {', '.join(map(str, unknown))}", key=unknown[0])

    base = DEFAULT_MARKET
    fuel_prices = dict(base.fuel_prices)
    for name, price in _mapping(document, "fuel_prices").items():
        try:
            fuel_type = FuelType(str(name).casefold())
        except ValueError:
            raise MarketConfigError(f"Unknown fuel type: {name}", key="fuel_prices") from None
        fuel_prices[fuel_type] = _amount("fuel_prices", price)

    return MarketConfig(
        currency=str(document.get("currency", base.currency)),
        city_risk_multipliers={
            **base.city_risk_multipliers,
            **{
                str(city): _amount("city_risk_multipliers", value)
                for city, value in _mapping(document, "city_risk_multipliers").items()
            },
        },
        city_aliases={
            **base.city_aliases,
            **{str(alias): str(city) for alias, city in _mapping(document, "city_aliases").items()},
        },
        fuel_prices=fuel_prices,
        allowed_loan_terms=_integers(document, "allowed_loan_terms", base.allowed_loan_terms),
        allowed_deductibles=_integers(document, "allowed_deductibles", base.allowed_deductibles),
        ownership_period_options=tuple(
            sorted(_integers(document, "ownership_period_options", frozenset(base.ownership_period_options)))
        ),
        annual_registration_fee=_amount(
            "annual_registration_fee", document.get("annual_registration_fee", base.annual_registration_fee)
        ),
    )


def _mapping(document: dict[str, Any], key: str) -> dict[Any, Any]:
    value = document.get(key) or {}
    if not isinstance(value, dict):
        raise MarketConfigError(f"{key} must be a mapping", key=key)
    return value


def _amount(key: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise MarketConfigError(f"{key} must contain numbers, got {value!r}", key=key)
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise MarketConfigError(f"{key} must contain numbers, got {value!r}", key=key) from None
    if not amount.is_finite() or amount < 0:
        raise MarketConfigError(f"{key} must contain non-negative numbers, got {value!r}", key=key)
    return amount


def _integers(document: dict[str, Any], key: str, default: frozenset[int]) -> frozenset[int]:
    if key not in document:
        return default
    values = document[key]
    if not isinstance(values, list) or not values:
        raise MarketConfigError(f"{key} must be a non-empty list of integers", key=key)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise MarketConfigError(f"{key} must contain positive integers, got {value!r}", key=key)
    return frozenset(values)

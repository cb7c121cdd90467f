from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from vehicle_costs.domain.enums import FuelType
from vehicle_costs.domain.money import ONE

DEFAULT_CURRENCY = "RON"

DEFAULT_CITY_RISK_MULTIPLIERS: Mapping[str, Decimal] = MappingProxyType(
    {
        "Bucharest": Decimal("1.3"),
        "Cluj-Napoca": Decimal("1.1"),
        "Timisoara": Decimal("1.1"),
        "Iasi": Decimal("1.0"),
        "Constanta": Decimal("1.0"),
    }
)

# Native spellings used by catalog listings
DEFAULT_CITY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Bucuresti": "Bucharest",
    }
)

# Currency units per liter, or per kWh-equivalent for electric
DEFAULT_FUEL_PRICES: Mapping[FuelType, Decimal] = MappingProxyType(
    {
        FuelType.PETROL: Decimal("6.5"),
        FuelType.DIESEL: Decimal("6.8"),
        FuelType.HYBRID: Decimal("6.5"),
        FuelType.ELECTRIC: Decimal("0.7"),
        FuelType.LPG: Decimal("3.2"),
        FuelType.CNG: Decimal("4.5"),
    }
)

DEFAULT_LOAN_TERMS: frozenset[int] = frozenset({12, 24, 36, 48, 60, 72, 84})
DEFAULT_DEDUCTIBLES: frozenset[int] = frozenset({500, 1000, 1500, 2000, 3000})
DEFAULT_OWNERSHIP_PERIODS: tuple[int, ...] = (1, 2, 3, 5, 7, 10)
DEFAULT_ANNUAL_REGISTRATION_FEE = Decimal("500")


def normalize_city(name: str) -> str:
    """Case-fold a city name and strip diacritics ("Timișoara" -> "timisoara")."""
    decomposed = unicodedata.normalize("NFKD", name.strip())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


@dataclass(frozen=True, slots=True)
class MarketConfig:
    """
    Immutable lookup tables for one market.

    Calculators receive a MarketConfig instead of reading module constants,
    so another market can be plugged in without touching any formula.
    """

    currency: str = DEFAULT_CURRENCY
    city_risk_multipliers: Mapping[str, Decimal] = field(
        default_factory=lambda: DEFAULT_CITY_RISK_MULTIPLIERS
    )
    city_aliases: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CITY_ALIASES)
    fuel_prices: Mapping[FuelType, Decimal] = field(default_factory=lambda: DEFAULT_FUEL_PRICES)
    allowed_loan_terms: frozenset[int] = DEFAULT_LOAN_TERMS
    allowed_deductibles: frozenset[int] = DEFAULT_DEDUCTIBLES
    ownership_period_options: tuple[int, ...] = DEFAULT_OWNERSHIP_PERIODS
    annual_registration_fee: Decimal = DEFAULT_ANNUAL_REGISTRATION_FEE
    _city_index: Mapping[str, Decimal] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "city_risk_multipliers", MappingProxyType(dict(self.city_risk_multipliers)))
        object.__setattr__(self, "city_aliases", MappingProxyType(dict(self.city_aliases)))
        object.__setattr__(self, "fuel_prices", MappingProxyType(dict(self.fuel_prices)))

        index = {normalize_city(city): value for city, value in self.city_risk_multipliers.items()}
        for alias, city in self.city_aliases.items():
            if normalize_city(city) in index:
                index.setdefault(normalize_city(alias), index[normalize_city(city)])
        object.__setattr__(self, "_city_index", MappingProxyType(index))

    def city_multiplier(self, city_name: str) -> Decimal:
        """Location risk multiplier for ``city_name``; 1.0 for unknown cities."""
        return self._city_index.get(normalize_city(city_name), ONE)

    def fuel_price(self, fuel_type: FuelType) -> Decimal:
        return self.fuel_prices[fuel_type]

    def knows_city(self, city_name: str) -> bool:
        return normalize_city(city_name) in self._city_index


DEFAULT_MARKET = MarketConfig()

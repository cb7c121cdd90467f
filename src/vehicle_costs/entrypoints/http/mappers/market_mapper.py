from __future__ import annotations

from vehicle_costs.domain.market import MarketConfig
from vehicle_costs.entrypoints.http.dtos.market import MarketResponseDTO


class MarketMapper:
    """Maps the active MarketConfig to its REST representation."""

    @staticmethod
    def to_response(market: MarketConfig) -> MarketResponseDTO:
        return MarketResponseDTO(
            currency=market.currency,
            city_risk_multipliers={city: str(value) for city, value in market.city_risk_multipliers.items()},
            fuel_prices={fuel_type.value: str(price) for fuel_type, price in market.fuel_prices.items()},
            allowed_loan_terms=sorted(market.allowed_loan_terms),
            allowed_deductibles=sorted(market.allowed_deductibles),
            ownership_period_options=list(market.ownership_period_options),
            annual_registration_fee=str(market.annual_registration_fee),
        )

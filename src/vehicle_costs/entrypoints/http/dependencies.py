"""
Dependency injection for FastAPI routes.

The calculators are stateless, so one MarketConfig is loaded per process
(cached) and a fresh, cheap use case object is built per request around it.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig
from vehicle_costs.infra.config import market_file
from vehicle_costs.infra.market_loader import load_market_config
from vehicle_costs.use_cases.calculate_loan import CalculateLoan
from vehicle_costs.use_cases.estimate_insurance_premium import EstimateInsurancePremium
from vehicle_costs.use_cases.project_ownership_cost import ProjectOwnershipCost
from vehicle_costs.use_cases.quote_vehicle_costs import QuoteVehicleCosts


@lru_cache
def get_market_config() -> MarketConfig:
    """
    Market tables for this process.

    Read from VEHICLE_COSTS_MARKET_FILE when set, built-in defaults otherwise.
    """
    path = market_file()
    if path is None:
        return DEFAULT_MARKET
    return load_market_config(path)


def get_calculate_loan_use_case(market: MarketConfig = Depends(get_market_config)) -> CalculateLoan:
    return CalculateLoan(market=market)


def get_estimate_insurance_use_case(
    market: MarketConfig = Depends(get_market_config),
) -> EstimateInsurancePremium:
    return EstimateInsurancePremium(market=market)


def get_project_ownership_use_case(
    market: MarketConfig = Depends(get_market_config),
) -> ProjectOwnershipCost:
    return ProjectOwnershipCost(market=market)


def get_quote_vehicle_use_case(market: MarketConfig = Depends(get_market_config)) -> QuoteVehicleCosts:
    return QuoteVehicleCosts(market=market)

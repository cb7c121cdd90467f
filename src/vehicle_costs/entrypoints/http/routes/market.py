from fastapi import APIRouter, Depends

from vehicle_costs.domain.market import MarketConfig
from vehicle_costs.entrypoints.http.dependencies import get_market_config
from vehicle_costs.entrypoints.http.dtos.market import MarketResponseDTO
from vehicle_costs.entrypoints.http.mappers.market_mapper import MarketMapper

router = APIRouter(tags=["Market"])


@router.get(
    "/market",
    response_model=MarketResponseDTO,
    summary="Market tables and presets",
    description="""
    Currency, city multipliers and fuel prices used by the calculators, plus
    the presets a client can offer: loan terms, deductibles and ownership
    periods.
    """,
)
def get_market(market: MarketConfig = Depends(get_market_config)) -> MarketResponseDTO:
    return MarketMapper.to_response(market)

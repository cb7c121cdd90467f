from fastapi import APIRouter, Depends

from vehicle_costs.entrypoints.http.dependencies import get_quote_vehicle_use_case
from vehicle_costs.entrypoints.http.dtos.quote import QuoteRequestDTO, QuoteResponseDTO
from vehicle_costs.entrypoints.http.error_responses import VALIDATION_ERROR_RESPONSE
from vehicle_costs.entrypoints.http.mappers.quote_mapper import QuoteMapper
from vehicle_costs.use_cases.quote_vehicle_costs import QuoteVehicleCosts

router = APIRouter(tags=["Quotes"])


@router.post(
    "/quotes",
    response_model=QuoteResponseDTO,
    summary="Quote a catalog vehicle",
    description="""
    Run the loan, insurance and ownership calculators for one vehicle.

    Parameters not supplied take the catalog defaults: 20% down payment,
    60 months at 7.5%, a 35 year old driver with comprehensive cover and a
    1000 deductible, 15000 km a year, held for 5 years. Invalid overrides are
    reported with their calculator prefix (e.g. ``loan.term_months``).
    """,
    responses={422: VALIDATION_ERROR_RESPONSE},
)
def quote_vehicle(
    payload: QuoteRequestDTO,
    use_case: QuoteVehicleCosts = Depends(get_quote_vehicle_use_case),
) -> QuoteResponseDTO:
    request = QuoteMapper.to_domain_request(payload, current_year=use_case.today().year)

    quote = use_case.execute(request)

    return QuoteMapper.to_response(quote)

from fastapi import APIRouter, Depends

from vehicle_costs.entrypoints.http.dependencies import get_calculate_loan_use_case
from vehicle_costs.entrypoints.http.dtos.loan import LoanRequestDTO, LoanResponseDTO
from vehicle_costs.entrypoints.http.error_responses import VALIDATION_ERROR_RESPONSE
from vehicle_costs.entrypoints.http.mappers.loan_mapper import LoanMapper
from vehicle_costs.use_cases.calculate_loan import CalculateLoan

router = APIRouter(tags=["Financing"])


@router.post(
    "/financing/loan",
    response_model=LoanResponseDTO,
    summary="Calculate loan",
    description="""
    Calculate a fixed-rate amortizing loan for a vehicle purchase.

    ## Calculation
    - Financed amount = price - down_payment - trade_in_value (never below 0)
    - Monthly payment uses the standard amortization formula;
      a 0% rate is repaid straight-line
    - A purchase fully covered by down payment and trade-in returns a zero payment
    - Amounts are rounded to cents

    ## Example
    ```
    POST /v1/financing/loan
    {
        "principal_price": "100000.00",
        "down_payment": "20000.00",
        "term_months": 60,
        "annual_interest_rate_percent": "7.5"
    }
    ```
    """,
    responses={422: VALIDATION_ERROR_RESPONSE},
)
def calculate_loan(
    payload: LoanRequestDTO,
    use_case: CalculateLoan = Depends(get_calculate_loan_use_case),
) -> LoanResponseDTO:
    """parse → execute → map → return."""
    params = LoanMapper.to_domain_params(payload)

    result = use_case.execute(params)

    return LoanMapper.to_response(result)

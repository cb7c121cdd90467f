from fastapi import APIRouter, Depends

from vehicle_costs.entrypoints.http.dependencies import get_estimate_insurance_use_case
from vehicle_costs.entrypoints.http.dtos.insurance import InsuranceRequestDTO, InsuranceResponseDTO
from vehicle_costs.entrypoints.http.error_responses import VALIDATION_ERROR_RESPONSE
from vehicle_costs.entrypoints.http.mappers.insurance_mapper import InsuranceMapper
from vehicle_costs.use_cases.estimate_insurance_premium import EstimateInsurancePremium

router = APIRouter(tags=["Insurance"])


@router.post(
    "/insurance/premium",
    response_model=InsuranceResponseDTO,
    summary="Estimate insurance premium",
    description="""
    Estimate an annual and monthly premium.

    Base premium is 3% of the car value, adjusted in order by vehicle age,
    driver age, coverage tier, deductible, annual mileage and city.
    Premiums are whole currency units; the coverage breakdown adds up to the
    annual premium.
    """,
    responses={422: VALIDATION_ERROR_RESPONSE},
)
def estimate_insurance_premium(
    payload: InsuranceRequestDTO,
    use_case: EstimateInsurancePremium = Depends(get_estimate_insurance_use_case),
) -> InsuranceResponseDTO:
    params = InsuranceMapper.to_domain_params(payload, use_case.market)

    result = use_case.execute(params)

    return InsuranceMapper.to_response(result)

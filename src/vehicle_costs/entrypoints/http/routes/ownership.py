from fastapi import APIRouter, Depends

from vehicle_costs.entrypoints.http.dependencies import get_project_ownership_use_case
from vehicle_costs.entrypoints.http.dtos.ownership import OwnershipRequestDTO, OwnershipResponseDTO
from vehicle_costs.entrypoints.http.error_responses import VALIDATION_ERROR_RESPONSE
from vehicle_costs.entrypoints.http.mappers.ownership_mapper import OwnershipMapper
from vehicle_costs.use_cases.project_ownership_cost import ProjectOwnershipCost

router = APIRouter(tags=["Ownership"])


@router.post(
    "/ownership/cost",
    response_model=OwnershipResponseDTO,
    summary="Project total cost of ownership",
    description="""
    Project depreciation, fuel, insurance, maintenance, registration and
    financing costs over a 1 to 10 year holding period, with a per-year breakdown.

    Financing assumes an 80% loan at 7.5% over the holding period.
    """,
    responses={422: VALIDATION_ERROR_RESPONSE},
)
def project_ownership_cost(
    payload: OwnershipRequestDTO,
    use_case: ProjectOwnershipCost = Depends(get_project_ownership_use_case),
) -> OwnershipResponseDTO:
    params = OwnershipMapper.to_domain_params(payload)

    result = use_case.execute(params)

    return OwnershipMapper.to_response(result)

from __future__ import annotations

from vehicle_costs.domain.money import to_cents
from vehicle_costs.domain.ownership import CATEGORIES, OwnershipParams, OwnershipResult
from vehicle_costs.domain.validation import parse_ownership_params
from vehicle_costs.entrypoints.http.dtos.ownership import (
    AcquisitionTermsDTO,
    CostBreakdownDTO,
    OwnershipRequestDTO,
    OwnershipResponseDTO,
    YearlyCostDTO,
)


class OwnershipMapper:
    """Maps between REST DTOs and domain models for ownership projections."""

    @staticmethod
    def to_domain_params(dto: OwnershipRequestDTO) -> OwnershipParams:
        """
        Converts request DTO to domain OwnershipParams.

        Raises:
            ValidationError: Listing every missing, malformed or out-of-range field
        """
        return parse_ownership_params(dto.model_dump())

    @staticmethod
    def to_response(result: OwnershipResult) -> OwnershipResponseDTO:
        """Converts domain OwnershipResult to response DTO; acquisition terms are shown in cents."""
        terms = result.terms
        return OwnershipResponseDTO(
            total_cost=str(result.total_cost),
            average_monthly_cost=str(result.average_monthly_cost),
            breakdown=CostBreakdownDTO(
                **{category: str(getattr(result.breakdown, category)) for category in CATEGORIES}
            ),
            yearly_breakdown=[
                YearlyCostDTO(
                    year=year.year,
                    total=str(year.total),
                    **{category: str(getattr(year, category)) for category in CATEGORIES},
                )
                for year in result.yearly_breakdown
            ],
            holding_period_years=result.holding_period_years,
            currency=result.currency,
            terms=AcquisitionTermsDTO(
                depreciation_rate=str(terms.depreciation_rate),
                annual_fuel_cost=str(to_cents(terms.annual_fuel_cost)),
                annual_insurance=str(to_cents(terms.annual_insurance)),
                annual_maintenance=str(to_cents(terms.annual_maintenance)),
                annual_registration=str(to_cents(terms.annual_registration)),
                total_financing_cost=str(to_cents(terms.total_financing_cost)),
            ),
        )

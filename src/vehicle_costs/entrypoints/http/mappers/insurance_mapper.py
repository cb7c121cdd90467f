from __future__ import annotations

from vehicle_costs.domain.insurance import InsuranceParams, InsuranceResult
from vehicle_costs.domain.market import MarketConfig
from vehicle_costs.domain.validation import parse_insurance_params
from vehicle_costs.entrypoints.http.dtos.insurance import (
    AdjustmentDTO,
    CoverageBreakdownDTO,
    InsuranceRequestDTO,
    InsuranceResponseDTO,
)


class InsuranceMapper:
    """Maps between REST DTOs and domain models for insurance premiums."""

    @staticmethod
    def to_domain_params(dto: InsuranceRequestDTO, market: MarketConfig) -> InsuranceParams:
        """
        Converts request DTO to domain InsuranceParams.

        The market decides which deductibles are accepted.

        Raises:
            ValidationError: Listing every missing, malformed or out-of-range field
        """
        return parse_insurance_params(dto.model_dump(), market)

    @staticmethod
    def to_response(result: InsuranceResult) -> InsuranceResponseDTO:
        breakdown = result.coverage_breakdown
        return InsuranceResponseDTO(
            monthly_premium=str(result.monthly_premium),
            annual_premium=str(result.annual_premium),
            coverage_breakdown=CoverageBreakdownDTO(
                liability=str(breakdown.liability),
                collision=str(breakdown.collision),
                theft_fire=str(breakdown.theft_fire),
                personal_injury=str(breakdown.personal_injury),
            ),
            currency=result.currency,
            adjustments=[
                AdjustmentDTO(ladder=a.ladder, rule=a.rule, factor=str(a.factor))
                for a in result.adjustments
            ],
        )

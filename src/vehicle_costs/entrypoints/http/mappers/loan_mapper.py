from __future__ import annotations

from vehicle_costs.domain.financing import LoanParams, LoanResult
from vehicle_costs.domain.validation import parse_loan_params
from vehicle_costs.entrypoints.http.dtos.loan import (
    LoanRequestDTO,
    LoanResponseDTO,
    PaymentScheduleItemDTO,
)


class LoanMapper:
    """Maps between REST DTOs and domain models for loans."""

    @staticmethod
    def to_domain_params(dto: LoanRequestDTO) -> LoanParams:
        """
        Converts request DTO to domain LoanParams.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: Listing every missing, malformed or out-of-range field
        """
        return parse_loan_params(dto.model_dump())

    @staticmethod
    def to_response(result: LoanResult) -> LoanResponseDTO:
        """Converts domain LoanResult to response DTO (Decimal → string)."""
        return LoanResponseDTO(
            financed_amount=str(result.financed_amount),
            monthly_payment=str(result.monthly_payment),
            total_interest=str(result.total_interest),
            total_amount_paid=str(result.total_amount_paid),
            term_months=result.term_months,
            annual_interest_rate_percent=str(result.annual_interest_rate_percent),
            currency=result.currency,
            payment_schedule=[
                PaymentScheduleItemDTO(
                    month=item.month,
                    payment=str(item.payment),
                    principal=str(item.principal),
                    interest=str(item.interest),
                    balance=str(item.balance),
                )
                for item in result.payment_schedule
            ],
        )

from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_costs.domain.financing import LoanParams, LoanResult, amortize, payment_schedule
from vehicle_costs.domain.market import DEFAULT_MARKET, MarketConfig
from vehicle_costs.domain.money import ZERO, to_cents

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateLoan:
    """
    Fixed-rate amortizing loan for a vehicle purchase.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - Reported amounts are rounded to cents using ROUND_HALF_UP
    - Totals are derived from the unrounded monthly payment, so a 0% loan
      reports exactly zero interest

    A purchase fully covered by down payment and trade-in is not an error:
    it yields a zero-payment result whose total equals the price.
    """

    market: MarketConfig = DEFAULT_MARKET

    def execute(self, params: LoanParams) -> LoanResult:
        params.validate()

        financed = params.financed_amount
        if financed == 0:
            logger.debug("Loan fully covered", extra={"principal_price": str(params.principal_price)})
            return LoanResult(
                financed_amount=to_cents(ZERO),
                monthly_payment=to_cents(ZERO),
                total_interest=to_cents(ZERO),
                total_amount_paid=to_cents(params.principal_price),
                term_months=params.term_months,
                annual_interest_rate_percent=params.annual_interest_rate_percent,
                currency=self.market.currency,
            )

        loan = amortize(financed, params.annual_interest_rate_percent, params.term_months)
        schedule = (
            payment_schedule(loan, params.annual_interest_rate_percent, params.term_months)
            if params.include_schedule
            else ()
        )

        result = LoanResult(
            financed_amount=to_cents(financed),
            monthly_payment=to_cents(loan.monthly_payment),
            total_interest=to_cents(loan.total_interest),
            total_amount_paid=to_cents(loan.total_paid + params.down_payment + params.trade_in_value),
            term_months=params.term_months,
            annual_interest_rate_percent=params.annual_interest_rate_percent,
            currency=self.market.currency,
            payment_schedule=schedule,
        )

        logger.debug(
            "Loan calculated",
            extra={
                "financed_amount": str(result.financed_amount),
                "monthly_payment": str(result.monthly_payment),
                "term_months": result.term_months,
            },
        )
        return result

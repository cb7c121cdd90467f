from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from vehicle_costs.domain.constraints import LOAN_CONSTRAINTS, enforce, values_of
from vehicle_costs.domain.money import MONTHS_PER_YEAR, ONE, ZERO, percent, to_cents


@dataclass(frozen=True, slots=True)
class LoanParams:
    principal_price: Decimal
    down_payment: Decimal
    term_months: int
    annual_interest_rate_percent: Decimal
    trade_in_value: Decimal = ZERO
    include_schedule: bool = False

    @property
    def financed_amount(self) -> Decimal:
        """Price minus down payment and trade-in, never below zero."""
        return max(ZERO, self.principal_price - self.down_payment - self.trade_in_value)

    def validate(self) -> None:
        enforce(LOAN_CONSTRAINTS, values_of(self))


@dataclass(frozen=True, slots=True)
class PaymentScheduleItem:
    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True, slots=True)
class LoanResult:
    financed_amount: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount_paid: Decimal
    term_months: int
    annual_interest_rate_percent: Decimal
    currency: str
    payment_schedule: tuple[PaymentScheduleItem, ...] = ()


@dataclass(frozen=True, slots=True)
class Amortization:
    """Full-precision figures of a fixed-rate amortizing loan."""

    principal: Decimal
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal

    @property
    def is_empty(self) -> bool:
        return self.principal <= 0


def monthly_rate(annual_interest_rate_percent: Decimal) -> Decimal:
    return percent(annual_interest_rate_percent) / Decimal(MONTHS_PER_YEAR)


def amortize(principal: Decimal, annual_interest_rate_percent: Decimal, term_months: int) -> Amortization:
    """
    Standard fixed-rate amortization.

    monthly_payment = P * (r*(1+r)^n) / ((1+r)^n - 1)

    A zero rate (or one too small to move (1+r)^n at Decimal precision) is
    repaid straight-line, so the formula never divides by zero.
    """
    if principal <= 0:
        return Amortization(principal=ZERO, monthly_payment=ZERO, total_paid=ZERO, total_interest=ZERO)

    rate = monthly_rate(annual_interest_rate_percent)
    months = Decimal(term_months)
    factor = (ONE + rate) ** term_months

    if rate == 0 or factor == ONE:
        return Amortization(
            principal=principal,
            monthly_payment=principal / months,
            total_paid=principal,
            total_interest=ZERO,
        )

    payment = principal * (rate * factor) / (factor - ONE)
    total_paid = payment * months
    return Amortization(
        principal=principal,
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=total_paid - principal,
    )


def payment_schedule(
    amortization: Amortization, annual_interest_rate_percent: Decimal, term_months: int
) -> tuple[PaymentScheduleItem, ...]:
    """
    Month-by-month split of each payment into interest and principal.

    Amounts are in cents; the last payment absorbs rounding so the final
    balance is exactly zero.
    """
    if amortization.is_empty:
        return ()

    rate = monthly_rate(annual_interest_rate_percent)
    payment = to_cents(amortization.monthly_payment)
    balance = to_cents(amortization.principal)
    items = []

    for month in range(1, term_months + 1):
        interest = to_cents(balance * rate)
        if month == term_months:
            principal_part = balance
        else:
            principal_part = min(balance, payment - interest)
        balance -= principal_part
        items.append(
            PaymentScheduleItem(
                month=month,
                payment=principal_part + interest,
                principal=principal_part,
                interest=interest,
                balance=balance,
            )
        )

    return tuple(items)

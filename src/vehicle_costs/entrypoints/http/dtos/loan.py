from pydantic import BaseModel, ConfigDict, Field


class LoanRequestDTO(BaseModel):
    """Request payload for calculating a loan.

    Monetary values are decimal strings. Range checks are left to the domain
    validator so that every problem is reported in one response.
    """

    principal_price: str | None = Field(
        default=None,
        description="Vehicle price as decimal string",
        examples=["100000.00"],
    )
    down_payment: str | None = Field(
        default=None,
        description="Down payment as decimal string (0 to principal_price)",
        examples=["20000.00"],
    )
    term_months: int | None = Field(
        default=None,
        description="Loan term in months. Usual terms: 12, 24, 36, 48, 60, 72, 84",
        examples=[60],
    )
    annual_interest_rate_percent: str | None = Field(
        default=None,
        description="Annual interest rate in percent as decimal string (e.g., '7.5')",
        examples=["7.5"],
    )
    trade_in_value: str | None = Field(
        default=None,
        description="Trade-in credit as decimal string; defaults to 0",
        examples=["0"],
    )
    include_schedule: bool = Field(
        default=False,
        description="Include the month-by-month payment schedule",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal_price": "100000.00",
                "down_payment": "20000.00",
                "term_months": 60,
                "annual_interest_rate_percent": "7.5",
                "trade_in_value": "0",
            }
        }
    )


class PaymentScheduleItemDTO(BaseModel):
    month: int
    payment: str
    principal: str
    interest: str
    balance: str


class LoanResponseDTO(BaseModel):
    """Response with calculated loan figures."""

    financed_amount: str = Field(
        description="Price minus down payment and trade-in (never below 0)",
        examples=["80000.00"],
    )
    monthly_payment: str = Field(examples=["1603.03"])
    total_interest: str = Field(examples=["16181.78"])
    total_amount_paid: str = Field(
        description="Payments plus down payment plus trade-in",
        examples=["116181.78"],
    )
    term_months: int = Field(examples=[60])
    annual_interest_rate_percent: str = Field(examples=["7.5"])
    currency: str = Field(examples=["RON"])
    payment_schedule: list[PaymentScheduleItemDTO] = Field(default_factory=list)

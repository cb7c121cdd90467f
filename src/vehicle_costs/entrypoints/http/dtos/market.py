from pydantic import BaseModel, Field


class MarketResponseDTO(BaseModel):
    """Lookup tables and input presets of the active market."""

    currency: str = Field(examples=["RON"])
    city_risk_multipliers: dict[str, str] = Field(
        description="Insurance location multiplier per city; other cities use 1.0",
        examples=[{"Bucharest": "1.3", "Iasi": "1.0"}],
    )
    fuel_prices: dict[str, str] = Field(
        description="Price per liter, or per kWh-equivalent for electric",
        examples=[{"diesel": "6.8", "electric": "0.7"}],
    )
    allowed_loan_terms: list[int] = Field(
        description="Suggested loan terms in months; any term from 1 to 480 is accepted",
        examples=[[12, 24, 36, 48, 60, 72, 84]],
    )
    allowed_deductibles: list[int] = Field(examples=[[500, 1000, 1500, 2000, 3000]])
    ownership_period_options: list[int] = Field(
        description="Suggested holding periods in years",
        examples=[[1, 2, 3, 5, 7, 10]],
    )
    annual_registration_fee: str = Field(examples=["500"])

from pydantic import BaseModel, ConfigDict, Field


class InsuranceRequestDTO(BaseModel):
    """Request payload for estimating an insurance premium."""

    car_value: str | None = Field(
        default=None,
        description="Vehicle value as decimal string",
        examples=["50000.00"],
    )
    car_age_years: int | None = Field(default=None, examples=[4])
    driver_age_years: int | None = Field(
        default=None,
        description="Driver age in years (18 or older)",
        examples=[35],
    )
    city_name: str | None = Field(default=None, examples=["Cluj-Napoca"])
    coverage_tier: str | None = Field(
        default=None,
        description="One of: basic, comprehensive, full",
        examples=["comprehensive"],
    )
    deductible: int | None = Field(
        default=None,
        description="One of: 500, 1000, 1500, 2000, 3000",
        examples=[1000],
    )
    annual_mileage_km: str | None = Field(default=None, examples=["15000"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "car_value": "50000.00",
                "car_age_years": 4,
                "driver_age_years": 35,
                "city_name": "Cluj-Napoca",
                "coverage_tier": "comprehensive",
                "deductible": 1000,
                "annual_mileage_km": "15000",
            }
        }
    )


class CoverageBreakdownDTO(BaseModel):
    liability: str
    collision: str
    theft_fire: str
    personal_injury: str


class AdjustmentDTO(BaseModel):
    ladder: str
    rule: str
    factor: str


class InsuranceResponseDTO(BaseModel):
    """Response with the estimated premium, in whole currency units."""

    monthly_premium: str = Field(examples=["138"])
    annual_premium: str = Field(examples=["1650"])
    coverage_breakdown: CoverageBreakdownDTO
    currency: str = Field(examples=["RON"])
    adjustments: list[AdjustmentDTO] = Field(
        default_factory=list,
        description="Risk factors that changed the premium, in the order applied",
    )

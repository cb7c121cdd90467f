from pydantic import BaseModel, ConfigDict, Field


class OwnershipRequestDTO(BaseModel):
    """Request payload for projecting total cost of ownership."""

    car_price: str | None = Field(default=None, examples=["60000.00"])
    car_age_years: int | None = Field(default=None, examples=[1])
    annual_mileage_km: str | None = Field(default=None, examples=["15000"])
    fuel_type: str | None = Field(
        default=None,
        description="One of: petrol, diesel, hybrid, electric, lpg, cng",
        examples=["diesel"],
    )
    fuel_consumption_per_100km: str | None = Field(
        default=None,
        description="Liters (or kWh-equivalent for electric) per 100 km",
        examples=["6.0"],
    )
    holding_period_years: int | None = Field(
        default=None,
        description="Holding period in years, 1 to 10",
        examples=[5],
    )
    city_name: str | None = Field(default=None, examples=["Bucharest"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "car_price": "60000.00",
                "car_age_years": 1,
                "annual_mileage_km": "15000",
                "fuel_type": "diesel",
                "fuel_consumption_per_100km": "6.0",
                "holding_period_years": 5,
                "city_name": "Bucharest",
            }
        }
    )


class CostBreakdownDTO(BaseModel):
    depreciation: str
    fuel: str
    insurance: str
    maintenance: str
    registration: str
    financing: str


class YearlyCostDTO(CostBreakdownDTO):
    year: int
    total: str


class AcquisitionTermsDTO(BaseModel):
    """Annual figures fixed at the start of ownership."""

    depreciation_rate: str = Field(examples=["0.15"])
    annual_fuel_cost: str
    annual_insurance: str
    annual_maintenance: str
    annual_registration: str
    total_financing_cost: str


class OwnershipResponseDTO(BaseModel):
    total_cost: str
    average_monthly_cost: str
    breakdown: CostBreakdownDTO
    yearly_breakdown: list[YearlyCostDTO]
    holding_period_years: int
    currency: str
    terms: AcquisitionTermsDTO

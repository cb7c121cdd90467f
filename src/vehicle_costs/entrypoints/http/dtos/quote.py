from pydantic import BaseModel, ConfigDict, Field

from vehicle_costs.entrypoints.http.dtos.insurance import InsuranceResponseDTO
from vehicle_costs.entrypoints.http.dtos.loan import LoanResponseDTO
from vehicle_costs.entrypoints.http.dtos.ownership import OwnershipResponseDTO


class VehicleProfileDTO(BaseModel):
    price: str | None = Field(default=None, examples=["75000.00"])
    manufacture_year: int | None = Field(default=None, examples=[2021])
    fuel_type: str | None = Field(default=None, examples=["hybrid"])
    city_name: str | None = Field(default=None, examples=["Timișoara"])
    combined_fuel_consumption: str | None = Field(
        default=None,
        description="Combined consumption per 100 km; defaults to 7.5",
        examples=["5.2"],
    )


class QuoteRequestDTO(BaseModel):
    """A catalog vehicle plus optional overrides of the calculator defaults."""

    vehicle: VehicleProfileDTO
    down_payment: str | None = Field(default=None, description="Defaults to 20% of the price")
    term_months: int | None = Field(default=None, description="Defaults to 60")
    annual_interest_rate_percent: str | None = Field(default=None, description="Defaults to 7.5")
    trade_in_value: str | None = Field(default=None, description="Defaults to 0")
    driver_age_years: int | None = Field(default=None, description="Defaults to 35")
    coverage_tier: str | None = Field(default=None, description="Defaults to comprehensive")
    deductible: int | None = Field(default=None, description="Defaults to 1000")
    annual_mileage_km: str | None = Field(default=None, description="Defaults to 15000")
    holding_period_years: int | None = Field(default=None, description="Defaults to 5")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle": {
                    "price": "75000.00",
                    "manufacture_year": 2021,
                    "fuel_type": "hybrid",
                    "city_name": "Timișoara",
                    "combined_fuel_consumption": "5.2",
                },
                "driver_age_years": 28,
            }
        }
    )


class QuoteResponseDTO(BaseModel):
    loan: LoanResponseDTO
    insurance: InsuranceResponseDTO
    ownership: OwnershipResponseDTO

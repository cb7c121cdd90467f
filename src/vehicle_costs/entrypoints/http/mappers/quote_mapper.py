from __future__ import annotations

from vehicle_costs.domain.enums import CoverageTier
from vehicle_costs.domain.errors import ValidationError
from vehicle_costs.domain.validation import FieldReader, parse_vehicle_profile
from vehicle_costs.entrypoints.http.dtos.quote import QuoteRequestDTO, QuoteResponseDTO
from vehicle_costs.entrypoints.http.mappers.insurance_mapper import InsuranceMapper
from vehicle_costs.entrypoints.http.mappers.loan_mapper import LoanMapper
from vehicle_costs.entrypoints.http.mappers.ownership_mapper import OwnershipMapper
from vehicle_costs.use_cases.quote_vehicle_costs import QuoteRequest, VehicleQuote

OVERRIDE_FIELDS = (
    "down_payment",
    "term_months",
    "annual_interest_rate_percent",
    "trade_in_value",
    "driver_age_years",
    "coverage_tier",
    "deductible",
    "annual_mileage_km",
    "holding_period_years",
)


class QuoteMapper:
    """Maps between REST DTOs and domain models for vehicle quotes."""

    @staticmethod
    def to_domain_request(dto: QuoteRequestDTO, current_year: int) -> QuoteRequest:
        """
        Converts request DTO to a QuoteRequest.

        Omitted overrides keep the QuoteRequest defaults. Range checks on the
        overrides happen in the use case.

        Raises:
            ValidationError: For an invalid vehicle or malformed overrides
        """
        errors = []

        try:
            vehicle = parse_vehicle_profile(dto.vehicle.model_dump(), current_year)
        except ValidationError as exc:
            errors.extend({**error, "field": f"vehicle.{error['field']}"} for error in exc.errors or [])
            vehicle = None

        # blank overrides mean "use the default", like omitted ones
        raw = {
            name: value
            for name, value in dto.model_dump(include=set(OVERRIDE_FIELDS), exclude_none=True).items()
            if not (isinstance(value, str) and not value.strip())
        }
        reader = FieldReader(raw)
        parsers = {
            "down_payment": reader.decimal,
            "term_months": reader.integer,
            "annual_interest_rate_percent": reader.decimal,
            "trade_in_value": reader.decimal,
            "driver_age_years": reader.integer,
            "coverage_tier": lambda name: reader.choice(name, CoverageTier),
            "deductible": reader.integer,
            "annual_mileage_km": reader.decimal,
            "holding_period_years": reader.integer,
        }
        overrides = {name: parsers[name](name) for name in raw}
        errors.extend(reader.errors)

        if errors:
            raise ValidationError(errors=errors)

        return QuoteRequest(vehicle=vehicle, **overrides)

    @staticmethod
    def to_response(quote: VehicleQuote) -> QuoteResponseDTO:
        return QuoteResponseDTO(
            loan=LoanMapper.to_response(quote.loan),
            insurance=InsuranceMapper.to_response(quote.insurance),
            ownership=OwnershipMapper.to_response(quote.ownership),
        )

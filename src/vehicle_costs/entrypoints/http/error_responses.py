"""REST API error response models.

Structured error responses that provide a consistent format for all HTTP errors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One violated constraint on one field."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """Structured error response format.

    Validation failures list every offending field:
        {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"field": "driver_age_years", "message": "Must be >= 18", "code": "OUT_OF_RANGE"},
                {"field": "deductible", "message": "Must be one of the allowed deductibles",
                 "code": "INVALID_CHOICE"}
            ]
        }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "down_payment",
                            "message": "Must be less than or equal to principal_price",
                            "code": "INVALID_RANGE",
                        },
                        {
                            "field": "term_months",
                            "message": "Field is required",
                            "code": "REQUIRED",
                        },
                    ],
                },
            ]
        }
    )


VALIDATION_ERROR_RESPONSE: dict[str, Any] = {
    "model": ErrorResponse,
    "description": "Validation error listing every invalid field",
}

"""Domain error classes.

Protocol-agnostic errors raised by the cost engine.
Protocol adapters (the HTTP entrypoint) translate them into structured responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus arbitrary context that adapters
    can forward to callers.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Input validation failure.

    Raised before any calculation runs. When field-level ``errors`` are given
    they enumerate every violated constraint, never just the first one.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "driver_age_years", "message": "Must be >= 18",
                              "code": "OUT_OF_RANGE"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields, in the order they were reported."""
        return [error["field"] for error in self.errors or []]

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class MarketConfigError(DomainError):
    """Market lookup tables could not be built from the supplied configuration."""

    error_code: str = "MARKET_CONFIG_ERROR"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Raised when a computation would produce a non-finite amount for inputs
    that passed validation. Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"

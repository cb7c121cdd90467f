"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from vehicle_costs.domain.errors import (
    DomainError,
    InternalError,
    MarketConfigError,
    ValidationError,
)
from vehicle_costs.entrypoints.http.exception_handlers import register_exception_handlers


class Payload(BaseModel):
    term_months: int


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "driver_age_years", "message": "Must be >= 18", "code": "OUT_OF_RANGE"},
                {
                    "field": "deductible",
                    "message": "Must be one of the allowed deductibles",
                    "code": "INVALID_CHOICE",
                },
            ]
        )

    @test_app.get("/market-config-error")
    def raise_market_config_error() -> None:
        raise MarketConfigError("Unknown market keys: cities", key="cities")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Computed amount is not finite", amount="NaN")

    @test_app.get("/domain-error")
    def raise_domain_error() -> None:
        raise DomainError("Something domain specific")

    @test_app.get("/value-error")
    def raise_value_error() -> None:
        raise ValueError("Invalid value provided")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Unexpected runtime error")

    @test_app.post("/body")
    def accept_body(payload: Payload) -> dict[str, int]:
        return {"term_months": payload.term_months}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# Domain errors
# ==============================================================================


def test_validation_error_returns_422(client: TestClient) -> None:
    response = client.get("/validation-error")

    assert response.status_code == 422
    assert response.json() == {"detail": "Validation failed", "code": "VALIDATION_ERROR"}


def test_validation_error_lists_every_field(client: TestClient) -> None:
    response = client.get("/validation-error-with-fields")

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Validation failed"
    assert data["code"] == "VALIDATION_ERROR"
    assert [error["field"] for error in data["errors"]] == ["driver_age_years", "deductible"]
    assert data["errors"][1]["code"] == "INVALID_CHOICE"


def test_market_config_error_returns_500(client: TestClient) -> None:
    response = client.get("/market-config-error")

    assert response.status_code == 500
    assert response.json() == {"detail": "Unknown market keys: cities", "code": "MARKET_CONFIG_ERROR"}


def test_internal_error_returns_500(client: TestClient) -> None:
    response = client.get("/internal-error")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"


def test_unmapped_domain_error_returns_400(client: TestClient) -> None:
    response = client.get("/domain-error")

    assert response.status_code == 400
    assert response.json() == {"detail": "Something domain specific", "code": "DOMAIN_ERROR"}


# ==============================================================================
# Framework and unexpected errors
# ==============================================================================


def test_request_validation_error_names_the_field(client: TestClient) -> None:
    response = client.post("/body", json={"term_months": "sixty"})

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Invalid request parameters"
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "term_months"


def test_value_error_returns_422(client: TestClient) -> None:
    response = client.get("/value-error")

    assert response.status_code == 422
    assert response.json() == {"detail": "Invalid value provided", "code": "INVALID_VALUE"}


def test_unexpected_error_hides_details(client: TestClient) -> None:
    response = client.get("/unexpected-error")

    assert response.status_code == 500
    assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"}

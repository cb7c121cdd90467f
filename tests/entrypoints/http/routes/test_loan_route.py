"""POST /v1/financing/loan."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_costs.domain.financing import LoanResult
from vehicle_costs.entrypoints.http.dependencies import get_calculate_loan_use_case

URL = "/v1/financing/loan"

PAYLOAD = {
    "principal_price": "100000.00",
    "down_payment": "20000.00",
    "term_months": 60,
    "annual_interest_rate_percent": "7.5",
}


def test_calculates_loan(client: TestClient) -> None:
    response = client.post(URL, json=PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["financed_amount"] == "80000.00"
    assert Decimal("1602") < Decimal(data["monthly_payment"]) < Decimal("1604")
    assert Decimal(data["total_amount_paid"]) == Decimal("100000") + Decimal(data["total_interest"])
    assert data["currency"] == "RON"
    assert data["payment_schedule"] == []


def test_includes_schedule_on_request(client: TestClient) -> None:
    response = client.post(URL, json={**PAYLOAD, "term_months": 12, "include_schedule": True})

    schedule = response.json()["payment_schedule"]
    assert [item["month"] for item in schedule] == list(range(1, 13))
    assert schedule[-1]["balance"] == "0.00"


def test_fully_covered_purchase(client: TestClient) -> None:
    response = client.post(URL, json={**PAYLOAD, "down_payment": "60000", "trade_in_value": "40000"})

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_payment"] == "0.00"
    assert data["total_amount_paid"] == "100000.00"


def test_reports_every_invalid_field(client: TestClient) -> None:
    response = client.post(
        URL,
        json={"principal_price": "abc", "down_payment": "-5", "annual_interest_rate_percent": "7.5"},
    )

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert {error["field"]: error["code"] for error in data["errors"]} == {
        "principal_price": "INVALID_NUMBER",
        "term_months": "REQUIRED",
        "down_payment": "OUT_OF_RANGE",
    }


def test_down_payment_above_price(client: TestClient) -> None:
    response = client.post(URL, json={**PAYLOAD, "down_payment": "100000.01"})

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {
            "field": "down_payment",
            "message": "Must be less than or equal to principal_price",
            "code": "INVALID_RANGE",
        }
    ]


def test_wrong_json_type_is_a_request_validation_error(client: TestClient) -> None:
    response = client.post(URL, json={**PAYLOAD, "term_months": "sixty"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid request parameters"


def test_route_delegates_to_use_case(app: FastAPI, client: TestClient) -> None:
    use_case = Mock()
    use_case.execute.return_value = LoanResult(
        financed_amount=Decimal("1000.00"),
        monthly_payment=Decimal("100.00"),
        total_interest=Decimal("200.00"),
        total_amount_paid=Decimal("1200.00"),
        term_months=12,
        annual_interest_rate_percent=Decimal("5"),
        currency="EUR",
    )
    app.dependency_overrides[get_calculate_loan_use_case] = lambda: use_case

    response = client.post(URL, json=PAYLOAD)

    assert response.status_code == 200
    assert response.json()["currency"] == "EUR"
    params = use_case.execute.call_args.args[0]
    assert params.principal_price == Decimal("100000.00")
    assert params.trade_in_value == 0

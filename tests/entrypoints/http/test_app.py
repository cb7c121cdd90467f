"""Application wiring: metadata, routers and OpenAPI schema."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_costs.entrypoints.http.app import build_app


def test_build_app_returns_a_new_instance_each_call() -> None:
    app1 = build_app()
    app2 = build_app()

    assert isinstance(app1, FastAPI)
    assert app1 is not app2


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Vehicle Costs API"
    assert app.version == "0.1.0"
    assert app.docs_url == "/docs"


def test_routes_are_registered_under_v1() -> None:
    paths = set(build_app().openapi()["paths"])

    assert {
        "/health",
        "/v1/financing/loan",
        "/v1/insurance/premium",
        "/v1/ownership/cost",
        "/v1/quotes",
        "/v1/market",
    } <= paths


def test_openapi_schema_documents_the_calculators() -> None:
    client = TestClient(build_app())

    schema = client.get("/openapi.json").json()

    assert "/v1/financing/loan" in schema["paths"]
    assert "422" in schema["paths"]["/v1/quotes"]["post"]["responses"]
    assert "LoanRequestDTO" in schema["components"]["schemas"]

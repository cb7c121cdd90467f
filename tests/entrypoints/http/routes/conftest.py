from __future__ import annotations

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_costs.entrypoints.http.app import build_app
from vehicle_costs.entrypoints.http.dependencies import get_quote_vehicle_use_case
from vehicle_costs.use_cases.quote_vehicle_costs import QuoteVehicleCosts

TODAY = date(2026, 6, 1)


@pytest.fixture
def app() -> FastAPI:
    """Full application; quotes are pinned to a fixed date."""
    test_app = build_app()
    test_app.dependency_overrides[get_quote_vehicle_use_case] = lambda: QuoteVehicleCosts(
        today=lambda: TODAY
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

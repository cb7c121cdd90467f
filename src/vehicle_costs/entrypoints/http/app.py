from fastapi import FastAPI

from vehicle_costs.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_costs.entrypoints.http.routes.financing import router as financing_router
from vehicle_costs.entrypoints.http.routes.health import router as health_router
from vehicle_costs.entrypoints.http.routes.insurance import router as insurance_router
from vehicle_costs.entrypoints.http.routes.market import router as market_router
from vehicle_costs.entrypoints.http.routes.ownership import router as ownership_router
from vehicle_costs.entrypoints.http.routes.quotes import router as quotes_router
from vehicle_costs.infra.config import log_level
from vehicle_costs.infra.logging_setup import setup_logging


def build_app() -> FastAPI:
    setup_logging(log_level())

    app = FastAPI(
        title="Vehicle Costs API",
        description="""
        Cost and financing calculators for catalog vehicles.

        ## Features
        - Loan payments for financing a purchase
        - Insurance premium estimates with a coverage breakdown
        - Total cost of ownership with a year-by-year breakdown
        - One-call quotes for a catalog vehicle
        - The active market tables and input presets

        ## Monetary Values
        All amounts travel as decimal strings (e.g., "25000.00") in the market currency.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Validation errors list every invalid field at once.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(financing_router, prefix="/v1")
    app.include_router(insurance_router, prefix="/v1")
    app.include_router(ownership_router, prefix="/v1")
    app.include_router(quotes_router, prefix="/v1")
    app.include_router(market_router, prefix="/v1")

    return app


app = build_app()

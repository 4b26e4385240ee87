"""
FastAPI Main Application
Trader Workstation backend: broker connector plus report endpoints
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from trader_workstation import __version__
from trader_workstation.api.errors import register_exception_handlers
from trader_workstation.api.routes import broker, reports
from trader_workstation.config import settings
from trader_workstation.core.logging import setup_logging
from trader_workstation.infrastructure.broker.connector_factory import get_broker_connector

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ENDPOINTS = [
    f"POST {API_PREFIX}/connect",
    f"POST {API_PREFIX}/disconnect",
    f"GET {API_PREFIX}/health",
    f"GET {API_PREFIX}/account-summary",
    f"GET {API_PREFIX}/positions",
    f"GET {API_PREFIX}/reports/portfolio-summary",
    f"GET {API_PREFIX}/reports/pnl-comparison",
    f"GET {API_PREFIX}/reports/risk-exposure",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Owns the broker connector: created at startup, disconnected at shutdown
    """
    logger.info("🚀 Starting Trader Workstation API")

    connector = get_broker_connector(settings)
    app.state.broker_connector = connector
    logger.info("✅ Broker connector ready (%s:%s)", connector.host, connector.port)
    logger.info("📊 API running on http://%s:%s", settings.API_HOST, settings.SERVER_PORT)
    logger.info("🔌 IBKR connection required first: POST %s/connect", API_PREFIX)

    yield

    logger.info("🛑 Shutting down Trader Workstation API")
    if connector.connected:
        await connector.disconnect()


def include_routers(app: FastAPI) -> None:
    app.include_router(broker.router, prefix=API_PREFIX, tags=["Broker"])
    app.include_router(reports.router, prefix=f"{API_PREFIX}/reports", tags=["Reports"])
    register_exception_handlers(app)


# Create FastAPI app
app = FastAPI(
    title="Tiny Trader Workstation",
    description="Portfolio, PnL and risk reports over an IBKR connector",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

include_routers(app)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": "Tiny Trader Workstation",
        "version": __version__,
        "status": "running",
        "endpoints": ENDPOINTS,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("trader_workstation.main:app", host=settings.API_HOST, port=settings.SERVER_PORT, reload=settings.DEBUG)

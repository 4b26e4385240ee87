"""
Exception handlers
Map domain failures to `{"error": message}` JSON bodies
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from trader_workstation.domain.errors import BrokerError, ReportError

logger = logging.getLogger(__name__)


async def report_error_handler(request: Request, exc: ReportError) -> JSONResponse:
    logger.warning("Report rejected for %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=422, content={"error": exc.message})


async def broker_error_handler(request: Request, exc: BrokerError) -> JSONResponse:
    logger.error("Broker error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReportError, report_error_handler)
    app.add_exception_handler(BrokerError, broker_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

"""
Report API Routes
Each request fetches a fresh broker snapshot and builds its report
"""

import logging

from fastapi import APIRouter, Depends

from trader_workstation.api.dependencies import get_connector
from trader_workstation.domain.schemas.base import ErrorResponse
from trader_workstation.domain.schemas.report import (
    PnLComparisonReportResponse,
    PortfolioSummaryReportResponse,
    RiskExposureReportResponse,
)
from trader_workstation.infrastructure.broker.types import BrokerConnector
from trader_workstation.reports import (
    generate_pnl_comparison,
    generate_portfolio_summary,
    generate_risk_exposure,
)

logger = logging.getLogger(__name__)
router = APIRouter(
    responses={
        422: {"model": ErrorResponse, "description": "Snapshot cannot produce the report"},
        500: {"model": ErrorResponse},
    }
)


@router.get(
    "/portfolio-summary",
    response_model=PortfolioSummaryReportResponse,
    summary="Portfolio summary report",
    description="Account metrics and allocation against net liquidation",
)
async def portfolio_summary(connector: BrokerConnector = Depends(get_connector)):
    account = await connector.get_account_summary()
    pnl = await connector.get_portfolio_pnl()
    report = generate_portfolio_summary(account, pnl.positions)
    return PortfolioSummaryReportResponse.from_domain(report)


@router.get(
    "/pnl-comparison",
    response_model=PnLComparisonReportResponse,
    summary="PnL comparison report",
    description="Realized vs unrealized PnL with top gainers and losers",
)
async def pnl_comparison(connector: BrokerConnector = Depends(get_connector)):
    pnl = await connector.get_portfolio_pnl()
    report = generate_pnl_comparison(pnl)
    return PnLComparisonReportResponse.from_domain(report)


@router.get(
    "/risk-exposure",
    response_model=RiskExposureReportResponse,
    summary="Risk exposure report",
    description="Position concentration and risk metrics",
)
async def risk_exposure(connector: BrokerConnector = Depends(get_connector)):
    account = await connector.get_account_summary()
    pnl = await connector.get_portfolio_pnl()
    report = generate_risk_exposure(account.net_liquidation, pnl.positions)
    logger.info(
        "Risk exposure served | level=%s high_risk=%d",
        report.summary.metrics.overall_risk_level.value,
        report.summary.metrics.high_risk_count,
    )
    return RiskExposureReportResponse.from_domain(report)

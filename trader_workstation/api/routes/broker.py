"""
Broker API Routes
Connection lifecycle, account figures and raw positions
"""

import logging

from fastapi import APIRouter, Depends

from trader_workstation.api.dependencies import get_connector
from trader_workstation.domain.schemas.base import ErrorResponse
from trader_workstation.domain.schemas.broker import (
    AccountSummaryResponse,
    ConnectResponse,
    DisconnectResponse,
    HealthResponse,
    PositionSchema,
    PositionsResponse,
)
from trader_workstation.infrastructure.broker.types import BrokerConnector
from trader_workstation.utils.time import now_utc

logger = logging.getLogger(__name__)
router = APIRouter(responses={500: {"model": ErrorResponse}})


@router.get("/health", response_model=HealthResponse)
async def health(connector: BrokerConnector = Depends(get_connector)):
    """API status and IBKR connection state"""
    return HealthResponse(
        status="healthy",
        ibkr_connected=connector.connected,
        timestamp=now_utc(),
    )


@router.post("/connect", response_model=ConnectResponse)
async def connect(connector: BrokerConnector = Depends(get_connector)):
    """Establish connection to IBKR"""
    result = await connector.connect()
    return ConnectResponse(**result)


@router.post("/disconnect", response_model=DisconnectResponse)
async def disconnect(connector: BrokerConnector = Depends(get_connector)):
    """Drop the IBKR connection"""
    result = await connector.disconnect()
    return DisconnectResponse(**result)


@router.get("/account-summary", response_model=AccountSummaryResponse)
async def get_account_summary(connector: BrokerConnector = Depends(get_connector)):
    """Net liquidation, cash and buying power"""
    account = await connector.get_account_summary()
    return AccountSummaryResponse.from_domain(account)


@router.get("/positions", response_model=PositionsResponse)
async def get_positions(connector: BrokerConnector = Depends(get_connector)):
    """All current positions as reported by the broker"""
    positions = await connector.get_positions()
    logger.debug("Fetched %d positions", len(positions))
    return PositionsResponse(
        positions=[PositionSchema.from_domain(p) for p in positions],
        count=len(positions),
        timestamp=now_utc(),
    )

"""
Mock IBKR Connector
Stands in for the TWS / IB Gateway socket API with a canned book
"""

import asyncio
import logging
from typing import Dict, List

from trader_workstation.domain.errors import BrokerNotConnectedError
from trader_workstation.domain.models import AccountSummary, PnLSnapshot, Position
from trader_workstation.domain.services.pnl_engine import derive_pnl
from trader_workstation.infrastructure.broker.mock_book import MockBook
from trader_workstation.utils.time import now_utc

logger = logging.getLogger(__name__)


class MockIBKRConnector:
    """
    In-memory broker connector.

    Connection state belongs to the instance; connect() must be awaited
    before any data call.
    """

    def __init__(
        self,
        book: MockBook,
        host: str = "127.0.0.1",
        port: int = 4002,
        client_id: int = 1,
        connect_delay_seconds: float = 0.5,
    ):
        self.book = book
        self.host = host
        self.port = port
        self.client_id = client_id
        self.connect_delay_seconds = connect_delay_seconds
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def _require_connection(self) -> None:
        if not self._connected:
            raise BrokerNotConnectedError()

    async def connect(self) -> Dict:
        logger.info("[IBKR] Attempting connection to %s:%s (client %s)", self.host, self.port, self.client_id)
        # Simulated handshake latency
        if self.connect_delay_seconds > 0:
            await asyncio.sleep(self.connect_delay_seconds)
        self._connected = True
        logger.info("[IBKR] Connected successfully")
        return {"status": "connected", "timestamp": now_utc()}

    async def disconnect(self) -> Dict:
        self._connected = False
        logger.info("[IBKR] Disconnected")
        return {"status": "disconnected"}

    async def get_account_summary(self) -> AccountSummary:
        """Net liquidation, cash and buying power."""
        self._require_connection()
        figures = self.book.account
        return AccountSummary(
            net_liquidation=figures.net_liquidation,
            total_cash_value=figures.total_cash_value,
            buying_power=figures.buying_power,
            timestamp=now_utc(),
            currency=figures.currency,
        )

    async def get_positions(self) -> List[Position]:
        self._require_connection()
        return list(self.book.positions)

    async def get_portfolio_pnl(self) -> PnLSnapshot:
        """Positions with unrealized PnL plus the book's realized PnL."""
        positions = await self.get_positions()
        return derive_pnl(positions, self.book.realized_pnl, timestamp=now_utc())

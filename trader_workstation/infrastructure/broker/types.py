"""
Broker connector protocol for type hints.
"""

from __future__ import annotations

from typing import Protocol, List, Dict

from trader_workstation.domain.models import AccountSummary, PnLSnapshot, Position


class BrokerConnector(Protocol):
    host: str
    port: int
    client_id: int

    @property
    def connected(self) -> bool:
        ...

    async def connect(self) -> Dict:
        ...

    async def disconnect(self) -> Dict:
        ...

    async def get_account_summary(self) -> AccountSummary:
        ...

    async def get_positions(self) -> List[Position]:
        ...

    async def get_portfolio_pnl(self) -> PnLSnapshot:
        ...

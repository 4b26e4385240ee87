from datetime import datetime
from typing import List

from trader_workstation.domain.models import AccountSummary, Position
from trader_workstation.domain.schemas.base import CamelModel


class ConnectResponse(CamelModel):
    status: str
    timestamp: datetime


class DisconnectResponse(CamelModel):
    status: str


class HealthResponse(CamelModel):
    status: str
    ibkr_connected: bool
    timestamp: datetime


class AccountSummaryResponse(CamelModel):
    net_liquidation: float
    total_cash_value: float
    buying_power: float
    timestamp: datetime
    currency: str

    @classmethod
    def from_domain(cls, account: AccountSummary) -> "AccountSummaryResponse":
        return cls(
            net_liquidation=float(account.net_liquidation),
            total_cash_value=float(account.total_cash_value),
            buying_power=float(account.buying_power),
            timestamp=account.timestamp,
            currency=account.currency,
        )


class PositionSchema(CamelModel):
    symbol: str
    quantity: float
    avg_cost: float
    current_price: float

    @classmethod
    def from_domain(cls, position: Position) -> "PositionSchema":
        return cls(
            symbol=position.symbol,
            quantity=float(position.quantity),
            avg_cost=float(position.avg_cost),
            current_price=float(position.current_price),
        )


class PositionsResponse(CamelModel):
    positions: List[PositionSchema]
    count: int
    timestamp: datetime

"""
DOMAIN MODELS — POSITIONS, ACCOUNT & PnL

Immutable snapshots supplied by the broker connector for a single request.
No broker access. No HTTP concerns.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Position:
    """
    Raw holding as reported by the broker.
    """
    symbol: str
    quantity: Decimal
    avg_cost: Decimal
    current_price: Decimal

    @property
    def notional(self) -> Decimal:
        return self.current_price * self.quantity


@dataclass(frozen=True)
class DerivedPosition:
    """
    Position enriched with unrealized PnL figures.
    """
    symbol: str
    quantity: Decimal
    avg_cost: Decimal
    current_price: Decimal
    unrealized_pnl: Decimal
    unrealized_pnl_pct: Decimal

    @property
    def notional(self) -> Decimal:
        return self.current_price * self.quantity


@dataclass(frozen=True)
class AccountSummary:
    """
    Account-level figures, reported as-is by the broker.
    """
    net_liquidation: Decimal
    total_cash_value: Decimal
    buying_power: Decimal
    timestamp: datetime
    currency: str = "USD"


@dataclass(frozen=True)
class PnLSnapshot:
    """
    Derived positions plus portfolio PnL totals at a point in time.
    """
    positions: Tuple[DerivedPosition, ...]
    total_unrealized_pnl: Decimal
    total_realized_pnl: Decimal
    timestamp: datetime

"""
PnL ENGINE
Derive unrealized PnL from raw broker positions

RESPONSIBILITIES:
- Per-position unrealized PnL and PnL %
- Portfolio unrealized total
- Carry the externally supplied realized PnL unchanged

RULES:
❌ No broker access
❌ No rounding (reports stay exact; the API layer serializes)
✅ Pure: same input, same output
✅ Zero avg cost fails fast
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from trader_workstation.domain.errors import InvalidInputError
from trader_workstation.domain.models import DerivedPosition, PnLSnapshot, Position
from trader_workstation.utils.time import now_utc

HUNDRED = Decimal("100")


def derive_position(position: Position) -> DerivedPosition:
    """
    Enrich a single position with unrealized PnL

    PnL  = (current_price - avg_cost) * quantity
    PnL% = (current_price - avg_cost) / avg_cost * 100

    Raises:
        InvalidInputError: avg_cost is zero
    """
    if position.avg_cost == 0:
        raise InvalidInputError("avg_cost", position.symbol)

    price_move = position.current_price - position.avg_cost

    return DerivedPosition(
        symbol=position.symbol,
        quantity=position.quantity,
        avg_cost=position.avg_cost,
        current_price=position.current_price,
        unrealized_pnl=price_move * position.quantity,
        unrealized_pnl_pct=price_move / position.avg_cost * HUNDRED,
    )


def derive_pnl(
    positions: Iterable[Position],
    realized_pnl: Decimal,
    timestamp: Optional[datetime] = None,
) -> PnLSnapshot:
    """
    Derive every position and aggregate the unrealized total

    Args:
        positions: Raw positions, in broker order (order is preserved)
        realized_pnl: Realized PnL reported by the broker
        timestamp: Snapshot time (defaults to now, UTC)

    Returns:
        PnLSnapshot with derived positions and both PnL totals
    """
    derived = tuple(derive_position(p) for p in positions)
    total_unrealized = sum((p.unrealized_pnl for p in derived), Decimal("0"))

    return PnLSnapshot(
        positions=derived,
        total_unrealized_pnl=total_unrealized,
        total_realized_pnl=realized_pnl,
        timestamp=timestamp or now_utc(),
    )

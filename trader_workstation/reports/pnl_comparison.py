"""
REPORTING — PnL COMPARISON

Realized vs unrealized PnL with the best and worst positions.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from trader_workstation.domain.models import (
    PnLComparison,
    PnLSnapshot,
    PositionPnL,
    Report,
    ReportType,
)
from trader_workstation.utils.time import now_utc, to_utc

logger = logging.getLogger(__name__)

TOP_N = 3


def _rank(rows: List[PositionPnL], descending: bool) -> Tuple[PositionPnL, ...]:
    # sorted() is stable in both directions: tied rows keep broker order
    ranked = sorted(rows, key=lambda row: row.unrealized_pnl, reverse=descending)
    return tuple(ranked[:TOP_N])


def generate_pnl_comparison(
    pnl: PnLSnapshot,
    generated_at: Optional[datetime] = None,
) -> Report:
    """
    Build the PnL comparison report.

    top_gainers holds up to three positions by unrealized PnL, highest
    first; top_losers holds up to three, lowest first.
    """
    rows = [
        PositionPnL(
            symbol=p.symbol,
            quantity=p.quantity,
            unrealized_pnl=p.unrealized_pnl,
            unrealized_pnl_pct=p.unrealized_pnl_pct,
            avg_entry=p.avg_cost,
            current_price=p.current_price,
        )
        for p in pnl.positions
    ]

    total_unrealized = pnl.total_unrealized_pnl
    total_realized = pnl.total_realized_pnl
    combined = total_unrealized + total_realized

    logger.debug(
        "PnL comparison | unrealized=%s realized=%s combined=%s",
        total_unrealized,
        total_realized,
        combined,
    )

    return Report(
        report_type=ReportType.PNL_COMPARISON,
        generated_at=to_utc(generated_at) if generated_at else now_utc(),
        summary=PnLComparison(
            unrealized_pnl=total_unrealized,
            realized_pnl=total_realized,
            combined_pnl=combined,
            top_gainers=_rank(rows, descending=True),
            top_losers=_rank(rows, descending=False),
        ),
    )

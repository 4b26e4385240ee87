"""
REPORTING — PORTFOLIO SUMMARY

Account-level figures plus per-symbol allocation.

Allocation percentages are taken against net liquidation, not against the
positions' market value, so they sum to less than 100 when the account
holds cash.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from trader_workstation.domain.models import (
    AccountSummary,
    AllocationEntry,
    DerivedPosition,
    PortfolioSummary,
    Report,
    ReportType,
)
from trader_workstation.reports.common import percent_of
from trader_workstation.utils.time import now_utc, to_utc

logger = logging.getLogger(__name__)


def generate_portfolio_summary(
    account: AccountSummary,
    positions: Sequence[DerivedPosition],
    generated_at: Optional[datetime] = None,
) -> Report:
    """
    Build the portfolio summary report.

    Raises:
        InvalidInputError: net liquidation is zero and there is at least
            one position to allocate.
    """
    net_liquidation = account.net_liquidation

    allocation = tuple(
        AllocationEntry(
            symbol=p.symbol,
            value=p.notional,
            percentage=percent_of(p.notional, net_liquidation, "net_liquidation"),
        )
        for p in positions
    )
    positions_value = sum((entry.value for entry in allocation), Decimal("0"))

    logger.debug(
        "Portfolio summary | positions=%d value=%s net_liq=%s",
        len(allocation),
        positions_value,
        net_liquidation,
    )

    return Report(
        report_type=ReportType.PORTFOLIO_SUMMARY,
        generated_at=to_utc(generated_at) if generated_at else now_utc(),
        summary=PortfolioSummary(
            total_account_value=net_liquidation,
            positions_value=positions_value,
            cash_available=account.total_cash_value,
            buying_power=account.buying_power,
            allocation=allocation,
        ),
    )

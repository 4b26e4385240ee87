"""
REPORTING — RISK EXPOSURE

Position concentration and a coarse overall risk level.

Thresholds use strict greater-than: a weight of exactly 10 is MEDIUM,
exactly 5 is LOW; a max concentration of exactly 25 is MEDIUM, exactly
15 is LOW.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from trader_workstation.domain.models import (
    DerivedPosition,
    Diversification,
    ExposureEntry,
    Report,
    ReportType,
    RiskExposure,
    RiskLevel,
    RiskMetrics,
)
from trader_workstation.reports.common import percent_of
from trader_workstation.utils.time import now_utc, to_utc

logger = logging.getLogger(__name__)

# Position weight thresholds (% of net liquidation)
LEVERAGE_HIGH_ABOVE = Decimal("10")
LEVERAGE_MEDIUM_ABOVE = Decimal("5")

# Max concentration thresholds (% of net liquidation)
RISK_HIGH_ABOVE = Decimal("25")
RISK_MEDIUM_ABOVE = Decimal("15")


def classify_leverage(weight: Decimal) -> RiskLevel:
    if weight > LEVERAGE_HIGH_ABOVE:
        return RiskLevel.HIGH
    if weight > LEVERAGE_MEDIUM_ABOVE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def classify_overall_risk(max_concentration: Decimal) -> RiskLevel:
    if max_concentration > RISK_HIGH_ABOVE:
        return RiskLevel.HIGH
    if max_concentration > RISK_MEDIUM_ABOVE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def generate_risk_exposure(
    net_liquidation: Decimal,
    positions: Sequence[DerivedPosition],
    generated_at: Optional[datetime] = None,
) -> Report:
    """
    Build the risk exposure report.

    An empty position list yields max_concentration 0, diversification
    NONE and overall risk LOW.

    Raises:
        InvalidInputError: net liquidation is zero and there is at least
            one position to weigh.
    """
    exposure = []
    for p in positions:
        weight = percent_of(p.notional, net_liquidation, "net_liquidation")
        exposure.append(
            ExposureEntry(
                symbol=p.symbol,
                weight=weight,
                notional=p.notional,
                delta_value=p.unrealized_pnl,
                leverage=classify_leverage(weight),
            )
        )

    high_risk_count = sum(1 for e in exposure if e.leverage is RiskLevel.HIGH)
    max_concentration = max((e.weight for e in exposure), default=Decimal("0"))

    metrics = RiskMetrics(
        high_risk_count=high_risk_count,
        max_concentration=max_concentration,
        diversification=Diversification.ADEQUATE if exposure else Diversification.NONE,
        overall_risk_level=classify_overall_risk(max_concentration),
    )

    logger.debug(
        "Risk exposure | positions=%d high_risk=%d max_concentration=%s level=%s",
        len(exposure),
        high_risk_count,
        max_concentration,
        metrics.overall_risk_level.value,
    )

    return Report(
        report_type=ReportType.RISK_EXPOSURE,
        generated_at=to_utc(generated_at) if generated_at else now_utc(),
        summary=RiskExposure(exposure=tuple(exposure), metrics=metrics),
    )

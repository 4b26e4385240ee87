"""
DOMAIN MODELS — REPORTS

Report payloads produced by the report layer. Created fresh per request,
never persisted.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Tuple, Union


class ReportType(str, Enum):
    """Kind of report"""
    PORTFOLIO_SUMMARY = "PORTFOLIO_SUMMARY"
    PNL_COMPARISON = "PNL_COMPARISON"
    RISK_EXPOSURE = "RISK_EXPOSURE"


class RiskLevel(str, Enum):
    """Coarse risk bucket, used for position leverage and overall risk"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Diversification(str, Enum):
    """Presence of any exposure at all"""
    ADEQUATE = "ADEQUATE"
    NONE = "NONE"


# ---------------------------------------------------------------------------
# Portfolio summary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AllocationEntry:
    symbol: str
    value: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class PortfolioSummary:
    total_account_value: Decimal
    positions_value: Decimal
    cash_available: Decimal
    buying_power: Decimal
    allocation: Tuple[AllocationEntry, ...]


# ---------------------------------------------------------------------------
# PnL comparison
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PositionPnL:
    symbol: str
    quantity: Decimal
    unrealized_pnl: Decimal
    unrealized_pnl_pct: Decimal
    avg_entry: Decimal
    current_price: Decimal


@dataclass(frozen=True)
class PnLComparison:
    unrealized_pnl: Decimal
    realized_pnl: Decimal
    combined_pnl: Decimal
    top_gainers: Tuple[PositionPnL, ...]
    top_losers: Tuple[PositionPnL, ...]


# ---------------------------------------------------------------------------
# Risk exposure
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExposureEntry:
    symbol: str
    weight: Decimal
    notional: Decimal
    delta_value: Decimal
    leverage: RiskLevel


@dataclass(frozen=True)
class RiskMetrics:
    high_risk_count: int
    max_concentration: Decimal
    diversification: Diversification
    overall_risk_level: RiskLevel


@dataclass(frozen=True)
class RiskExposure:
    exposure: Tuple[ExposureEntry, ...]
    metrics: RiskMetrics


ReportSummary = Union[PortfolioSummary, PnLComparison, RiskExposure]


@dataclass(frozen=True)
class Report:
    """
    Tagged report envelope: the summary type always matches report_type.
    """
    report_type: ReportType
    generated_at: datetime
    summary: ReportSummary

"""
Domain Models Package
Export all domain entities
"""

from .portfolio import (
    AccountSummary,
    DerivedPosition,
    PnLSnapshot,
    Position,
)
from .report import (
    # Enums
    Diversification,
    ReportType,
    RiskLevel,

    # Report payloads
    AllocationEntry,
    ExposureEntry,
    PnLComparison,
    PortfolioSummary,
    PositionPnL,
    Report,
    RiskExposure,
    RiskMetrics,
)

__all__ = [
    # Enums
    "Diversification",
    "ReportType",
    "RiskLevel",

    # Snapshots
    "AccountSummary",
    "DerivedPosition",
    "PnLSnapshot",
    "Position",

    # Report payloads
    "AllocationEntry",
    "ExposureEntry",
    "PnLComparison",
    "PortfolioSummary",
    "PositionPnL",
    "Report",
    "RiskExposure",
    "RiskMetrics",
]

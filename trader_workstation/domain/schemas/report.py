"""
Report response schemas.

Domain reports carry Decimals; these models convert them to JSON numbers
and expose the camelCase keys the dashboard reads.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from trader_workstation.domain.models import (
    AllocationEntry,
    Diversification,
    ExposureEntry,
    PnLComparison,
    PortfolioSummary,
    PositionPnL,
    Report,
    ReportType,
    RiskExposure,
    RiskLevel,
    RiskMetrics,
)
from trader_workstation.domain.schemas.base import CamelModel


# ---------------------------------------------------------------------------
# Portfolio summary
# ---------------------------------------------------------------------------

class AllocationEntrySchema(CamelModel):
    symbol: str
    value: float
    percentage: float

    @classmethod
    def from_domain(cls, entry: AllocationEntry) -> "AllocationEntrySchema":
        return cls(symbol=entry.symbol, value=float(entry.value), percentage=float(entry.percentage))


class PortfolioSummarySchema(CamelModel):
    total_account_value: float
    positions_value: float
    cash_available: float
    buying_power: float
    allocation: List[AllocationEntrySchema]

    @classmethod
    def from_domain(cls, summary: PortfolioSummary) -> "PortfolioSummarySchema":
        return cls(
            total_account_value=float(summary.total_account_value),
            positions_value=float(summary.positions_value),
            cash_available=float(summary.cash_available),
            buying_power=float(summary.buying_power),
            allocation=[AllocationEntrySchema.from_domain(a) for a in summary.allocation],
        )


class PortfolioSummaryReportResponse(CamelModel):
    report_type: ReportType
    generated_at: datetime
    summary: PortfolioSummarySchema

    @classmethod
    def from_domain(cls, report: Report) -> "PortfolioSummaryReportResponse":
        return cls(
            report_type=report.report_type,
            generated_at=report.generated_at,
            summary=PortfolioSummarySchema.from_domain(report.summary),
        )


# ---------------------------------------------------------------------------
# PnL comparison
# ---------------------------------------------------------------------------

class PositionPnLSchema(CamelModel):
    symbol: str
    quantity: float
    unrealized_pnl: float = Field(alias="unrealizedPnL")
    unrealized_pnl_pct: float = Field(alias="unrealizedPnLPct")
    avg_entry: float
    current_price: float

    @classmethod
    def from_domain(cls, row: PositionPnL) -> "PositionPnLSchema":
        return cls(
            symbol=row.symbol,
            quantity=float(row.quantity),
            unrealized_pnl=float(row.unrealized_pnl),
            unrealized_pnl_pct=float(row.unrealized_pnl_pct),
            avg_entry=float(row.avg_entry),
            current_price=float(row.current_price),
        )


class PnLComparisonSchema(CamelModel):
    unrealized_pnl: float = Field(alias="unrealizedPnL")
    realized_pnl: float = Field(alias="realizedPnL")
    combined_pnl: float = Field(alias="combinedPnL")
    top_gainers: List[PositionPnLSchema]
    top_losers: List[PositionPnLSchema]

    @classmethod
    def from_domain(cls, summary: PnLComparison) -> "PnLComparisonSchema":
        return cls(
            unrealized_pnl=float(summary.unrealized_pnl),
            realized_pnl=float(summary.realized_pnl),
            combined_pnl=float(summary.combined_pnl),
            top_gainers=[PositionPnLSchema.from_domain(r) for r in summary.top_gainers],
            top_losers=[PositionPnLSchema.from_domain(r) for r in summary.top_losers],
        )


class PnLComparisonReportResponse(CamelModel):
    report_type: ReportType
    generated_at: datetime
    summary: PnLComparisonSchema

    @classmethod
    def from_domain(cls, report: Report) -> "PnLComparisonReportResponse":
        return cls(
            report_type=report.report_type,
            generated_at=report.generated_at,
            summary=PnLComparisonSchema.from_domain(report.summary),
        )


# ---------------------------------------------------------------------------
# Risk exposure
# ---------------------------------------------------------------------------

class ExposureEntrySchema(CamelModel):
    symbol: str
    weight: float
    notional: float
    delta_value: float
    leverage: RiskLevel

    @classmethod
    def from_domain(cls, entry: ExposureEntry) -> "ExposureEntrySchema":
        return cls(
            symbol=entry.symbol,
            weight=float(entry.weight),
            notional=float(entry.notional),
            delta_value=float(entry.delta_value),
            leverage=entry.leverage,
        )


class RiskMetricsSchema(CamelModel):
    high_risk_count: int
    max_concentration: float
    diversification: Diversification
    overall_risk_level: RiskLevel

    @classmethod
    def from_domain(cls, metrics: RiskMetrics) -> "RiskMetricsSchema":
        return cls(
            high_risk_count=metrics.high_risk_count,
            max_concentration=float(metrics.max_concentration),
            diversification=metrics.diversification,
            overall_risk_level=metrics.overall_risk_level,
        )


class RiskExposureSchema(CamelModel):
    exposure: List[ExposureEntrySchema]
    metrics: RiskMetricsSchema

    @classmethod
    def from_domain(cls, summary: RiskExposure) -> "RiskExposureSchema":
        return cls(
            exposure=[ExposureEntrySchema.from_domain(e) for e in summary.exposure],
            metrics=RiskMetricsSchema.from_domain(summary.metrics),
        )


class RiskExposureReportResponse(CamelModel):
    report_type: ReportType
    generated_at: datetime
    summary: RiskExposureSchema

    @classmethod
    def from_domain(cls, report: Report) -> "RiskExposureReportResponse":
        return cls(
            report_type=report.report_type,
            generated_at=report.generated_at,
            summary=RiskExposureSchema.from_domain(report.summary),
        )

"""
Reports Package
Pure report builders over a broker snapshot
"""

from .pnl_comparison import generate_pnl_comparison
from .portfolio_summary import generate_portfolio_summary
from .risk_exposure import generate_risk_exposure

__all__ = [
    "generate_pnl_comparison",
    "generate_portfolio_summary",
    "generate_risk_exposure",
]

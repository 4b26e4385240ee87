"""
Unit Tests for the PnL engine

Per-position PnL, PnL %, totals and the zero avg cost policy.
"""

import pytest
from decimal import Decimal

from trader_workstation.domain.errors import InvalidInputError, ReportError
from trader_workstation.domain.services.pnl_engine import derive_pnl, derive_position


pytestmark = pytest.mark.unit


def test_derive_position_matches_formula_exactly(sample_positions):
    expected = {"AAPL": Decimal("470.0"), "GOOGL": Decimal("2500"), "MSFT": Decimal("787.5")}

    for position in sample_positions:
        derived = derive_position(position)
        assert derived.unrealized_pnl == (position.current_price - position.avg_cost) * position.quantity
        assert derived.unrealized_pnl == expected[position.symbol]


def test_derive_position_percentage(position_factory):
    derived = derive_position(position_factory("MSFT", "75", "320", "330.5"))
    assert derived.unrealized_pnl_pct == Decimal("3.28125")


def test_short_position_gains_when_price_falls(position_factory):
    derived = derive_position(position_factory("TSLA", "-10", "100", "90"))
    assert derived.unrealized_pnl == Decimal("100")
    assert derived.unrealized_pnl_pct == Decimal("-10")


def test_zero_avg_cost_is_rejected(position_factory):
    with pytest.raises(InvalidInputError) as exc_info:
        derive_position(position_factory("FREE", "10", "0", "5"))

    assert isinstance(exc_info.value, ReportError)
    assert exc_info.value.field == "avg_cost"
    assert "FREE" in exc_info.value.message


def test_derive_pnl_totals_and_order(sample_positions, fixed_time):
    snapshot = derive_pnl(sample_positions, Decimal("5250"), timestamp=fixed_time)

    assert [p.symbol for p in snapshot.positions] == ["AAPL", "GOOGL", "MSFT"]
    assert snapshot.total_unrealized_pnl == Decimal("3757.5")
    assert snapshot.total_unrealized_pnl == sum(p.unrealized_pnl for p in snapshot.positions)
    assert snapshot.total_realized_pnl == Decimal("5250")
    assert snapshot.timestamp == fixed_time


def test_derive_pnl_empty():
    snapshot = derive_pnl([], Decimal("0"))

    assert snapshot.positions == ()
    assert snapshot.total_unrealized_pnl == Decimal("0")
    assert snapshot.timestamp is not None

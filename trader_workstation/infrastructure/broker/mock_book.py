"""
MOCK BOOK LOADER
Load the canned account and positions served by the mock connector

RULES:
❌ No silent defaults for missing sections
✅ Fail fast on invalid book
✅ Decimal(str(x)) for every number
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from trader_workstation.domain.models import Position

logger = logging.getLogger(__name__)

DEFAULT_BOOK_FILE = Path(__file__).resolve().parents[2] / "config" / "mock_broker.yml"


@dataclass(frozen=True)
class AccountFigures:
    net_liquidation: Decimal
    total_cash_value: Decimal
    buying_power: Decimal
    currency: str


@dataclass(frozen=True)
class MockBook:
    """Static broker state: account figures, positions, realized PnL."""
    account: AccountFigures
    positions: Tuple[Position, ...]
    realized_pnl: Decimal


def _decimal(data: Dict[str, Any], key: str, where: str) -> Decimal:
    if key not in data or data[key] is None:
        raise ValueError(f"Missing '{key}' in {where}")
    try:
        return Decimal(str(data[key]))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid number for '{key}' in {where}: {data[key]!r}") from exc


def _parse_account(data: Dict[str, Any]) -> AccountFigures:
    if not isinstance(data, dict):
        raise ValueError("Mock book 'account' section must be a mapping")

    account = AccountFigures(
        net_liquidation=_decimal(data, "net_liquidation", "account"),
        total_cash_value=_decimal(data, "total_cash_value", "account"),
        buying_power=_decimal(data, "buying_power", "account"),
        currency=str(data.get("currency", "USD")),
    )
    for field in ("net_liquidation", "total_cash_value", "buying_power"):
        if getattr(account, field) < 0:
            raise ValueError(f"account.{field} must be non-negative")
    return account


def _parse_positions(items: List[Dict[str, Any]]) -> Tuple[Position, ...]:
    if not isinstance(items, list):
        raise ValueError("Mock book 'positions' section must be a list")

    positions = []
    for idx, item in enumerate(items):
        where = f"positions[{idx}]"
        if not isinstance(item, dict):
            raise ValueError(f"{where} must be a mapping")

        symbol = item.get("symbol")
        if not symbol:
            raise ValueError(f"Missing 'symbol' in {where}")

        position = Position(
            symbol=str(symbol),
            quantity=_decimal(item, "quantity", where),
            avg_cost=_decimal(item, "avg_cost", where),
            current_price=_decimal(item, "current_price", where),
        )
        if position.avg_cost <= 0:
            raise ValueError(f"{where}.avg_cost must be positive")
        if position.current_price < 0:
            raise ValueError(f"{where}.current_price must be non-negative")
        positions.append(position)

    symbols = [p.symbol for p in positions]
    if len(symbols) != len(set(symbols)):
        raise ValueError("Duplicate position symbols found in mock book")

    return tuple(positions)


def parse_mock_book(data: Dict[str, Any]) -> MockBook:
    """Validate a raw book mapping and build a MockBook."""
    if not isinstance(data, dict):
        raise ValueError("Mock book must be a mapping")
    if "account" not in data:
        raise ValueError("Mock book is missing the 'account' section")

    return MockBook(
        account=_parse_account(data["account"] or {}),
        positions=_parse_positions(data.get("positions") or []),
        realized_pnl=_decimal(data, "realized_pnl", "mock book"),
    )


def load_mock_book(path: Path = DEFAULT_BOOK_FILE) -> MockBook:
    """Load the mock book from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Mock book not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    book = parse_mock_book(data)
    logger.info("Loaded mock book from %s (%d positions)", path, len(book.positions))
    return book

import pytest
from decimal import Decimal, InvalidOperation
from pathlib import Path

import trader_workstation
from trader_workstation.config import Settings
from trader_workstation.domain.errors import BrokerNotConnectedError
from trader_workstation.infrastructure.broker.connector_factory import get_broker_connector
from trader_workstation.infrastructure.broker.mock_book import DEFAULT_BOOK_FILE, load_mock_book, parse_mock_book


pytestmark = pytest.mark.unit


VALID_BOOK = {
    "account": {
        "net_liquidation": 1000,
        "total_cash_value": 400,
        "buying_power": 800,
    },
    "realized_pnl": 12.5,
    "positions": [
        {"symbol": "AAA", "quantity": 3, "avg_cost": 100.1, "current_price": 100.2},
    ],
}


def test_default_book_matches_canned_data(mock_book):
    assert mock_book.account.net_liquidation == Decimal("500000")
    assert mock_book.account.currency == "USD"
    assert mock_book.realized_pnl == Decimal("5250")
    assert [p.symbol for p in mock_book.positions] == ["AAPL", "GOOGL", "MSFT"]
    assert mock_book.positions[0].avg_cost == Decimal("150.5")


def test_parse_book_uses_exact_decimals():
    book = parse_mock_book(VALID_BOOK)

    assert book.positions[0].avg_cost == Decimal("100.1")
    assert book.positions[0].current_price == Decimal("100.2")
    assert book.realized_pnl == Decimal("12.5")
    assert book.account.currency == "USD"


@pytest.mark.parametrize(
    "mutate, message",
    [
        (lambda b: b.pop("account"), "account"),
        (lambda b: b.pop("realized_pnl"), "realized_pnl"),
        (lambda b: b["account"].pop("buying_power"), "buying_power"),
        (lambda b: b["account"].update(total_cash_value=-1), "non-negative"),
        (lambda b: b["positions"][0].update(avg_cost=0), "avg_cost"),
        (lambda b: b["positions"][0].update(current_price=-5), "current_price"),
        (lambda b: b["positions"][0].update(quantity="lots"), "quantity"),
        (lambda b: b["positions"].append(dict(b["positions"][0])), "Duplicate"),
        (lambda b: b.update(account=[1, 2]), "'account' section must be a mapping"),
        (lambda b: b.update(positions="AAPL"), "'positions' section must be a list"),
        (lambda b: b["positions"].append("MSFT"), r"positions\[1\] must be a mapping"),
    ],
)
def test_invalid_book_fails_fast(mutate, message):
    data = {
        "account": dict(VALID_BOOK["account"]),
        "realized_pnl": VALID_BOOK["realized_pnl"],
        "positions": [dict(p) for p in VALID_BOOK["positions"]],
    }
    mutate(data)

    with pytest.raises(ValueError, match=message):
        parse_mock_book(data)


def test_invalid_number_keeps_original_cause():
    data = dict(VALID_BOOK, realized_pnl="n/a")

    with pytest.raises(ValueError, match="realized_pnl") as exc_info:
        parse_mock_book(data)
    assert isinstance(exc_info.value.__cause__, InvalidOperation)


def test_missing_book_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_mock_book(tmp_path / "missing.yml")


def test_load_book_from_yaml(tmp_path):
    path = tmp_path / "book.yml"
    path.write_text(
        "account:\n"
        "  net_liquidation: 10\n"
        "  total_cash_value: 10\n"
        "  buying_power: 20\n"
        "  currency: EUR\n"
        "realized_pnl: 0\n"
        "positions: []\n"
    )

    book = load_mock_book(path)
    assert book.positions == ()
    assert book.account.currency == "EUR"


async def test_data_calls_require_connection(connector):
    assert connector.connected is False

    with pytest.raises(BrokerNotConnectedError, match="IBKR not connected"):
        await connector.get_account_summary()
    with pytest.raises(BrokerNotConnectedError):
        await connector.get_positions()
    with pytest.raises(BrokerNotConnectedError):
        await connector.get_portfolio_pnl()


async def test_connect_and_disconnect(connector):
    result = await connector.connect()
    assert result["status"] == "connected"
    assert result["timestamp"] is not None
    assert connector.connected is True

    result = await connector.disconnect()
    assert result == {"status": "disconnected"}
    assert connector.connected is False


async def test_portfolio_pnl_after_connect(connector):
    await connector.connect()

    account = await connector.get_account_summary()
    pnl = await connector.get_portfolio_pnl()

    assert account.buying_power == Decimal("300000")
    assert account.timestamp.tzinfo is not None
    assert pnl.total_unrealized_pnl == Decimal("3757.5")
    assert pnl.total_realized_pnl == Decimal("5250")


async def test_positions_are_a_fresh_list_per_call(connector):
    await connector.connect()

    first = await connector.get_positions()
    first.clear()
    assert len(await connector.get_positions()) == 3


def test_factory_builds_connector_from_settings(tmp_path):
    path = tmp_path / "book.yml"
    path.write_text(
        "account: {net_liquidation: 1, total_cash_value: 1, buying_power: 1}\n"
        "realized_pnl: 0\n"
    )
    app_settings = Settings(
        IBKR_HOST="10.0.0.5",
        IBKR_PORT=7497,
        IBKR_CLIENT_ID=9,
        IBKR_CONNECT_DELAY_SECONDS=0,
        MOCK_BOOK_FILE=str(path),
    )

    connector = get_broker_connector(app_settings)

    assert connector.host == "10.0.0.5"
    assert connector.port == 7497
    assert connector.client_id == 9
    assert connector.connected is False
    assert connector.book.positions == ()


def test_default_book_ships_inside_package():
    package_dir = Path(trader_workstation.__file__).resolve().parent

    assert DEFAULT_BOOK_FILE.parent == package_dir / "config"
    assert DEFAULT_BOOK_FILE.exists()
    assert len(load_mock_book().positions) == 3


def test_factory_falls_back_to_default_book():
    connector = get_broker_connector(Settings(IBKR_CONNECT_DELAY_SECONDS=0))

    assert [p.symbol for p in connector.book.positions] == ["AAPL", "GOOGL", "MSFT"]

from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from trader_workstation.domain.models import AccountSummary, Position
from trader_workstation.infrastructure.broker.mock_book import load_mock_book
from trader_workstation.infrastructure.broker.mock_connector import MockIBKRConnector
from trader_workstation.main import include_routers

BOOK_FILE = Path(__file__).resolve().parents[1] / "trader_workstation" / "config" / "mock_broker.yml"
FIXED_TIME = datetime(2026, 1, 15, 14, 30, tzinfo=timezone.utc)


def make_position(symbol: str, quantity: str, avg_cost: str, current_price: str) -> Position:
    return Position(
        symbol=symbol,
        quantity=Decimal(quantity),
        avg_cost=Decimal(avg_cost),
        current_price=Decimal(current_price),
    )


def make_account(net_liquidation: str = "500000") -> AccountSummary:
    return AccountSummary(
        net_liquidation=Decimal(net_liquidation),
        total_cash_value=Decimal("150000"),
        buying_power=Decimal("300000"),
        timestamp=FIXED_TIME,
    )


@pytest.fixture
def sample_positions():
    """The canned three-position book"""
    return [
        make_position("AAPL", "100", "150.5", "155.2"),
        make_position("GOOGL", "50", "2800", "2850"),
        make_position("MSFT", "75", "320", "330.5"),
    ]


@pytest.fixture
def account():
    return make_account()


@pytest.fixture
def mock_book():
    return load_mock_book(BOOK_FILE)


@pytest.fixture
def connector(mock_book) -> MockIBKRConnector:
    return MockIBKRConnector(book=mock_book, connect_delay_seconds=0)


@pytest.fixture
def app(connector) -> FastAPI:
    app = FastAPI()
    include_routers(app)
    app.state.broker_connector = connector
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def connected_client(client, connector) -> AsyncClient:
    await connector.connect()
    return client


@pytest.fixture
def position_factory():
    return make_position


@pytest.fixture
def account_factory():
    return make_account


@pytest.fixture
def fixed_time():
    return FIXED_TIME

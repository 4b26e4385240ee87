"""
Broker connector factory (settings-driven).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from trader_workstation.config import Settings, settings as default_settings
from trader_workstation.infrastructure.broker.mock_book import DEFAULT_BOOK_FILE, load_mock_book
from trader_workstation.infrastructure.broker.mock_connector import MockIBKRConnector
from trader_workstation.infrastructure.broker.types import BrokerConnector


def _book_path(app_settings: Settings) -> Path:
    if app_settings.MOCK_BOOK_FILE:
        return Path(app_settings.MOCK_BOOK_FILE)
    return DEFAULT_BOOK_FILE


def get_broker_connector(app_settings: Optional[Settings] = None) -> BrokerConnector:
    app_settings = app_settings or default_settings
    book = load_mock_book(_book_path(app_settings))
    return MockIBKRConnector(
        book=book,
        host=app_settings.IBKR_HOST,
        port=app_settings.IBKR_PORT,
        client_id=app_settings.IBKR_CLIENT_ID,
        connect_delay_seconds=app_settings.IBKR_CONNECT_DELAY_SECONDS,
    )

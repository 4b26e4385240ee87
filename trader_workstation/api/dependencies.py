from fastapi import Request

from trader_workstation.infrastructure.broker.types import BrokerConnector


def get_connector(request: Request) -> BrokerConnector:
    """Connector created in the app lifespan and held on app.state."""
    return request.app.state.broker_connector

"""
Domain Errors
Typed failures raised by the report layer and the broker connector
"""

from typing import Optional


class ReportError(ValueError):
    """Base class for report computation failures.

    Raised when the input snapshot cannot produce a well-defined report.
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidInputError(ReportError):
    """A percentage would divide by zero (zero avg cost or net liquidation)."""

    def __init__(self, field: str, symbol: Optional[str] = None) -> None:
        message = f"{field} is zero"
        if symbol:
            message += f" for {symbol}"
        super().__init__(message, code="INVALID_INPUT")
        self.field = field
        self.symbol = symbol


class BrokerError(RuntimeError):
    """Base class for broker connector failures."""


class BrokerNotConnectedError(BrokerError):
    """Data was requested before the connector was connected."""

    def __init__(self) -> None:
        super().__init__("IBKR not connected")

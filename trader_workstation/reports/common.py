"""Shared arithmetic for report builders."""

from decimal import Decimal

from trader_workstation.domain.errors import InvalidInputError

HUNDRED = Decimal("100")


def percent_of(value: Decimal, total: Decimal, field: str) -> Decimal:
    """value / total * 100; a zero total raises InvalidInputError naming `field`."""
    if total == 0:
        raise InvalidInputError(field)
    return value / total * HUNDRED

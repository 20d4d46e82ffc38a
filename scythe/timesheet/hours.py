from decimal import Decimal
from typing import Iterable


def aggregate(entries: Iterable) -> Decimal:
    """Sum the hours of the given time entries"""
    return sum((entry.hours for entry in entries), Decimal("0"))

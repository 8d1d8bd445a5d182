from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any


def try_parse_amount(value: Any) -> Decimal | None:
    """
    Parse a price or total coming from the backend.
    Accepts numbers and numeric strings ("19990", " 12.50 "); returns None for
    anything that would not yield a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not amount.is_finite():
        return None
    return amount


def to_json_number(amount: Decimal) -> int | float:
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)

#!/usr/bin/env python3
"""
Utility functions for A2A Billing
Amount parsing, averaging and formatting shared across modules
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Sequence

from .config import MONTHLY_DIVISOR
from .errors import AmountParseError, EmptyBillListError

_AMOUNT_PATTERN = re.compile(r"-?\d[\d.,]*")


@dataclass(frozen=True)
class CommodityAverage:
    """Monthly average of one commodity's bills"""
    commodity: str
    amounts: List[float] = field(default_factory=list)
    monthly: float = 0.0


@dataclass(frozen=True)
class MonthlyReport:
    """Both commodity averages of a single run"""
    gas: CommodityAverage
    electricity: CommodityAverage

    @property
    def total(self) -> float:
        return self.gas.monthly + self.electricity.monthly


def parse_amount(text: str) -> float:
    """Parse a scraped bill amount such as ``"45,00 €"`` or ``"1.234,56"``.

    The portal is Italian, so a lone comma is read as the decimal separator.
    When both ``.`` and ``,`` are present, the right-most one is the decimal
    separator and the other groups thousands. A separator that appears more
    than once with no other kind present only groups thousands. A lone dot is
    a decimal separator, which keeps plain ``"38.50"`` strings working.

    Raises:
        AmountParseError: If the text contains no number.
    """
    if text is None:
        raise AmountParseError("None")

    match = _AMOUNT_PATTERN.search(text.replace("\xa0", " "))
    if not match:
        raise AmountParseError(text)

    number = match.group().rstrip(".,")
    has_comma = "," in number
    has_dot = "." in number

    if has_comma and has_dot:
        if number.rfind(",") > number.rfind("."):
            number = number.replace(".", "").replace(",", ".")
        else:
            number = number.replace(",", "")
    elif has_comma:
        if number.count(",") > 1:
            number = number.replace(",", "")
        else:
            number = number.replace(",", ".")
    elif has_dot and number.count(".") > 1:
        number = number.replace(".", "")

    try:
        return float(number)
    except ValueError:
        raise AmountParseError(text)


def parse_amounts(values: Sequence[str]) -> List[float]:
    """Parse every scraped string, keeping page order"""
    return [parse_amount(value) for value in values]


def monthly_average(values: Sequence[str], commodity: str = "") -> float:
    """Average the scraped bill amounts and convert them to a monthly figure.

    Raises:
        EmptyBillListError: If *values* is empty.
        AmountParseError: If any value is not a number.
    """
    if not values:
        raise EmptyBillListError(commodity)
    amounts = parse_amounts(values)
    return (sum(amounts) / len(amounts)) / MONTHLY_DIVISOR


def format_store_value(value: float) -> str:
    """Format a value for the remote store: shortest decimal form, comma separator.

    >>> format_store_value(20.875)
    '20,875'
    >>> format_store_value(60.0)
    '60'
    >>> format_store_value(1e-05)
    '0,00001'
    """
    if value == int(value):
        text = str(int(value))
    else:
        text = repr(float(value))
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
    return text.replace(".", ",", 1)


def format_euro(value: float) -> str:
    return f"{value:.2f} €"

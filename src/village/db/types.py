"""Column types bridging the decimal codec and the database."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import BigInteger, ColumnElement, String, cast, func
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from village.core import numeric


class DecimalText(TypeDecorator[Decimal]):
    """Stores a ``Decimal`` as fixed-point text, e.g. ``"150000.50"``.

    ``precision`` is the declared number of significant digits; the scale
    is always the money scale from :mod:`village.core.numeric`.
    """

    impl = String
    cache_ok = True

    def __init__(self, precision: int = numeric.MAX_DIGITS, **kwargs: Any) -> None:
        # digits + sign + decimal point
        super().__init__(length=precision + 2, **kwargs)
        self.precision = precision

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        text = numeric.encode(value)
        if text is not None and len(text.lstrip("-").replace(".", "")) > self.precision:
            raise ValueError(f"{text} exceeds column precision {self.precision}")
        return text

    def process_result_value(self, value: Any, dialect: Dialect) -> Decimal | None:
        return numeric.decode(value)


def minor_units(column: ColumnElement[Any]) -> ColumnElement[int]:
    """SQL expression reading a ``DecimalText`` column as integer cents.

    Stored text always has exactly two decimals, so dropping the point gives
    the value in minor units. Summing these stays exact on every dialect.
    """
    return cast(func.replace(column, ".", ""), BigInteger)

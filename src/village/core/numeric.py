"""Exact decimal codec for monetary and quantity values.

Money is persisted as fixed-point decimal text (two places) and handled as
``Decimal`` inside the application, so sums never pick up binary
floating-point drift. JSON rendering converts to plain numbers at the edge.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Annotated

from pydantic import PlainSerializer

SCALE = 2
MAX_DIGITS = 15
_QUANTUM = Decimal(1).scaleb(-SCALE)

Number = Decimal | int | float | str


def to_decimal(value: Number) -> Decimal:
    """Convert *value* to a ``Decimal`` quantized to the money scale."""
    if isinstance(value, bool):
        raise TypeError("Booleans are not monetary values")
    try:
        # str() first so floats like 0.1 become Decimal("0.1"), not the binary expansion.
        result = Decimal(value if isinstance(value, (Decimal, str)) else str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a decimal value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Monetary values must be finite, got {value!r}")
    result = result.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    if len(result.as_tuple().digits) > MAX_DIGITS:
        raise ValueError(
            f"{value!r} exceeds {MAX_DIGITS} significant digits"
        )
    return result


def encode(value: Number | None) -> str | None:
    """Render *value* as fixed-point text for storage."""
    if value is None:
        return None
    return format(to_decimal(value), "f")


def decode(text: Number | None) -> Decimal | None:
    """Parse stored text (or a numeric aggregate result) back to ``Decimal``."""
    if text is None:
        return None
    return to_decimal(text)


def from_minor_units(total: int | Decimal | None) -> Decimal:
    """Turn a summed count of minor units (cents) into a money total.

    Totals are exact and are not held to the per-value digit limit; an
    empty sum (``None``) is zero.
    """
    if total is None:
        return Decimal(0).quantize(_QUANTUM)
    return Decimal(int(total)).scaleb(-SCALE).quantize(_QUANTUM)


def _as_json_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


Money = Annotated[
    Decimal,
    PlainSerializer(_as_json_number, return_type=int | float, when_used="json"),
]
"""Decimal field type that renders as a JSON number."""

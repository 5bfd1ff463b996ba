"""Tests for the decimal codec used by every money column."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import BaseModel

from village.core import numeric
from village.core.numeric import Money


class TestEncode:
    def test_two_decimal_places(self):
        assert numeric.encode(150000.5) == "150000.50"

    def test_integer(self):
        assert numeric.encode(50000000) == "50000000.00"

    def test_float_without_binary_noise(self):
        assert numeric.encode(0.1) == "0.10"
        assert numeric.encode(0.1 + 0.2) == "0.30"

    def test_decimal_and_text_inputs(self):
        assert numeric.encode(Decimal("12.3")) == "12.30"
        assert numeric.encode("7") == "7.00"

    def test_rounds_half_even_to_scale(self):
        assert numeric.encode(Decimal("1.005")) == "1.00"
        assert numeric.encode(Decimal("1.015")) == "1.02"

    def test_none_passes_through(self):
        assert numeric.encode(None) is None

    def test_too_many_digits(self):
        with pytest.raises(ValueError, match="significant digits"):
            numeric.encode(Decimal("12345678901234.56"))

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            numeric.encode(float("inf"))

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            numeric.encode("twelve")

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            numeric.encode(True)


class TestDecode:
    def test_text(self):
        assert numeric.decode("150000.50") == Decimal("150000.50")

    def test_none_passes_through(self):
        assert numeric.decode(None) is None

    def test_numeric_inputs(self):
        assert numeric.decode(110000) == Decimal("110000.00")
        assert numeric.decode(150100.5) == Decimal("150100.50")

    def test_rejects_value_over_digit_limit(self):
        with pytest.raises(ValueError):
            numeric.decode("19999999999999.98")

    @pytest.mark.parametrize(
        "value",
        ["0.01", "150000.50", "50000000", "9999999999999.99", "123.4"],
    )
    def test_round_trip(self, value):
        amount = Decimal(value)
        assert numeric.decode(numeric.encode(amount)) == amount


class TestFromMinorUnits:
    def test_cents_to_amount(self):
        assert numeric.from_minor_units(15000050) == Decimal("150000.50")

    def test_empty_sum_is_zero(self):
        assert numeric.from_minor_units(None) == Decimal("0.00")

    def test_total_beyond_single_value_limit(self):
        # Two stored maxima of 9999999999999.99 add up to 16 digits.
        assert numeric.from_minor_units(1999999999999998) == Decimal("19999999999999.98")

    def test_decimal_sum_from_postgres(self):
        assert numeric.from_minor_units(Decimal("799999999996000")) == Decimal(
            "7999999999960.00"
        )


class TestMoneySerialization:
    class Priced(BaseModel):
        price: Money

    def test_json_renders_numbers(self):
        assert self.Priced(price=Decimal("150000.50")).model_dump(mode="json") == {
            "price": 150000.5
        }
        assert self.Priced(price=Decimal("100.00")).model_dump(mode="json") == {
            "price": 100
        }

    def test_python_mode_keeps_decimal(self):
        dumped = self.Priced(price=Decimal("1.10")).model_dump()
        assert isinstance(dumped["price"], Decimal)

"""Tests for value kinds and their decode rules."""

from decimal import Decimal

import pytest

from urlformat import HexMode, ValueKind
from urlformat._kinds import INT64_MAX, INT64_MIN, decode_hex, decode_int64


class TestString:
    def test_as_is(self) -> None:
        assert ValueKind.STRING.decode("Hello World") == "Hello World"

    def test_empty(self) -> None:
        assert ValueKind.STRING.decode("") == ""


class TestChar:
    def test_single(self) -> None:
        assert ValueKind.CHAR.decode("q") == "q"

    def test_empty_rejected(self) -> None:
        assert ValueKind.CHAR.decode("") is None

    def test_two_rejected(self) -> None:
        assert ValueKind.CHAR.decode("qq") is None


class TestBool:
    @pytest.mark.parametrize("text", ["true", "TRUE", "True", "tRuE"])
    def test_true(self, text: str) -> None:
        assert ValueKind.BOOL.decode(text) is True

    @pytest.mark.parametrize("text", ["false", "FALSE", "False"])
    def test_false(self, text: str) -> None:
        assert ValueKind.BOOL.decode(text) is False

    @pytest.mark.parametrize("text", ["", "yes", "1", " true", "truex"])
    def test_other_text_rejected(self, text: str) -> None:
        assert ValueKind.BOOL.decode(text) is None


class TestInt:
    def test_positive(self) -> None:
        assert ValueKind.INT.decode("42") == 42

    def test_signed(self) -> None:
        assert ValueKind.INT.decode("-42") == -42
        assert ValueKind.INT.decode("+42") == 42

    def test_bounds(self) -> None:
        assert decode_int64(str(INT64_MAX)) == INT64_MAX
        assert decode_int64(str(INT64_MIN)) == INT64_MIN

    def test_overflow_rejected(self) -> None:
        assert decode_int64(str(INT64_MAX + 1)) is None
        assert decode_int64(str(INT64_MIN - 1)) is None

    def test_leading_zeros(self) -> None:
        assert decode_int64("007") == 7
        assert decode_int64("-00") == 0
        assert decode_int64("0" * 4999 + "1") == 1

    def test_too_many_digits_rejected(self) -> None:
        # Longer than the interpreter's int() digit limit.
        assert decode_int64("9" * 5000) is None
        assert decode_int64("-" + "1" * 20) is None

    @pytest.mark.parametrize("text", ["", "abc", "7x", "1.5", " 1", "1_000", "-"])
    def test_non_numeric_rejected(self, text: str) -> None:
        assert ValueKind.INT.decode(text) is None


class TestDecimal:
    def test_fraction(self) -> None:
        assert ValueKind.DECIMAL.decode("3.14") == Decimal("3.14")

    def test_integer_text(self) -> None:
        assert ValueKind.DECIMAL.decode("10") == Decimal(10)

    def test_leading_dot(self) -> None:
        assert ValueKind.DECIMAL.decode(".5") == Decimal("0.5")

    def test_exponent(self) -> None:
        assert ValueKind.DECIMAL.decode("2.5E-3") == Decimal("0.0025")

    def test_precision_kept(self) -> None:
        value = ValueKind.DECIMAL.decode("0.10000000000000000000001")
        assert value == Decimal("0.10000000000000000000001")

    @pytest.mark.parametrize("text", ["", "abc", "NaN", "Infinity", "1.2.3", "e5"])
    def test_non_numeric_rejected(self, text: str) -> None:
        assert ValueKind.DECIMAL.decode(text) is None


class TestHexLegacy:
    """The legacy mode never decodes: it parses '0x...' text as base 10."""

    @pytest.mark.parametrize("text", ["ff", "FF", "10", "0x10", "0", "", "zz"])
    def test_always_rejected(self, text: str) -> None:
        assert ValueKind.HEX.decode(text) is None
        assert decode_hex(text, HexMode.LEGACY) is None

    def test_is_default(self) -> None:
        assert ValueKind.HEX.decode("10") == decode_hex("10", HexMode.LEGACY)


class TestHexBase16:
    def test_digits(self) -> None:
        assert decode_hex("ff", HexMode.BASE16) == 255
        assert decode_hex("DeadBeef", HexMode.BASE16) == 0xDEADBEEF

    def test_prefix(self) -> None:
        assert decode_hex("0x1f", HexMode.BASE16) == 31
        assert decode_hex("0X1F", HexMode.BASE16) == 31

    def test_twos_complement(self) -> None:
        assert decode_hex("8000000000000000", HexMode.BASE16) == INT64_MIN
        assert decode_hex("7fffffffffffffff", HexMode.BASE16) == INT64_MAX

    @pytest.mark.parametrize("text", ["", "0x", "g", "-1", "1" * 17])
    def test_rejected(self, text: str) -> None:
        assert decode_hex(text, HexMode.BASE16) is None

    def test_via_kind(self) -> None:
        assert ValueKind.HEX.decode("a", HexMode.BASE16) == 10

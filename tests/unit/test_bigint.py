"""
Тесты для BigInt — целое произвольной точности

Проверяемые инварианты:
1. Нормализованная форма уникальна (канонический ноль: sign=+1, digits=(0,))
2. Конструкторы принимают только корректный формат
3. Арифметика совпадает с эталонным Python int
4. Деление усекается к нулю, остаток сохраняет знак делимого
5. Immutability
"""

import dataclasses
import random

import pytest

from dragonfmt.core.errors import ConversionError, DivisionByZero, InvalidArgument, InvalidFormat
from dragonfmt.core.math.bigint import MACHINE_INT_MAX, MACHINE_INT_MIN, BigInt


def big(n: int) -> BigInt:
    """BigInt из Python int (через десятичную строку, без 32-bit ограничения)."""
    return BigInt.from_decimal_string(str(n))


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Эталон: деление с усечением к нулю, остаток со знаком делимого."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestFromBinaryString:
    """Тесты from_binary_string / to_binary_string."""

    def test_plain_digits(self):
        assert BigInt.from_binary_string("110010110").to_binary_string() == "110010110"

    def test_explicit_plus_sign(self):
        assert BigInt.from_binary_string("+11001").to_binary_string() == "11001"

    def test_negative_with_leading_zeros(self):
        """Ведущие нули отбрасываются, знак сохраняется."""
        assert BigInt.from_binary_string("-01011").to_binary_string() == "-1011"

    def test_zero_is_canonical(self):
        """Любая запись нуля даёт канонический ноль."""
        for text in ("0", "000", "-0", "+00"):
            value = BigInt.from_binary_string(text)
            assert value.sign == 1
            assert value.digits == (0,)
            assert value.to_binary_string() == "0"

    def test_digits_are_lsb_first(self):
        assert BigInt.from_binary_string("110").digits == (0, 1, 1)

    @pytest.mark.parametrize("text", ["", "+", "-", "12", "1 0", "0b101", "1-0", "--1"])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormat, match="invalid binary string"):
            BigInt.from_binary_string(text)

    @pytest.mark.parametrize("value", [None, 101, 1.0, b"101"])
    def test_non_string_rejected(self, value):
        with pytest.raises(InvalidFormat):
            BigInt.from_binary_string(value)


class TestFromDecimalString:
    """Тесты from_decimal_string / to_decimal_string."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("99328", "99328"),
            ("-399", "-399"),
            ("+32", "32"),
            ("007", "7"),
            ("-0", "0"),
            ("0", "0"),
        ],
    )
    def test_round_trip(self, text, expected):
        assert BigInt.from_decimal_string(text).to_decimal_string() == expected

    def test_large_value(self):
        text = "1234567890123456789012345678901234567890"
        value = BigInt.from_decimal_string(text)
        assert value.to_decimal_string() == text
        assert value.to_binary_string() == format(int(text), "b")

    def test_matches_python_binary_representation(self):
        for n in (1, 2, 10, 255, 1024, -77, 2**64 + 3):
            assert big(n).to_binary_string() == format(n, "b")

    @pytest.mark.parametrize("text", ["", "+", "abc", "1.5", "1e3", " 12", "12 ", "0x10"])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormat, match="invalid decimal string"):
            BigInt.from_decimal_string(text)


class TestFromMachineInteger:
    """Тесты from_machine_integer (signed 32-bit precondition)."""

    def test_small_values(self):
        assert BigInt.of(0).is_zero()
        assert BigInt.of(42).to_decimal_string() == "42"
        assert BigInt.of(-42).to_decimal_string() == "-42"

    def test_fraction_truncated_toward_zero(self):
        assert BigInt.of(3.9).to_decimal_string() == "3"
        assert BigInt.of(-3.9).to_decimal_string() == "-3"

    def test_range_boundaries_accepted(self):
        assert int(BigInt.of(MACHINE_INT_MAX)) == 2**31 - 1
        assert int(BigInt.of(MACHINE_INT_MIN)) == -(2**31)

    def test_two_pow_31_rejected(self):
        """2^31 выходит за signed 32-bit диапазон convenience-конструктора."""
        with pytest.raises(InvalidArgument, match="32-bit"):
            BigInt.of(2**31)

        with pytest.raises(InvalidArgument, match="32-bit"):
            BigInt.of(-(2**31) - 1)

    def test_large_values_available_via_decimal_string(self):
        assert int(big(2**31)) == 2**31

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidArgument, match="finite"):
            BigInt.of(value)

    @pytest.mark.parametrize("value", ["5", None, True])
    def test_non_number_rejected(self, value):
        with pytest.raises(InvalidArgument):
            BigInt.of(value)


class TestNormalization:
    """Тесты нормализации и immutability."""

    def test_high_zeros_stripped(self):
        assert BigInt(1, (1, 0, 0)).digits == (1,)

    def test_negative_zero_becomes_positive(self):
        value = BigInt(-1, (0, 0))
        assert value.sign == 1
        assert value == BigInt.zero()

    def test_invalid_sign(self):
        with pytest.raises(InvalidArgument, match="sign"):
            BigInt(0, (1,))

    def test_invalid_digit(self):
        with pytest.raises(InvalidArgument, match="binary digits"):
            BigInt(1, (1, 2))

    def test_frozen(self):
        value = BigInt.of(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.sign = -1

    def test_operations_do_not_mutate_operands(self):
        a, b = big(12345), big(-678)
        _ = a + b, a * b, a.divmod(b), a.shift_left(3)
        assert int(a) == 12345
        assert int(b) == -678

    def test_hashable(self):
        assert len({BigInt.of(3), big(3), BigInt.from_binary_string("11")}) == 1


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestAdd:
    """Тесты add / subtract."""

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("101", "10", "111"),
            ("111", "1", "1000"),
            ("0", "1010", "1010"),
            ("1111", "1111", "11110"),
        ],
    )
    def test_same_sign(self, left, right, expected):
        result = BigInt.from_binary_string(left).add(BigInt.from_binary_string(right))
        assert result.to_binary_string() == expected

    def test_opposite_signs_equal_magnitude_is_canonical_zero(self):
        result = BigInt.from_binary_string("-101").add(BigInt.from_binary_string("101"))
        assert result.is_zero()
        assert result.sign == 1

    def test_opposite_signs(self):
        assert BigInt.from_binary_string("1000").add(
            BigInt.from_binary_string("-1")
        ).to_binary_string() == "111"
        assert int(BigInt.of(3).add(BigInt.of(-10))) == -7

    def test_subtract(self):
        assert int(BigInt.of(3) - BigInt.of(10)) == -7
        assert int(BigInt.of(-3) - BigInt.of(-10)) == 7

    def test_against_python_int(self):
        rng = random.Random(20140321)
        for _ in range(200):
            a = rng.randint(-(10**30), 10**30)
            b = rng.randint(-(10**30), 10**30)
            assert int(big(a) + big(b)) == a + b
            assert int(big(a) - big(b)) == a - b


class TestMultiply:
    """Тесты multiply."""

    def test_zero_short_circuit(self):
        assert (big(10**20) * BigInt.zero()).is_zero()
        assert (BigInt.zero() * big(-5)).is_zero()

    def test_sign_is_product_of_signs(self):
        assert int(BigInt.of(7) * BigInt.of(-6)) == -42
        assert int(BigInt.of(-7) * BigInt.of(-6)) == 42

    def test_against_python_int(self):
        rng = random.Random(7)
        for _ in range(100):
            a = rng.randint(-(10**25), 10**25)
            b = rng.randint(-(10**12), 10**12)
            assert int(big(a) * big(b)) == a * b


class TestDivide:
    """Тесты divide / modulo / divmod."""

    @pytest.mark.parametrize(
        "a, b",
        [(7, 2), (-7, 2), (7, -2), (-7, -2), (6, 3), (1, 5), (0, 5), (-1, 5), (2**70 + 1, 3)],
    )
    def test_truncation_toward_zero(self, a, b):
        quotient, remainder = big(a).divmod(big(b))
        assert (int(quotient), int(remainder)) == trunc_divmod(a, b)
        assert int(big(a).divide(big(b))) == trunc_divmod(a, b)[0]
        assert int(big(a).modulo(big(b))) == trunc_divmod(a, b)[1]

    def test_against_python_int(self):
        rng = random.Random(1996)
        for _ in range(100):
            a = rng.randint(-(10**30), 10**30)
            b = rng.choice([-1, 1]) * rng.randint(1, 10**15)
            quotient, remainder = big(a).divmod(big(b))
            assert (int(quotient), int(remainder)) == trunc_divmod(a, b)

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero, match="divide"):
            BigInt.of(5).divide(BigInt.zero())

        with pytest.raises(DivisionByZero):
            BigInt.of(5).modulo(BigInt.zero())

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            BigInt.of(1).divmod(BigInt.zero())


class TestPowAndShift:
    """Тесты pow / shift_left / power_of_two."""

    def test_pow(self):
        assert int(BigInt.of(2).pow(52)) == 2**52
        assert int(BigInt.of(10).pow(30)) == 10**30
        assert int(BigInt.of(-3).pow(3)) == -27
        assert int(BigInt.of(12345).pow(0)) == 1

    def test_pow_accepts_bigint_exponent(self):
        assert int(BigInt.of(2).pow(BigInt.of(10))) == 1024

    def test_negative_exponent_rejected(self):
        with pytest.raises(InvalidArgument, match="negative exponent"):
            BigInt.of(2).pow(-1)

    def test_shift_left(self):
        assert int(BigInt.of(5).shift_left(3)) == 40
        assert int(BigInt.of(-5).shift_left(1)) == -10
        assert BigInt.zero().shift_left(10).is_zero()

    @pytest.mark.parametrize("count", [1.0, "2", None, True])
    def test_shift_count_must_be_integer(self, count):
        with pytest.raises(InvalidArgument, match="shift count"):
            BigInt.of(5).shift_left(count)

    def test_negative_shift_rejected(self):
        with pytest.raises(InvalidArgument, match="negative shift"):
            BigInt.of(5).shift_left(-1)

    def test_power_of_two(self):
        assert int(BigInt.power_of_two(0)) == 1
        assert int(BigInt.power_of_two(1074)) == 2**1074

        with pytest.raises(InvalidArgument):
            BigInt.power_of_two(-1)


# =============================================================================
# ТЕСТЫ: Сравнения, биты, текст
# =============================================================================


class TestComparisons:
    """Сравнения: знак, затем магнитуда."""

    def test_sign_first(self):
        assert BigInt.of(-5).is_lower_than(BigInt.of(3))
        assert BigInt.of(3).is_greater_than(BigInt.of(-3))

    def test_negative_magnitudes(self):
        assert BigInt.of(-5).is_lower_than(BigInt.of(-3))
        assert not BigInt.of(-3).is_lower_than(BigInt.of(-5))

    def test_equality(self):
        assert BigInt.of(17).is_equal(big(17))
        assert not BigInt.of(17).is_equal(BigInt.of(-17))
        assert not BigInt.of(17).is_equal(17)

    def test_lower_or_equal_and_greater_or_equal(self):
        assert BigInt.of(4).is_lower_or_equal(BigInt.of(4))
        assert BigInt.of(4).is_greater_or_equal(BigInt.of(4))
        assert BigInt.of(5).is_greater_or_equal(BigInt.of(4))
        assert not BigInt.of(5).is_lower_or_equal(BigInt.of(4))

    def test_python_operators(self):
        assert BigInt.of(1) < BigInt.of(2) <= BigInt.of(2) < big(2**40)
        assert big(-(2**40)) < BigInt.zero()
        assert sorted([BigInt.of(3), BigInt.of(-8), BigInt.of(0)]) == [
            BigInt.of(-8),
            BigInt.of(0),
            BigInt.of(3),
        ]

    def test_against_python_int(self):
        rng = random.Random(42)
        for _ in range(100):
            a = rng.randint(-1000, 1000)
            b = rng.randint(-1000, 1000)
            assert big(a).is_lower_than(big(b)) == (a < b)
            assert big(a).is_greater_or_equal(big(b)) == (a >= b)


class TestBitAt:
    """Тесты bit_at."""

    def test_bits(self):
        value = BigInt.from_binary_string("1011")
        assert [value.bit_at(i) for i in range(4)] == [1, 1, 0, 1]

    def test_out_of_range_is_zero(self):
        value = BigInt.from_binary_string("1011")
        assert value.bit_at(100) == 0
        assert value.bit_at(-1) == 0

    @pytest.mark.parametrize("index", [1.0, "1", None])
    def test_non_integer_index(self, index):
        with pytest.raises(InvalidArgument, match="index"):
            BigInt.of(3).bit_at(index)


class TestTextConversion:
    """Тесты to_decimal_string / str / repr / int."""

    def test_zero(self):
        assert BigInt.zero().to_decimal_string() == "0"
        assert BigInt.zero().to_binary_string() == "0"

    def test_negative_prefix(self):
        assert BigInt.of(-10).to_decimal_string() == "-10"
        assert BigInt.of(-10).to_binary_string() == "-1010"

    def test_large_power_of_two(self):
        assert BigInt.power_of_two(1074).to_decimal_string() == str(2**1074)

    def test_dunder_conversions(self):
        value = big(-123456789012345678901234567890)
        assert str(value) == "-123456789012345678901234567890"
        assert repr(value) == "BigInt(-123456789012345678901234567890)"
        assert int(value) == -123456789012345678901234567890

    def test_is_even(self):
        assert BigInt.of(10).is_even()
        assert not BigInt.of(-7).is_even()
        assert BigInt.zero().is_even()


class TestErrorTaxonomy:
    """Иерархия ошибок."""

    def test_hierarchy(self):
        assert issubclass(InvalidFormat, ConversionError)
        assert issubclass(InvalidFormat, ValueError)
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(DivisionByZero, ZeroDivisionError)
        assert issubclass(DivisionByZero, ConversionError)

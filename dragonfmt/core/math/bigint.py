"""
BigInt — целое число произвольной точности

Модуль реализует знаковое целое неограниченной величины, на котором построены
все точные (rational) вычисления генератора цифр:
- Конструирование из двоичной строки, десятичной строки и machine integer
- Сложение / вычитание / умножение (shift-and-add)
- Деление и остаток (binary long division, truncation toward zero)
- Сравнения и конвертация в двоичную / десятичную строку

ПРЕДСТАВЛЕНИЕ:
    sign ∈ {+1, -1}
    digits — кортеж двоичных цифр (0/1), least-significant first,
    без старших нулей. Канонический ноль: sign=+1, digits=(0,).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализованная форма уникальна для каждого значения
2. Значения immutable: каждая операция возвращает новый BigInt
3. Деление на ноль → DivisionByZero (никогда не возникает внутри алгоритмов)
"""

import math
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Final

from dragonfmt.core.errors import DivisionByZero, InvalidArgument, InvalidFormat

# =============================================================================
# CONSTANTS
# =============================================================================

# Диапазон convenience-конструктора from_machine_integer (signed 32-bit)
MACHINE_INT_MIN: Final[int] = -(2**31)
MACHINE_INT_MAX: Final[int] = 2**31 - 1

_BINARY_PATTERN: Final = re.compile(r"[+-]?[01]+")
_DECIMAL_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# MAGNITUDE HELPERS (LSB-first digit lists)
# =============================================================================


def _normalize(digits) -> list[int]:
    """Убирает старшие нули; пустой или нулевой список → [0]."""
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return [0]
    return list(digits[:end])


def _compare_magnitudes(left, right) -> int:
    """
    Сравнение двух НОРМАЛИЗОВАННЫХ магнитуд.

    Returns:
        < 0 если left < right, 0 если равны, > 0 если left > right
    """
    if len(left) != len(right):
        return len(left) - len(right)

    for i in range(len(left) - 1, -1, -1):
        if left[i] != right[i]:
            return left[i] - right[i]

    return 0


def _add_magnitudes(left, right) -> list[int]:
    if len(left) < len(right):
        left, right = right, left

    result = []
    carry = 0
    for i in range(len(left)):
        total = left[i] + (right[i] if i < len(right) else 0) + carry
        result.append(total & 1)
        carry = total >> 1

    if carry:
        result.append(carry)

    return result


def _subtract_magnitudes(larger, smaller) -> list[int]:
    """larger - smaller; larger обязан быть >= smaller по магнитуде."""
    result = []
    borrow = 0
    for i in range(len(larger)):
        difference = larger[i] - (smaller[i] if i < len(smaller) else 0) - borrow
        if difference < 0:
            difference += 2
            borrow = 1
        else:
            borrow = 0
        result.append(difference)

    assert borrow == 0, "subtrahend magnitude exceeds minuend"
    return result


def _multiply_magnitudes(left, right) -> list[int]:
    # Итерируем по битам более короткого множителя
    if len(right) > len(left):
        left, right = right, left

    result = [0]
    partial = list(left)
    for bit in right:
        if bit:
            result = _add_magnitudes(result, partial)
        # partial + partial = 2 * partial = сдвиг на один разряд
        partial.insert(0, 0)

    return result


def _divide_magnitudes(dividend, divisor) -> tuple[list[int], list[int]]:
    """
    Long division двух НОРМАЛИЗОВАННЫХ магнитуд.

    Делитель выравнивается по старшему разряду делимого, затем
    compare-and-subtract на каждой позиции сдвига.

    Returns:
        (quotient, remainder) — оба нормализованы
    """
    shift = len(dividend) - len(divisor)
    if shift < 0:
        return [0], list(dividend)

    quotient = [0] * (shift + 1)
    remainder = list(dividend)

    for position in range(shift, -1, -1):
        aligned = [0] * position + list(divisor)
        if _compare_magnitudes(remainder, aligned) >= 0:
            remainder = _normalize(_subtract_magnitudes(remainder, aligned))
            quotient[position] = 1

    return _normalize(quotient), remainder


def _split_sign(text: str) -> tuple[int, str]:
    if text[0] in "+-":
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


# =============================================================================
# BIGINT
# =============================================================================


@total_ordering
@dataclass(frozen=True)
class BigInt:
    """
    Immutable знаковое целое произвольной точности.

    Примеры:
        >>> BigInt.from_decimal_string("-1234").to_binary_string()
        '-10011010010'
        >>> (BigInt.of(7) * BigInt.of(-6)).to_decimal_string()
        '-42'
    """

    sign: int
    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise InvalidArgument(f"sign must be +1 or -1, got {self.sign!r}")

        digits = _normalize(self.digits)
        if any(d not in (0, 1) for d in digits):
            raise InvalidArgument(f"binary digits must be 0 or 1, got {self.digits!r}")

        object.__setattr__(self, "digits", tuple(digits))
        if digits == [0]:
            object.__setattr__(self, "sign", 1)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigInt":
        return cls(1, (0,))

    @classmethod
    def one(cls) -> "BigInt":
        return cls(1, (1,))

    @classmethod
    def power_of_two(cls, exponent: int) -> "BigInt":
        """2^exponent для exponent >= 0."""
        if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 0:
            raise InvalidArgument(f"exponent must be a non-negative integer, got {exponent!r}")
        return cls(1, (0,) * exponent + (1,))

    @classmethod
    def from_binary_string(cls, text: str) -> "BigInt":
        """
        Конструирование из двоичной строки: '00110', '+11001', '-01101'.

        Raises:
            InvalidFormat: если строка не соответствует [+-]?[01]+
        """
        if not isinstance(text, str) or not _BINARY_PATTERN.fullmatch(text):
            raise InvalidFormat(f"invalid binary string: {text!r}")

        sign, body = _split_sign(text)
        # least significant bit has index 0
        return cls(sign, tuple(int(c) for c in reversed(body)))

    @classmethod
    def from_decimal_string(cls, text: str) -> "BigInt":
        """
        Конструирование из десятичной строки: '99328', '-399', '+32'.

        Raises:
            InvalidFormat: если строка не соответствует [+-]?[0-9]+
        """
        if not isinstance(text, str) or not _DECIMAL_PATTERN.fullmatch(text):
            raise InvalidFormat(f"invalid decimal string: {text!r}")

        sign, body = _split_sign(text)

        result = cls.zero()
        for character in body:
            result = result.multiply(_DECIMAL_DIGITS[10]).add(_DECIMAL_DIGITS[int(character)])

        return result.change_sign(sign)

    @classmethod
    def from_machine_integer(cls, number: int | float) -> "BigInt":
        """
        Конструирование из machine integer.

        Дробная часть отбрасывается (truncation toward zero).
        Precondition: значение в диапазоне signed 32-bit
        [MACHINE_INT_MIN, MACHINE_INT_MAX]. Для больших значений используйте
        from_decimal_string / from_binary_string.

        Raises:
            InvalidArgument: не число, NaN/Inf или значение вне 32-bit диапазона
        """
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            raise InvalidArgument(f"number expected, got {number!r}")

        if not math.isfinite(number):
            raise InvalidArgument(f"finite number expected, got {number!r}")

        value = int(number)
        if not MACHINE_INT_MIN <= value <= MACHINE_INT_MAX:
            raise InvalidArgument(
                f"machine integer {value} outside signed 32-bit range "
                f"[{MACHINE_INT_MIN}, {MACHINE_INT_MAX}]"
            )

        return cls.from_decimal_string(str(value))

    of = from_machine_integer

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.digits == (0,)

    def is_positive(self) -> bool:
        return self.sign == 1 and not self.is_zero()

    def is_negative(self) -> bool:
        return self.sign == -1 and not self.is_zero()

    def is_even(self) -> bool:
        return self.digits[0] == 0

    def change_sign(self, new_sign: int) -> "BigInt":
        if new_sign not in (1, -1):
            raise InvalidArgument(f"invalid sign: {new_sign!r}")
        if new_sign == self.sign:
            return self
        return BigInt(new_sign, self.digits)

    def negate(self) -> "BigInt":
        return self.change_sign(-self.sign)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "BigInt") -> "BigInt":
        if self.sign == other.sign:
            return BigInt(self.sign, tuple(_add_magnitudes(self.digits, other.digits)))

        cmp = _compare_magnitudes(self.digits, other.digits)
        if cmp == 0:
            return BigInt.zero()

        bigger, smaller = (self, other) if cmp > 0 else (other, self)
        difference = _subtract_magnitudes(bigger.digits, smaller.digits)
        return BigInt(bigger.sign, tuple(difference))

    def subtract(self, other: "BigInt") -> "BigInt":
        return self.add(other.negate())

    def multiply(self, other: "BigInt") -> "BigInt":
        if self.is_zero() or other.is_zero():
            return BigInt.zero()

        product = _multiply_magnitudes(self.digits, other.digits)
        return BigInt(self.sign * other.sign, tuple(product))

    def divmod(self, other: "BigInt") -> tuple["BigInt", "BigInt"]:
        """
        Деление с остатком.

        Quotient усекается к нулю и получает произведение знаков,
        остаток сохраняет знак делимого.

        Raises:
            DivisionByZero: если other == 0
        """
        if other.is_zero():
            raise DivisionByZero(f"attempt to divide {self.to_decimal_string()} by zero")

        quotient, remainder = _divide_magnitudes(self.digits, other.digits)
        return (
            BigInt(self.sign * other.sign, tuple(quotient)),
            BigInt(self.sign, tuple(remainder)),
        )

    def divide(self, other: "BigInt") -> "BigInt":
        return self.divmod(other)[0]

    def modulo(self, other: "BigInt") -> "BigInt":
        return self.divmod(other)[1]

    def pow(self, exponent: "int | BigInt") -> "BigInt":
        """
        Возведение в неотрицательную степень (square-and-multiply).

        Raises:
            InvalidArgument: если exponent отрицательный
        """
        n = int(exponent)
        if n < 0:
            raise InvalidArgument(f"negative exponent: {n}")

        result = BigInt.one()
        base = self
        while n:
            if n & 1:
                result = result.multiply(base)
            n >>= 1
            if n:
                base = base.multiply(base)

        return result

    def shift_left(self, count: int) -> "BigInt":
        """Умножение на 2^count добавлением младших нулевых разрядов."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidArgument(f"shift count must be an integer, got {count!r}")
        if count < 0:
            raise InvalidArgument(f"negative shift: {count}")
        if self.is_zero():
            return self
        return BigInt(self.sign, (0,) * count + self.digits)

    # -------------------------------------------------------------------------
    # Comparisons
    # -------------------------------------------------------------------------

    def is_equal(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return False
        return self.sign == other.sign and self.digits == other.digits

    def is_lower_than(self, other: "BigInt") -> bool:
        if self.sign != other.sign:
            return self.sign < other.sign

        cmp = _compare_magnitudes(self.digits, other.digits)
        return cmp > 0 if self.is_negative() else cmp < 0

    def is_lower_or_equal(self, other: "BigInt") -> bool:
        return self.is_lower_than(other) or self.is_equal(other)

    def is_greater_than(self, other: "BigInt") -> bool:
        return other.is_lower_than(self)

    def is_greater_or_equal(self, other: "BigInt") -> bool:
        return other.is_lower_or_equal(self)

    # -------------------------------------------------------------------------
    # Bits & text
    # -------------------------------------------------------------------------

    def bit_at(self, index: int) -> int:
        """
        Двоичная цифра с индексом index (0 = least significant).

        Returns:
            0/1; 0 если index вне диапазона

        Raises:
            InvalidArgument: если index не integer
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgument(f"index must be an integer, got {index!r}")

        if index < 0 or index >= len(self.digits):
            return 0
        return self.digits[index]

    def _sign_prefix(self) -> str:
        return "-" if self.is_negative() else ""

    def to_binary_string(self) -> str:
        return self._sign_prefix() + "".join(str(d) for d in reversed(self.digits))

    def to_decimal_string(self) -> str:
        # Double-dabble: проходим биты от старшего, decimal = decimal * 2 + bit
        decimal = [0]
        for bit in reversed(self.digits):
            carry = bit
            for i in range(len(decimal)):
                value = decimal[i] * 2 + carry
                decimal[i] = value % 10
                carry = value // 10
            if carry:
                decimal.append(carry)

        return self._sign_prefix() + "".join(str(d) for d in reversed(decimal))

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __add__(self, other: "BigInt") -> "BigInt":
        return self.add(other)

    def __sub__(self, other: "BigInt") -> "BigInt":
        return self.subtract(other)

    def __mul__(self, other: "BigInt") -> "BigInt":
        return self.multiply(other)

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.is_lower_than(other)

    def __int__(self) -> int:
        return int(self.to_binary_string(), 2)

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_decimal_string()})"


# Десятичные цифры 0..10 в двоичном виде (для from_decimal_string)
_DECIMAL_DIGITS: Final[list[BigInt]] = [
    BigInt.from_binary_string(format(d, "b")) for d in range(11)
]

"""
IEEE-754 Decomposer — bit-exact разбор double

Извлекает {sign, exponent, mantissa} из 64-bit double, используя только
точные float-операции (умножение / деление на 2):
- Экспонента находится повторным удвоением/делением пополам, БЕЗ логарифмов
  (log2 даёт ошибку округления на границах binade)
- Denormal числа получают искусственный неявный бит перед нормализацией
- NaN и ±Infinity отображаются в sentinel-экспоненту 2047

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decompose(-0.0).sign == 1, decompose(0.0).sign == 0
2. decompose(NaN): exponent == 2047, mantissa == все единицы
3. decompose(±Inf): exponent == 2047, mantissa == 0
4. compose(decompose(x)) == x бит в бит для всех не-NaN x
"""

import math

from dragonfmt.core.domain.double_bits import (
    DENORMAL_EXPONENT,
    EXPONENT_BIAS,
    EXPONENT_SPECIAL,
    HIDDEN_BIT,
    MANTISSA_BITS,
    MANTISSA_MASK,
    DoubleBits,
)
from dragonfmt.core.errors import InvalidArgument
from dragonfmt.core.math.bigint import BigInt


# =============================================================================
# FIELD EXTRACTION
# =============================================================================


def get_sign(number: float) -> int:
    """
    Знаковый бит: 0 для положительных и +0, 1 для отрицательных и -0.

    Для нуля знак различается через math.copysign (в Python 1/x для нуля
    бросает ZeroDivisionError).
    """
    if number > 0:
        return 0
    if number < 0:
        return 1
    return 0 if math.copysign(1.0, number) > 0 else 1


def exact_log2(number: float) -> int:
    """
    Точный floor(log2(|number|)) для конечного ненулевого number.

    Находит целое e, такое что 1 <= |number| / 2^e < 2.
    """
    number = abs(number)
    exponent = 0

    if number >= 1:
        while number >= 2:
            number /= 2
            exponent += 1
    else:
        while number < 1:
            number *= 2
            exponent -= 1

    return exponent


def get_exponent(number: float) -> int:
    """11-bit biased exponent."""
    if number == 0:
        return 0

    if not math.isfinite(number):
        return EXPONENT_SPECIAL

    # Для denormal чисел real_exponent + bias отрицательный
    return max(0, exact_log2(number) + EXPONENT_BIAS)


def get_mantissa(number: float) -> int:
    """52-bit stored fraction (без неявной единицы)."""
    if math.isnan(number):
        return MANTISSA_MASK

    if math.isinf(number) or number == 0:
        return 0

    number = abs(number)
    log2 = exact_log2(number)

    if log2 <= -EXPONENT_BIAS:
        # Denormal: добавляем искусственную единицу, она не меняет биты мантиссы
        number += 2.0 ** (1 - EXPONENT_BIAS)
        log2 = 1 - EXPONENT_BIAS

    # number в форме 1.01001110111…
    number /= 2.0**log2

    # × 2^52 даёт целое с теми же битами (включая ведущую единицу)
    number *= 2.0**MANTISSA_BITS

    # убираем ведущую единицу
    number -= 2.0**MANTISSA_BITS

    return int(number)


# =============================================================================
# PUBLIC API
# =============================================================================


def as_double(number: float) -> float:
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise InvalidArgument(f"float expected, got {number!r}")
    try:
        return float(number)
    except OverflowError as e:
        raise InvalidArgument(f"integer {number} is out of double range") from e


def decompose(number: float) -> DoubleBits:
    """
    Разбор double на битовые поля.

    Args:
        number: float (int приводится к float)

    Returns:
        DoubleBits

    Raises:
        InvalidArgument: если number не число или int вне диапазона double

    Examples:
        >>> decompose(8.0)
        DoubleBits(sign=0, exponent=1026, mantissa=0)
        >>> decompose(-0.0).sign
        1
    """
    number = as_double(number)
    return DoubleBits(
        sign=get_sign(number),
        exponent=get_exponent(number),
        mantissa=get_mantissa(number),
    )


def compose(bits: DoubleBits) -> float:
    """Обратная операция: DoubleBits → float."""
    if bits.exponent == EXPONENT_SPECIAL:
        value = math.nan if bits.mantissa else math.inf
    elif bits.exponent == 0:
        value = math.ldexp(bits.mantissa, DENORMAL_EXPONENT)
    else:
        value = math.ldexp(bits.mantissa + HIDDEN_BIT, bits.exponent + DENORMAL_EXPONENT - 1)

    return math.copysign(value, -1.0 if bits.sign else 1.0)


def split_significand(bits: DoubleBits) -> tuple[BigInt, int]:
    """
    Точное представление конечного double: |x| = f × 2^e.

    Для denormal чисел e = -1074 и неявный бит не добавляется,
    для нормализованных e = exponent - 1075 и f = mantissa + 2^52.

    Raises:
        InvalidArgument: для NaN/Infinity
    """
    if not bits.is_finite():
        raise InvalidArgument(f"finite double expected, got {bits!r}")

    if bits.exponent == 0:
        f, e = bits.mantissa, DENORMAL_EXPONENT
    else:
        f, e = bits.mantissa + HIDDEN_BIT, bits.exponent + DENORMAL_EXPONENT - 1

    return BigInt.from_binary_string(format(f, "b")), e

"""
Fixed-Precision Renderer — десятичная запись double с заданным числом знаков

Два пути:
- to_fixed_string: кратчайшие цифры (shortest_digits), разбитые по k на
  integer / fraction части. Если precision длиннее естественной дроби —
  дополнение нулями. Если precision отбрасывает цифры — решение об округлении
  принимается по ТОЧНОМУ хранимому значению (exact path), поэтому
  to_fixed_string(3.55, 1) == "3.5" (хранится 3.54999…).
- to_fixed_string_exact: точное long division r/s на нужную глубину плюс одна
  lookahead-цифра (half-up). Поддерживает произвольную precision.

Округление: half-up по первой отброшенной цифре, перенос справа налево через
дробную и целую части; при переполнении добавляется ведущая 1.

NaN → "NaN", ±Infinity → "Inf" / "-Inf" (тексты из RenderConfig).
"""

import logging
import math
from typing import Final

from dragonfmt.core.domain.digits import DecimalParts
from dragonfmt.core.errors import InvalidArgument
from dragonfmt.core.math.bigint import BigInt
from dragonfmt.core.math.ieee754 import as_double, decompose, split_significand
from dragonfmt.render.config import DEFAULT_RENDER_CONFIG, RenderConfig
from dragonfmt.render.shortest import shortest_digits

logger = logging.getLogger(__name__)

_TEN: Final[BigInt] = BigInt.of(10)


# =============================================================================
# HELPERS
# =============================================================================


def validate_precision(precision: int) -> int:
    """
    Raises:
        InvalidArgument: если precision не целое >= 0
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidArgument(f"precision must be an integer, got {precision!r}")
    if precision < 0:
        raise InvalidArgument(f"precision must be >= 0, got {precision}")
    return precision


def non_finite_text(number: float, config: RenderConfig) -> str | None:
    """Sentinel-строка для NaN/±Infinity, None для конечных значений."""
    if math.isnan(number):
        return config.nan_text
    if math.isinf(number):
        return config.inf_text if number > 0 else "-" + config.inf_text
    return None


def round_up(
    integer_digits: tuple[int, ...], fraction_digits: tuple[int, ...]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Прибавляет единицу последнего разряда с переносом.

    Перенос идёт справа налево через дробные цифры, затем через целые;
    при переполнении старшего разряда добавляется ведущая 1.

    Examples:
        >>> round_up((9, 9), (9,))
        ((1, 0, 0), (0,))
    """
    integer = list(integer_digits)
    fraction = list(fraction_digits)
    carry = 1

    for digits in (fraction, integer):
        for i in range(len(digits) - 1, -1, -1):
            if not carry:
                break
            digits[i] += carry
            if digits[i] >= 10:
                digits[i] -= 10
                carry = 1
            else:
                carry = 0

    if carry:
        integer.insert(0, 1)

    return tuple(integer), tuple(fraction)


def round_decimal_parts(parts: DecimalParts, precision: int) -> DecimalParts:
    """
    Приведение дробной части к precision цифрам.

    Короче precision — дополнение нулями справа. Длиннее — усечение и
    half-up по первой отброшенной цифре.
    """
    fraction = parts.fraction_digits

    if len(fraction) <= precision:
        padding = (0,) * (precision - len(fraction))
        return DecimalParts(parts.sign, parts.integer_digits, fraction + padding)

    integer, kept = parts.integer_digits, fraction[:precision]
    if fraction[precision] >= 5:
        integer, kept = round_up(integer, kept)

    return DecimalParts(parts.sign, integer, kept)


# =============================================================================
# DIGIT SOURCES
# =============================================================================


def shortest_decimal_parts(number: float) -> DecimalParts:
    """Кратчайшие цифры number, разбитые на целую и дробную части."""
    sequence = shortest_digits(number)
    digits = sequence.digits
    k = sequence.k

    if k < 0:
        return DecimalParts(sequence.sign, (0,), (0,) * (-k) + digits)

    if k > len(digits):
        digits = digits + (0,) * (k - len(digits))

    return DecimalParts(sequence.sign, digits[:k] or (0,), digits[k:])


def exact_decimal_parts(number: float, precision: int, round_last: bool = True) -> DecimalParts:
    """
    Точные цифры number: целая часть и ровно precision дробных цифр.

    number = r / s вычисляется точно в BigInt; каждая дробная цифра —
    (remainder × 10) div s.

    Args:
        round_last: True — одна lookahead-цифра и half-up округление
            последней цифры; False — усечение (scientific renderer
            округляет сам, после нормализации)

    Raises:
        InvalidArgument: для NaN/Infinity, некорректной precision
    """
    validate_precision(precision)
    bits = decompose(number)
    f, e = split_significand(bits)

    if e >= 0:
        s = BigInt.one()
        integer_part, remainder = f.shift_left(e), BigInt.zero()
    else:
        s = BigInt.power_of_two(-e)
        integer_part, remainder = f.divmod(s)

    fraction = []
    for _ in range(precision + 1 if round_last else precision):
        digit, remainder = (remainder * _TEN).divmod(s)
        fraction.append(int(digit))

    integer = tuple(int(c) for c in integer_part.to_decimal_string())
    parts = DecimalParts(bits.sign, integer, tuple(fraction))
    if round_last:
        return round_decimal_parts(parts, precision)
    return parts


# =============================================================================
# RENDERERS
# =============================================================================


def to_fixed_string(
    number: float,
    precision: int | None = None,
    config: RenderConfig | None = None,
) -> str:
    """
    Десятичная запись number.

    Args:
        number: double
        precision: количество цифр после точки; None — кратчайшая запись
        config: конфигурация (default: DEFAULT_RENDER_CONFIG)

    Returns:
        Строка; "NaN" / "Inf" / "-Inf" для не-finite; "-0" для минус нуля

    Raises:
        InvalidArgument: некорректная precision или не-число

    Examples:
        >>> to_fixed_string(math.pi)
        '3.141592653589793'
        >>> to_fixed_string(0.1, 3)
        '0.100'
        >>> to_fixed_string(3.55, 1)
        '3.5'
    """
    config = config or DEFAULT_RENDER_CONFIG
    number = as_double(number)

    text = non_finite_text(number, config)
    if text is not None:
        return text

    if precision is not None:
        validate_precision(precision)

    parts = shortest_decimal_parts(number)
    if precision is None:
        return parts.to_string()

    if len(parts.fraction_digits) <= precision:
        return round_decimal_parts(parts, precision).to_string()

    # Отбрасываются значащие цифры: округляем по хранимому двоичному значению
    logger.debug(
        "to_fixed_string(%r, %d): %d shortest fraction digits, using exact division",
        number,
        precision,
        len(parts.fraction_digits),
    )
    return to_fixed_string_exact(number, precision, config)


def to_fixed_string_exact(
    number: float,
    precision: int | None = None,
    config: RenderConfig | None = None,
) -> str:
    """
    Десятичная запись number точным делением на precision цифр.

    Половина единицы последнего разряда округляется вверх (lookahead >= 5).

    Args:
        number: double
        precision: количество цифр после точки (default: config.default_precision)
        config: конфигурация (default: DEFAULT_RENDER_CONFIG)

    Examples:
        >>> to_fixed_string_exact(0.1, 20)
        '0.10000000000000000555'
        >>> to_fixed_string_exact(2.5, 0)
        '3'
    """
    config = config or DEFAULT_RENDER_CONFIG
    if precision is None:
        precision = config.default_precision
    validate_precision(precision)
    number = as_double(number)

    text = non_finite_text(number, config)
    if text is not None:
        return text

    return exact_decimal_parts(number, precision).to_string()

"""
Scientific-Notation Renderer — запись d.ddd…e±XX

Нормализует число к одной ведущей цифре и десятичной экспоненте, используя
точные цифры exact_decimal_parts(round_last=False), затем округляет до
precision цифр после точки тем же half-up правилом, что и fixed renderer.

Оценка порядка через log10 может ошибаться на единицу у степеней 10,
поэтому точных цифр запрашивается с запасом; сама экспонента берётся из
точных цифр, а не из оценки.

Перенос при округлении может превратить ведущую группу в две цифры
(9.999 → 10.00): тогда экспонента увеличивается на 1, а лишняя цифра
сдвигается обратно в дробную часть.
"""

import logging
import math

from dragonfmt.core.domain.digits import DecimalParts
from dragonfmt.core.errors import InvalidArgument
from dragonfmt.core.math.ieee754 import as_double, get_sign
from dragonfmt.render.config import DEFAULT_RENDER_CONFIG, RenderConfig
from dragonfmt.render.fixed import (
    exact_decimal_parts,
    non_finite_text,
    round_decimal_parts,
    validate_precision,
)

logger = logging.getLogger(__name__)


def _normalized_digits(number: float, precision: int) -> tuple[DecimalParts, int]:
    """
    Ведущая цифра, не менее precision + 1 следующих цифр и экспонента.

    Returns:
        (DecimalParts с одной целой цифрой, экспонента)
    """
    magnitude = abs(number)

    if magnitude == 0:
        return DecimalParts(get_sign(number), (0,), (0,) * precision), 0

    if magnitude >= 1.0:
        estimate = math.floor(math.log10(magnitude))
        # +1 lookahead-цифра, +1 запас на ошибку оценки estimate
        fraction_needed = max(0, precision - estimate) + 2

        parts = exact_decimal_parts(number, fraction_needed, round_last=False)
        exponent = len(parts.integer_digits) - 1
        digits = parts.integer_digits + parts.fraction_digits
        return DecimalParts(parts.sign, digits[:1], digits[1:]), exponent

    leading_zeros = math.floor(-math.log10(magnitude))
    # +1 ведущая цифра, +1 lookahead, +1 запас на ошибку оценки
    parts = exact_decimal_parts(number, leading_zeros + precision + 3, round_last=False)

    first = next(i for i, d in enumerate(parts.fraction_digits) if d != 0)
    digits = parts.fraction_digits[first:]
    return DecimalParts(parts.sign, digits[:1], digits[1:]), -(first + 1)


def format_exponent(exponent_char: str, exponent: int, min_digits: int) -> str:
    """'e', 5, 2 → 'e+05'; 'E', -300, 2 → 'E-300'."""
    sign = "-" if exponent < 0 else "+"
    return f"{exponent_char}{sign}{abs(exponent):0{min_digits}d}"


def to_scientific_string(
    exponent_char: str,
    number: float,
    precision: int | None = None,
    config: RenderConfig | None = None,
) -> str:
    """
    Научная запись number с precision цифрами после точки.

    Args:
        exponent_char: символ экспоненты ('e' или 'E')
        number: double
        precision: цифр после точки (default: config.default_precision)
        config: конфигурация (default: DEFAULT_RENDER_CONFIG)

    Returns:
        '1.234560e+00'; при precision == 0 точка не ставится: '3e+01'

    Raises:
        InvalidArgument: exponent_char не один символ, некорректная precision

    Examples:
        >>> to_scientific_string("e", 9.999, 2)
        '1.00e+01'
        >>> to_scientific_string("E", 0.001)
        '1.000000E-03'
    """
    config = config or DEFAULT_RENDER_CONFIG

    if not isinstance(exponent_char, str) or len(exponent_char) != 1:
        raise InvalidArgument(f"exponent_char must be a single character, got {exponent_char!r}")

    if precision is None:
        precision = config.default_precision
    validate_precision(precision)
    number = as_double(number)

    text = non_finite_text(number, config)
    if text is not None:
        return text

    normalized, exponent = _normalized_digits(number, precision)
    mantissa = round_decimal_parts(normalized, precision)

    if len(mantissa.integer_digits) > 1:
        # 9.99 → 10.0: экспонента +1, вторая цифра уходит в дробную часть
        logger.debug("to_scientific_string(%r, %d): carry into exponent %d", number, precision, exponent)
        exponent += 1
        shifted = mantissa.integer_digits[1:] + mantissa.fraction_digits
        mantissa = DecimalParts(mantissa.sign, mantissa.integer_digits[:1], shifted[:precision])

    return mantissa.to_string() + format_exponent(exponent_char, exponent, config.exponent_min_digits)

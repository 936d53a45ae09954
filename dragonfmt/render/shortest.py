"""
Shortest-Digit Generator — free-format печать double (Steele & White / Dragon4)

Steele, White, "How to Print Floating-Point Numbers Accurately", PLDI 1990.
Burger, Dybvig, "Printing Floating-Point Numbers Quickly and Accurately", PLDI 1996.

Double представляется точной дробью r/s с асимметричными границами ошибки
mplus / mminus (половина ULP вверх / вниз). Цифры генерируются по одной, пока
остаток не попадёт в интервал, внутри которого любое десятичное значение
округляется обратно в тот же double.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Round-trip: float(0.d1…dn × 10^k) == x бит в бит
2. Shortest: никакая более короткая последовательность не даёт round-trip
3. Чётная мантисса → границы интервала включаются (ties-to-even при парсинге),
   нечётная → строгие неравенства
4. Цикл завершается не более чем за MAX_SHORTEST_DIGITS итераций
"""

import logging
from typing import Final

from dragonfmt.core.domain.digits import DigitSequence
from dragonfmt.core.errors import InvalidArgument
from dragonfmt.core.math.bigint import BigInt
from dragonfmt.core.math.ieee754 import decompose, split_significand

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Интервал mplus + mminus покрывает одну единицу s не позже 17-й цифры:
# 10^16 > 2^53, поэтому 17 значащих цифр достаточно для любого double
MAX_SHORTEST_DIGITS: Final[int] = 17

_ONE: Final[BigInt] = BigInt.one()
_TWO: Final[BigInt] = BigInt.of(2)
_FOUR: Final[BigInt] = BigInt.of(4)
_TEN: Final[BigInt] = BigInt.of(10)


# =============================================================================
# SCALING
# =============================================================================


def initial_fraction(
    f: BigInt, e: int, lower_boundary_is_closer: bool
) -> tuple[BigInt, BigInt, BigInt, BigInt]:
    """
    x = f × 2^e как r/s и половины расстояний до соседних double.

    На границе binade (f = 2^52) ULP вниз вдвое меньше ULP вверх,
    поэтому mminus = mplus / 2.

    Returns:
        (r, s, mplus, mminus)
    """
    if e >= 0:
        if not lower_boundary_is_closer:
            return f.shift_left(e + 1), _TWO, BigInt.power_of_two(e), BigInt.power_of_two(e)
        return f.shift_left(e + 2), _FOUR, BigInt.power_of_two(e + 1), BigInt.power_of_two(e)

    if not lower_boundary_is_closer:
        return f.shift_left(1), BigInt.power_of_two(1 - e), _ONE, _ONE
    return f.shift_left(2), BigInt.power_of_two(2 - e), _TWO, _ONE


def ceil10exp(r: BigInt, mplus: BigInt, s: BigInt) -> int:
    """
    Минимальное k, такое что (r + mplus) / s <= 10^k.

    Вычисляется повторным умножением на 10 (без логарифмов).
    """
    k = 0
    upper = r + mplus

    if upper <= s:
        while upper <= s:
            upper = upper * _TEN
            k -= 1
        k += 1
    else:
        while s < upper:
            s = s * _TEN
            k += 1

    return k


def _propagate_carry(digits: list[int], k: int) -> tuple[list[int], int]:
    """Нормализация транзитной цифры 10 после финального инкремента."""
    while digits and digits[-1] == 10:
        digits.pop()
        if digits:
            digits[-1] += 1
        else:
            # 0.(10) × 10^k == 0.1 × 10^(k+1)
            digits.append(1)
            k += 1

    return digits, k


# =============================================================================
# GENERATOR
# =============================================================================


def shortest_digits(number: float) -> DigitSequence:
    """
    Кратчайшая десятичная последовательность, дающая round-trip к number.

    Args:
        number: конечный double

    Returns:
        DigitSequence: 0.d1…dn × 10^k со знаком исходного double;
        для ±0 — пустые digits и k = 0

    Raises:
        InvalidArgument: для NaN/Infinity и не-чисел

    Examples:
        >>> shortest_digits(0.3)
        DigitSequence(digits=(3,), k=0, sign=0)
        >>> shortest_digits(-1234.5).digit_string()
        '12345'
    """
    bits = decompose(number)

    if not bits.is_finite():
        raise InvalidArgument(f"finite double expected, got {number!r}")

    if bits.is_zero():
        return DigitSequence(digits=(), k=0, sign=bits.sign)

    include_ends = bits.mantissa % 2 == 0
    lower_boundary_is_closer = bits.mantissa == 0 and bits.exponent > 1

    f, e = split_significand(bits)
    r, s, mplus, mminus = initial_fraction(f, e, lower_boundary_is_closer)

    k = ceil10exp(r, mplus, s)
    if k >= 0:
        s = s * _TEN.pow(k)
    else:
        scale = _TEN.pow(-k)
        r, mplus, mminus = r * scale, mplus * scale, mminus * scale

    logger.debug("shortest_digits(%r): e=%d k=%d include_ends=%s", number, e, k, include_ends)

    digits: list[int] = []
    while True:
        assert len(digits) < MAX_SHORTEST_DIGITS, (
            f"digit generation for {number!r} exceeded {MAX_SHORTEST_DIGITS} digits"
        )

        digit, r = (r * _TEN).divmod(s)
        digits.append(int(digit))
        mplus = mplus * _TEN
        mminus = mminus * _TEN

        if include_ends:
            low = r <= mminus
            high = s <= r + mplus
        else:
            low = r < mminus
            high = s < r + mplus

        if low or high:
            break

    if high and not low:
        digits[-1] += 1
    elif low and high and s < r.shift_left(1):
        # Ближе к верхнему кандидату: 2r > s
        digits[-1] += 1

    digits, k = _propagate_carry(digits, k)

    return DigitSequence(digits=tuple(digits), k=k, sign=bits.sign)

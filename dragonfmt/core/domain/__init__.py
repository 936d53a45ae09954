"""
Domain models and value objects.

Contains the value types exchanged between the decomposer, the digit
generator and the renderers.
"""

from dragonfmt.core.domain.conversion import ConversionKind, FloatFormat
from dragonfmt.core.domain.digits import DecimalParts, DigitSequence
from dragonfmt.core.domain.double_bits import (
    DENORMAL_EXPONENT,
    EXPONENT_BIAS,
    EXPONENT_BITS,
    EXPONENT_SPECIAL,
    HIDDEN_BIT,
    MANTISSA_BITS,
    MANTISSA_MASK,
    DoubleBits,
)

__all__ = [
    # IEEE-754 constants
    "MANTISSA_BITS",
    "EXPONENT_BITS",
    "EXPONENT_BIAS",
    "EXPONENT_SPECIAL",
    "MANTISSA_MASK",
    "HIDDEN_BIT",
    "DENORMAL_EXPONENT",
    # Models
    "DoubleBits",
    "DigitSequence",
    "DecimalParts",
    "ConversionKind",
    "FloatFormat",
]

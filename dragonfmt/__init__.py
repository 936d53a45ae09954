"""
dragonfmt — exact conversion of IEEE-754 doubles to decimal text.

Public interface consumed by formatting / scanning layers:
    decompose, shortest_digits, to_fixed_string, to_fixed_string_exact,
    to_scientific_string
"""

from dragonfmt.core.domain import ConversionKind, DigitSequence, DoubleBits, FloatFormat
from dragonfmt.core.errors import (
    ContractViolation,
    ConversionError,
    DivisionByZero,
    InvalidArgument,
    InvalidFormat,
)
from dragonfmt.core.math import BigInt, compose, decompose
from dragonfmt.render import (
    FloatRenderer,
    RenderConfig,
    shortest_digits,
    to_fixed_string,
    to_fixed_string_exact,
    to_scientific_string,
)

__version__ = "0.3.0"

__all__ = [
    # Conversions
    "decompose",
    "compose",
    "shortest_digits",
    "to_fixed_string",
    "to_fixed_string_exact",
    "to_scientific_string",
    # Types
    "BigInt",
    "DoubleBits",
    "DigitSequence",
    "ConversionKind",
    "FloatFormat",
    "FloatRenderer",
    "RenderConfig",
    # Errors
    "ConversionError",
    "InvalidFormat",
    "InvalidArgument",
    "DivisionByZero",
    "ContractViolation",
]

"""
Core math modules для dragonfmt

Целые произвольной точности и bit-exact разбор IEEE-754 double.
"""

# Arbitrary-Precision Integer
from dragonfmt.core.math.bigint import (
    MACHINE_INT_MAX,
    MACHINE_INT_MIN,
    BigInt,
)

# IEEE-754 Decomposer
from dragonfmt.core.math.ieee754 import (
    as_double,
    compose,
    decompose,
    exact_log2,
    get_exponent,
    get_mantissa,
    get_sign,
    split_significand,
)

__all__ = [
    # BigInt: Constants
    "MACHINE_INT_MIN",
    "MACHINE_INT_MAX",
    # BigInt: Types
    "BigInt",
    # IEEE-754: Functions
    "as_double",
    "compose",
    "decompose",
    "exact_log2",
    "get_exponent",
    "get_mantissa",
    "get_sign",
    "split_significand",
]

"""
Contract Validation Module

JSON Schema контракты payload'ов, которыми dragonfmt обменивается с внешними
слоями форматирования и сканирования.
"""

from .validators import (
    DIGIT_SEQUENCE_CONTRACT,
    DOUBLE_BITS_CONTRACT,
    PayloadContract,
    load_schema,
    validate_digit_sequence,
    validate_double_bits,
)

__all__ = [
    # Contracts
    "PayloadContract",
    "DOUBLE_BITS_CONTRACT",
    "DIGIT_SEQUENCE_CONTRACT",
    # Functions
    "load_schema",
    "validate_double_bits",
    "validate_digit_sequence",
]

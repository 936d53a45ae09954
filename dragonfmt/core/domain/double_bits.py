"""
DoubleBits — поля IEEE-754 double

Immutable Pydantic модель {sign, exponent, mantissa}, извлечённая из 64-bit
double bit-exactly. Это payload интерфейса decompose(), который потребляют
внешние слои форматирования (контракт double_bits.json).
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from dragonfmt.core.contracts.validators import validate_double_bits

# =============================================================================
# IEEE-754 BINARY64 CONSTANTS
# =============================================================================

MANTISSA_BITS: Final[int] = 52
EXPONENT_BITS: Final[int] = 11

# Смещение экспоненты: real_exponent = biased_exponent - EXPONENT_BIAS
EXPONENT_BIAS: Final[int] = 1023

# Sentinel экспоненты для NaN и ±Infinity
EXPONENT_SPECIAL: Final[int] = 2**EXPONENT_BITS - 1

# Все 52 бита мантиссы; для NaN мантисса = MANTISSA_MASK
MANTISSA_MASK: Final[int] = 2**MANTISSA_BITS - 1

# Неявный старший бит нормализованных чисел
HIDDEN_BIT: Final[int] = 2**MANTISSA_BITS

# Экспонента младшего бита денормализованных чисел: x = mantissa * 2^-1074
DENORMAL_EXPONENT: Final[int] = 1 - EXPONENT_BIAS - MANTISSA_BITS


class DoubleBits(BaseModel):
    """
    Битовые поля double.

    sign: 0 = положительное / +0, 1 = отрицательное / -0
    exponent: 11-bit biased exponent (0 = ноль/denormal, 2047 = NaN/Inf)
    mantissa: 52-bit дробная часть без неявной единицы
    """

    sign: int = Field(..., ge=0, le=1, description="Знаковый бит")
    exponent: int = Field(..., ge=0, le=EXPONENT_SPECIAL, description="Biased exponent")
    mantissa: int = Field(..., ge=0, le=MANTISSA_MASK, description="Stored fraction bits")

    model_config = {"frozen": True}

    def is_nan(self) -> bool:
        return self.exponent == EXPONENT_SPECIAL and self.mantissa != 0

    def is_infinite(self) -> bool:
        return self.exponent == EXPONENT_SPECIAL and self.mantissa == 0

    def is_finite(self) -> bool:
        return self.exponent != EXPONENT_SPECIAL

    def is_zero(self) -> bool:
        return self.exponent == 0 and self.mantissa == 0

    def is_denormal(self) -> bool:
        return self.exponent == 0 and self.mantissa != 0

    def to_dict(self) -> dict[str, Any]:
        """Payload для внешних слоёв, проверенный контрактом double_bits."""
        return validate_double_bits(self.model_dump())

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "DoubleBits":
        """
        Raises:
            ContractViolation: если payload не соответствует double_bits.json
        """
        return cls(**validate_double_bits(payload))

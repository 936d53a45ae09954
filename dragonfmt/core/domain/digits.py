"""
Digits — десятичные представления double

- DigitSequence: кратчайшая round-trip последовательность цифр 0.d1d2…dn × 10^k
- DecimalParts: разбиение на integer / fraction цифры, с которым работают
  fixed и scientific рендереры
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator

from dragonfmt.core.contracts.validators import validate_digit_sequence


# =============================================================================
# DIGIT SEQUENCE
# =============================================================================


class DigitSequence(BaseModel):
    """
    Кратчайшее десятичное представление double.

    Значение = (-1)^sign × 0.d1d2…dn × 10^k.
    Ноль представлен пустой последовательностью digits и k = 0.
    """

    digits: tuple[int, ...] = Field(default=(), description="Десятичные цифры d1..dn")
    k: int = Field(..., description="Десятичная экспонента")
    sign: int = Field(..., ge=0, le=1, description="Знаковый бит исходного double")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Цифры 0..9, первая цифра ненулевая"""
        for d in v:
            if not 0 <= d <= 9:
                raise ValueError(f"decimal digit out of range: {d}")
        if v and v[0] == 0:
            raise ValueError("leading digit must be nonzero")
        return v

    def is_zero(self) -> bool:
        return not self.digits

    def digit_string(self) -> str:
        return "".join(str(d) for d in self.digits)

    def to_literal(self) -> str:
        """
        Литерал, пригодный для float(): '0.31415e1', '-0.5e-323', '0e0'.
        """
        sign = "-" if self.sign else ""
        if self.is_zero():
            return f"{sign}0e0"
        return f"{sign}0.{self.digit_string()}e{self.k}"

    def to_dict(self) -> dict[str, Any]:
        """
        Payload для внешних слоёв, проверенный контрактом digit_sequence.

        Raises:
            ContractViolation: модель шире контракта (более 17 цифр, |k| > 400)
        """
        return validate_digit_sequence({"digits": list(self.digits), "k": self.k, "sign": self.sign})

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "DigitSequence":
        payload = validate_digit_sequence(payload)
        return cls(digits=tuple(payload["digits"]), k=payload["k"], sign=payload["sign"])


# =============================================================================
# DECIMAL PARTS
# =============================================================================


@dataclass(frozen=True)
class DecimalParts:
    """Знак, цифры целой части (старшая первой) и цифры дробной части."""

    sign: int
    integer_digits: tuple[int, ...]
    fraction_digits: tuple[int, ...]

    def to_string(self) -> str:
        text = "".join(str(d) for d in self.integer_digits)
        if self.fraction_digits:
            text += "." + "".join(str(d) for d in self.fraction_digits)
        return ("-" if self.sign else "") + text

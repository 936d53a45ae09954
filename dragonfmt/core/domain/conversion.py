"""
Conversion — вид конвертации double → текст

ConversionKind — закрытый набор вариантов (tagged enum), FloatFormat —
immutable описание одной конвертации. FloatRenderer диспетчеризует по тегу,
без композиции функций в runtime.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class ConversionKind(str, Enum):
    """Вид конвертации"""

    SHORTEST = "shortest"
    FIXED = "fixed"
    FIXED_EXACT = "fixed_exact"
    SCIENTIFIC = "scientific"


class FloatFormat(BaseModel):
    """
    Описание конвертации.

    precision:
    - SHORTEST: должна отсутствовать
    - FIXED: None — кратчайшая запись, иначе цифры после точки
    - FIXED_EXACT / SCIENTIFIC: None — precision по умолчанию из RenderConfig
    """

    kind: ConversionKind = Field(..., description="Вид конвертации")
    precision: int | None = Field(None, ge=0, description="Цифр после точки")
    exponent_char: str = Field("e", min_length=1, max_length=1, description="Символ экспоненты")

    model_config = {"frozen": True}

    @field_validator("precision")
    @classmethod
    def validate_precision_for_kind(cls, v: int | None, info) -> int | None:
        """SHORTEST не принимает precision"""
        if v is not None and info.data.get("kind") == ConversionKind.SHORTEST:
            raise ValueError("shortest conversion does not accept precision")
        return v

    @classmethod
    def shortest(cls) -> "FloatFormat":
        return cls(kind=ConversionKind.SHORTEST)

    @classmethod
    def fixed(cls, precision: int | None = None) -> "FloatFormat":
        return cls(kind=ConversionKind.FIXED, precision=precision)

    @classmethod
    def fixed_exact(cls, precision: int | None = None) -> "FloatFormat":
        return cls(kind=ConversionKind.FIXED_EXACT, precision=precision)

    @classmethod
    def scientific(cls, precision: int | None = None, exponent_char: str = "e") -> "FloatFormat":
        return cls(kind=ConversionKind.SCIENTIFIC, precision=precision, exponent_char=exponent_char)

"""
RenderConfig — конфигурация рендереров

Единственный источник текстов для NaN/Infinity, precision по умолчанию и
формата экспоненты. Все рендереры принимают config опционально и используют
DEFAULT_RENDER_CONFIG, если он не передан.
"""

from dataclasses import dataclass
from typing import Final

from dragonfmt.core.errors import InvalidArgument


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация рендеринга.

    Параметры sentinel-строк и форматирования экспоненты.
    """

    nan_text: str = "NaN"
    inf_text: str = "Inf"

    # Precision для exact и scientific путей, если она не указана явно
    default_precision: int = 6

    # Минимальное количество цифр экспоненты: 1e+05, 1e-300
    exponent_min_digits: int = 2

    def __post_init__(self) -> None:
        if self.default_precision < 0:
            raise InvalidArgument(
                f"default_precision must be >= 0, got {self.default_precision}"
            )
        if self.exponent_min_digits < 1:
            raise InvalidArgument(
                f"exponent_min_digits must be >= 1, got {self.exponent_min_digits}"
            )


DEFAULT_RENDER_CONFIG: Final[RenderConfig] = RenderConfig()

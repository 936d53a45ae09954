"""
FloatRenderer — диспетчеризация FloatFormat по рендерерам

Каждому варианту ConversionKind соответствует ровно одна функция рендеринга.
"""

from dragonfmt.core.domain.conversion import ConversionKind, FloatFormat
from dragonfmt.core.errors import InvalidArgument
from dragonfmt.render.config import DEFAULT_RENDER_CONFIG, RenderConfig
from dragonfmt.render.fixed import to_fixed_string, to_fixed_string_exact
from dragonfmt.render.scientific import to_scientific_string


class FloatRenderer:
    """Рендерер double → текст с общей конфигурацией.

    Порядок вариантов:
    1. SHORTEST → to_fixed_string без precision
    2. FIXED → to_fixed_string
    3. FIXED_EXACT → to_fixed_string_exact
    4. SCIENTIFIC → to_scientific_string
    """

    def __init__(self, config: RenderConfig | None = None):
        """Инициализация рендерера.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or DEFAULT_RENDER_CONFIG

    def render(self, fmt: FloatFormat, number: float) -> str:
        """
        Рендеринг number согласно fmt.

        Raises:
            InvalidArgument: неизвестный вид конвертации или некорректный number
        """
        if fmt.kind == ConversionKind.SHORTEST:
            return to_fixed_string(number, None, self.config)

        if fmt.kind == ConversionKind.FIXED:
            return to_fixed_string(number, fmt.precision, self.config)

        if fmt.kind == ConversionKind.FIXED_EXACT:
            return to_fixed_string_exact(number, fmt.precision, self.config)

        if fmt.kind == ConversionKind.SCIENTIFIC:
            return to_scientific_string(fmt.exponent_char, number, fmt.precision, self.config)

        raise InvalidArgument(f"unsupported conversion kind: {fmt.kind!r}")

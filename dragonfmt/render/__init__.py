"""
Renderers: double → decimal text.

- shortest: кратчайшие round-trip цифры (Steele & White / Dragon4)
- fixed: фиксированное число цифр после точки
- scientific: научная запись с переносом в экспоненту
- dispatch: FloatRenderer по FloatFormat
"""

from dragonfmt.render.config import DEFAULT_RENDER_CONFIG, RenderConfig
from dragonfmt.render.dispatch import FloatRenderer
from dragonfmt.render.fixed import (
    exact_decimal_parts,
    round_decimal_parts,
    round_up,
    shortest_decimal_parts,
    to_fixed_string,
    to_fixed_string_exact,
)
from dragonfmt.render.scientific import format_exponent, to_scientific_string
from dragonfmt.render.shortest import MAX_SHORTEST_DIGITS, ceil10exp, shortest_digits

__all__ = [
    # Config
    "RenderConfig",
    "DEFAULT_RENDER_CONFIG",
    # Shortest
    "MAX_SHORTEST_DIGITS",
    "ceil10exp",
    "shortest_digits",
    # Fixed
    "exact_decimal_parts",
    "round_decimal_parts",
    "round_up",
    "shortest_decimal_parts",
    "to_fixed_string",
    "to_fixed_string_exact",
    # Scientific
    "format_exponent",
    "to_scientific_string",
    # Dispatch
    "FloatRenderer",
]

"""
Motor de máscaras de entrada.

Formatea lo que el usuario teclea o pega según:
- Tokens incorporados: currency, date, text, number
- Un patrón con marcadores A, a, Z, z, 9 y literales
- Una lista de patrones candidatos elegida por firma de clases
"""

from .base import (
    CharClass,
    MaskToken,
    PLACEHOLDERS,
    FILL_CHAR,
    char_class,
    signature,
    skeleton,
    is_compatible,
    strip_special,
)
from .builtins import (
    format_currency,
    format_date,
    only_digits,
    strip_digits,
)
from .engine import PatternSpec, apply_pattern, mask, select_pattern

__all__ = [
    "CharClass",
    "MaskToken",
    "PLACEHOLDERS",
    "FILL_CHAR",
    "PatternSpec",
    "char_class",
    "signature",
    "skeleton",
    "is_compatible",
    "strip_special",
    "format_currency",
    "format_date",
    "only_digits",
    "strip_digits",
    "apply_pattern",
    "select_pattern",
    "mask",
]

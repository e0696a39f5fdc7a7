"""
Motor de máscaras.

Convierte un valor crudo en la cadena a mostrar según una especificación
de patrón: un token incorporado, un patrón único o una lista ordenada de
patrones candidatos.
"""

from typing import Optional, Sequence, Union

from .base import (
    FILL_CHAR,
    accepts,
    char_class,
    is_compatible,
    is_placeholder,
    render,
    signature,
    skeleton,
    strip_special,
)
from .builtins import builtin_for

PatternSpec = Union[str, Sequence[str]]


def select_pattern(value: str, patterns: Sequence[str]) -> Optional[str]:
    """
    Elige el patrón candidato para un valor.

    Prueba la firma completa contra el esqueleto de cada candidato, en
    orden de declaración. Si ninguno la admite, descarta el último marcador
    y repite hasta que alguno coincida o la firma quede vacía.

    Args:
        value: Valor crudo (puede contener caracteres especiales)
        patterns: Patrones candidatos en orden de preferencia

    Returns:
        Primer patrón compatible, o None si ninguno es alcanzable
    """
    sig = signature(value)
    skeletons = [(p, skeleton(p)) for p in patterns]

    for length in range(len(sig), 0, -1):
        prefix = sig[:length]
        for pattern, skel in skeletons:
            if is_compatible(prefix, skel):
                return pattern
    return None


def apply_pattern(value: str, pattern: str, fill: str = FILL_CHAR) -> str:
    """
    Aplica un patrón a un valor.

    Cada marcador de posición consume un carácter de valor; si falta o es
    de la clase equivocada el hueco se rellena con ``fill``. Los literales
    se insertan sin consumir caracteres. El resultado mide exactamente
    ``len(pattern)``.

    Ejemplo:
        apply_pattern("ab123", "AA-999") -> "AB-123"
    """
    chars = strip_special(value)
    if not chars:
        return ""

    out = []
    pos = 0
    for ph in pattern:
        if not is_placeholder(ph):
            out.append(ph)
            continue
        ch = chars[pos] if pos < len(chars) else ""
        pos += 1
        if ch and accepts(ph, char_class(ch)):
            out.append(render(ph, ch))
        else:
            out.append(fill)
    return "".join(out)[:len(pattern)]


def mask(value: Optional[str], pattern: PatternSpec) -> str:
    """
    Enmascara un valor según una especificación de patrón.

    Función pura y total: nunca lanza por contenido del valor. Si ningún
    candidato es alcanzable, retorna el valor sin caracteres especiales.

    Args:
        value: Valor crudo tecleado o pegado
        pattern: Token incorporado, patrón único o lista de candidatos

    Returns:
        Valor formateado
    """
    value = "" if value is None else str(value)

    if isinstance(pattern, str):
        formatter = builtin_for(pattern)
        if formatter is not None:
            return formatter(value)
        return apply_pattern(value, pattern)

    selected = select_pattern(value, list(pattern))
    if selected is None:
        return strip_special(value)
    return apply_pattern(value, selected)

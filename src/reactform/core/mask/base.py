"""
Definiciones base del motor de máscaras.

Contiene la tabla de marcadores de posición, la clasificación de
caracteres y la construcción de firmas y esqueletos de patrones.
"""

from enum import Enum


class CharClass(str, Enum):
    """Clase de un carácter de valor."""
    LETTER = "L"
    DIGIT = "D"


class MaskToken(str, Enum):
    """Tokens reservados que seleccionan un formateador incorporado."""
    CURRENCY = "currency"
    DATE = "date"
    TEXT = "text"
    NUMBER = "number"


# Marcador -> clases aceptadas y caja forzada (None = sin cambio)
PLACEHOLDERS: dict[str, tuple[frozenset, str | None]] = {
    "A": (frozenset({CharClass.LETTER}), "upper"),
    "a": (frozenset({CharClass.LETTER}), "lower"),
    "Z": (frozenset({CharClass.LETTER, CharClass.DIGIT}), "upper"),
    "z": (frozenset({CharClass.LETTER, CharClass.DIGIT}), "lower"),
    "9": (frozenset({CharClass.DIGIT}), None),
}

DIGITS = "0123456789"

# Relleno de un marcador sin carácter válido
FILL_CHAR = " "


def is_digit(ch: str) -> bool:
    """Dígito ASCII."""
    return ch in DIGITS


def is_letter(ch: str) -> bool:
    return ch.isalpha()


def char_class(ch: str) -> CharClass | None:
    """Clase de un carácter, o None si es un carácter especial."""
    if is_digit(ch):
        return CharClass.DIGIT
    if is_letter(ch):
        return CharClass.LETTER
    return None


def is_placeholder(ch: str) -> bool:
    return ch in PLACEHOLDERS


def strip_special(value: str) -> str:
    """Elimina todo carácter que no sea letra ni dígito."""
    return "".join(ch for ch in value if char_class(ch) is not None)


def signature(value: str) -> tuple[CharClass, ...]:
    """
    Firma de clases de un valor.

    Un marcador por cada carácter de valor, en orden; los caracteres
    especiales no aportan marcador.
    """
    return tuple(cls for cls in map(char_class, value) if cls is not None)


def skeleton(pattern: str) -> str:
    """Marcadores de posición de un patrón, sin sus literales."""
    return "".join(ch for ch in pattern if is_placeholder(ch))


def accepts(placeholder: str, cls: CharClass | None) -> bool:
    """Indica si un marcador de posición admite un carácter de la clase dada."""
    if cls is None:
        return False
    return cls in PLACEHOLDERS[placeholder][0]


def is_compatible(sig: tuple[CharClass, ...], skel: str) -> bool:
    """
    Verifica si una firma completa cabe en el esqueleto de un patrón.

    La firma no puede ser más larga que el esqueleto y cada marcador debe
    ser admitido por el marcador de posición de la misma posición.
    """
    if len(sig) > len(skel):
        return False
    return all(accepts(ph, cls) for cls, ph in zip(sig, skel))


def render(placeholder: str, ch: str) -> str:
    """
    Aplica la caja forzada por el marcador de posición.

    Si el cambio de caja produce más de un carácter (``ß`` -> ``SS``) se
    conserva el original, para que cada hueco ocupe una sola posición.
    """
    case = PLACEHOLDERS[placeholder][1]
    if case == "upper":
        cased = ch.upper()
    elif case == "lower":
        cased = ch.lower()
    else:
        return ch
    return cased if len(cased) == 1 else ch

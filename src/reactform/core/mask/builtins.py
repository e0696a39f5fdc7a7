"""
Formateadores incorporados: moneda, fecha, texto y número.

Se seleccionan con los tokens reservados de MaskToken y tienen
prioridad sobre la lógica genérica de patrones.
"""

from typing import Callable

from .base import DIGITS, MaskToken, is_digit


def only_digits(value: str) -> str:
    """Conserva únicamente los dígitos, en su orden original."""
    return "".join(ch for ch in value if is_digit(ch))


def strip_digits(value: str) -> str:
    """Elimina los dígitos y deja el resto sin cambios."""
    return "".join(ch for ch in value if ch not in DIGITS)


def format_currency(value: str) -> str:
    """
    Formatea un importe a partir de los dígitos tecleados.

    Los dígitos se interpretan como centavos. Separador decimal ``,`` y
    separador de miles ``.``.

    Ejemplo:
        "1050" -> "10,50"
        "100000" -> "1.000,00"
    """
    digits = only_digits(value)
    if not digits:
        return ""
    digits = digits.lstrip("0").rjust(3, "0")
    integer, cents = digits[:-2], digits[-2:]
    groups = []
    while len(integer) > 3:
        groups.insert(0, integer[-3:])
        integer = integer[:-3]
    groups.insert(0, integer)
    return f"{'.'.join(groups)},{cents}"


def format_date(value: str) -> str:
    """
    Formatea una fecha ``dd/mm/yyyy`` a medida que se acumulan dígitos.

    Las barras se insertan tras el 2º y el 4º dígito solo cuando siguen
    más dígitos; todo lo posterior al año se descarta.
    """
    digits = only_digits(value)[:8]
    parts = [digits[:2], digits[2:4], digits[4:]]
    return "/".join(p for p in parts if p)


BUILTIN_FORMATTERS: dict[MaskToken, Callable[[str], str]] = {
    MaskToken.CURRENCY: format_currency,
    MaskToken.DATE: format_date,
    MaskToken.TEXT: strip_digits,
    MaskToken.NUMBER: only_digits,
}


def builtin_for(pattern: object) -> Callable[[str], str] | None:
    """Formateador incorporado para un token, o None."""
    if not isinstance(pattern, str):
        return None
    try:
        return BUILTIN_FORMATTERS[MaskToken(pattern)]
    except ValueError:
        return None

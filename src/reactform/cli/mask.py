"""
Comando CLI para enmascarar valores.
"""

from typing import Annotated

import typer
from rich.text import Text

from reactform.core.mask import mask, select_pattern
from reactform.core.mask.builtins import builtin_for
from reactform.cli.theme import get_console, print_info, print_warning


def mask_value(
    value: Annotated[str, typer.Argument(help="Valor crudo a enmascarar")],
    patterns: Annotated[list[str], typer.Argument(help="Token (currency, date, text, number) o patrones candidatos")],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Muestra el patrón elegido")] = False,
):
    """
    Aplica una máscara a un valor.

    Ejemplo:
        reactform mask 31122024 date
        reactform mask ab123 AA-999
        reactform mask 12345678 999-9999 99999-9999
    """
    if len(patterns) == 1:
        spec = patterns[0]
        if verbose:
            kind = "formateador incorporado" if builtin_for(spec) else "patrón único"
            print_info(f"{kind}: {spec}")
    else:
        spec = patterns
        if verbose:
            selected = select_pattern(value, patterns)
            if selected is None:
                print_warning("Ningún patrón alcanzable: solo se quitan caracteres especiales")
            else:
                print_info(f"Patrón elegido: {selected}")

    # Las comillas conservan los espacios de relleno
    get_console().print(Text(f"\"{mask(value, spec)}\"", style="value"))

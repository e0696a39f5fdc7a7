"""
Paleta de colores y funciones de impresión para la CLI.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


@dataclass
class ColorPalette:
    """Paleta de colores para la terminal."""
    primary: str      # Títulos, destacados
    secondary: str    # Encabezados de tabla
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto atenuado (campos sin editar)
    value: str        # Valores de campos
    border: str


THEME_DEFAULT = ColorPalette(
    primary="#5f87af",
    secondary="#87afaf",
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    info="#5f87af",
    muted="#808080",
    value="#d7af5f",
    border="#5f5f5f",
)


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            cls._console = Console(theme=Theme({
                "primary": p.primary,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "value": f"bold {p.value}",
            }))
        return cls._console


def get_console() -> Console:
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    return CLITheme.get_palette()


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    get_console().print(Text(f"[+] {text}", style=get_palette().success))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    get_console().print(Text(f"[!] {text}", style=get_palette().warning))


def print_error(text: str) -> None:
    """Imprime error."""
    get_console().print(Text(f"[x] {text}", style=get_palette().error))


def print_info(text: str) -> None:
    """Imprime información."""
    get_console().print(Text(f"[i] {text}", style=get_palette().info))

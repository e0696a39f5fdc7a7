"""
Funciones para construir la vista del estado de un formulario.
"""

from typing import Any, Iterable, Optional

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from reactform.cli.theme import get_palette
from reactform.controller import FieldStatus, FormController
from reactform.core.paths import flatten, join_path


STATUS_LABELS = {
    FieldStatus.PRISTINE: ("·", "sin editar"),
    FieldStatus.DIRTY: ("~", "editado"),
    FieldStatus.VALID: ("✓", "válido"),
    FieldStatus.INVALID: ("✗", "inválido"),
}


def format_field_value(value: Any) -> str:
    """Formatea el valor de un campo para mostrar."""
    if value is None or value == "":
        return "-"
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) if value else "-"
    return str(value)


def form_paths(form: FormController, extra: Iterable[str] = ()) -> list[str]:
    """Rutas a mostrar: valores actuales, errores y rutas adicionales, sin repetir."""
    paths = list(flatten(form.get_values()))
    for path in list(form.get_errors()) + [join_path(p) for p in extra]:
        if path not in paths:
            paths.append(path)
    return paths


def build_form_table(form: FormController, title: str = "Formulario", paths: Optional[list[str]] = None) -> Table:
    """Construye la tabla ruta / valor / error / estado."""
    p = get_palette()
    if paths is None:
        paths = form_paths(form)

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )
    table.add_column("Campo", justify="left")
    table.add_column("Valor", justify="left")
    table.add_column("Error", justify="left")
    table.add_column("Estado", justify="center")

    for path in paths:
        status = form.field_status(path)
        icon, label = STATUS_LABELS[status]
        if status == FieldStatus.INVALID:
            status_style = p.error
        elif status == FieldStatus.VALID:
            status_style = p.success
        elif status == FieldStatus.DIRTY:
            status_style = p.warning
        else:
            status_style = p.muted

        value_str = format_field_value(form.get_value(path))
        table.add_row(
            Text(path, style="bold"),
            Text(value_str, style=f"bold {p.value}" if value_str != "-" else p.muted),
            Text(form.error_for(path), style=p.error),
            Text(f"{icon} {label}", style=status_style),
        )

    return table


def build_summary_panel(form: FormController, paths: list[str]) -> Panel:
    """Panel con el conteo de campos inválidos."""
    p = get_palette()
    invalid = sum(1 for path in paths if form.field_status(path) == FieldStatus.INVALID)

    text = Text()
    if invalid:
        text.append(f"  {invalid} campo(s) con error", style=f"bold {p.error}")
    else:
        text.append("  ✓ Sin errores", style=f"bold {p.success}")
    return Panel(text, border_style=p.border, padding=(0, 1))

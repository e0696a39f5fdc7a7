"""
CLI de reactform.

Comandos:
- mask: Aplica una máscara a un valor
- fill: Simula la edición de un formulario definido en YAML
"""

import typer

from reactform.cli.form import fill_form
from reactform.cli.mask import mask_value

app = typer.Typer(
    name="reactform",
    help="Controlador de formularios con validación y máscaras de entrada.",
    no_args_is_help=True,
)

app.command("mask")(mask_value)
app.command("fill")(fill_form)

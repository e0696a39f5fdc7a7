"""
Comando CLI para llenar un formulario definido en YAML.
"""

from typing import Annotated, Optional

import typer
import yaml

from reactform.binding import MemoryContainer
from reactform.config import load_form_config
from reactform.controller import FormController
from reactform.core.paths import flatten
from reactform.cli.display import build_form_table, build_summary_panel, form_paths
from reactform.cli.theme import get_console, print_error, print_success


def _parse_assignment(text: str) -> tuple[str, str]:
    path, sep, value = text.partition("=")
    if not sep or not path:
        raise typer.BadParameter(f"Asignación inválida: '{text}' (use ruta=valor)")
    return path.strip(), value


def fill_form(
    form_file: Annotated[str, typer.Argument(help="Archivo YAML con la definición del formulario")],
    assignments: Annotated[Optional[list[str]], typer.Option("--set", "-s", help="Entrada ruta=valor (repetible)")] = None,
    submit: Annotated[bool, typer.Option("--submit", help="Envía el formulario al final")] = False,
):
    """
    Simula la edición de un formulario y muestra su estado.

    Cada --set se procesa como lo tecleado en el campo: se enmascara si
    el campo tiene patrón y se valida contra el esquema.

    Ejemplo:
        reactform fill cliente.yaml -s telefono=099123456 -s fecha=31122024
        reactform fill cliente.yaml -s nombre=Ana --submit
    """
    submitted: list[dict] = []
    try:
        config = load_form_config(form_file, on_submit=submitted.append)
    except (FileNotFoundError, ValueError, ImportError, AttributeError, yaml.YAMLError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    form = FormController.from_config(config)
    parsed = [_parse_assignment(a) for a in assignments or []]

    paths = list(flatten(form.initial_values))
    paths += [p for p in config.masked if p not in paths]
    paths += [p for p, _ in parsed if p not in paths]
    container = MemoryContainer(paths)

    with form.attach(container):
        for path, raw in parsed:
            container.type(path, raw)
        if submit:
            container.submit()

    console = get_console()
    shown = form_paths(form, extra=paths)
    console.print(build_form_table(form, title=form_file, paths=shown))
    console.print(build_summary_panel(form, shown))

    if submit:
        if submitted:
            print_success("Formulario enviado")
        else:
            print_error("El formulario tiene errores")
            raise typer.Exit(1)

"""Modelos Pydantic para la configuración de formularios."""

import importlib
import warnings
from pathlib import Path
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from reactform.core.mask import MaskToken
from reactform.core.paths import join_path


PatternSpecConfig = Union[str, list[str]]

TOKENS = {t.value for t in MaskToken}


class FormConfig(BaseModel):
    """
    Configuración de un formulario.

    Todos los campos son opcionales:
    - sin schema, toda validación tiene éxito con los valores crudos
    - sin masked, no se aplica ninguna máscara
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    form_schema: Optional[Any] = Field(None, alias="schema", description="Esquema de validación")
    initial_values: dict[str, Any] = Field(default_factory=dict, description="Valores iniciales")
    on_submit: Optional[Callable[[dict], Any]] = Field(None, description="Callback de envío")
    masked: dict[str, PatternSpecConfig] = Field(
        default_factory=dict, description="Ruta de campo -> especificación de patrón"
    )

    @field_validator("initial_values", mode="before")
    @classmethod
    def default_initial_values(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("masked", mode="before")
    @classmethod
    def normalize_mask_paths(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, dict):
            return {join_path(k): spec for k, spec in v.items()}
        return v

    @field_validator("masked")
    @classmethod
    def validate_patterns(cls, v: dict[str, PatternSpecConfig]) -> dict[str, PatternSpecConfig]:
        for path, spec in v.items():
            if not path:
                raise ValueError("La ruta de un campo enmascarado no puede estar vacía")
            if isinstance(spec, str):
                if not spec:
                    raise ValueError(f"Patrón vacío para '{path}'")
                continue
            if not spec:
                raise ValueError(f"Lista de patrones vacía para '{path}'")
            for candidate in spec:
                if not candidate:
                    raise ValueError(f"Patrón candidato vacío para '{path}'")
                if candidate in TOKENS:
                    raise ValueError(
                        f"El token '{candidate}' no puede usarse como candidato ('{path}')"
                    )
        return v


# ============================================================================
# Definiciones de formulario en YAML
# ============================================================================

FORM_FILE_KEYS = {"schema", "initial_values", "masked"}


def import_object(spec: str) -> Any:
    """
    Importa un objeto desde una cadena ``paquete.modulo:Atributo``.

    Raises:
        ValueError: Si la cadena no tiene el formato esperado
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Referencia de esquema inválida: '{spec}' (use modulo:Atributo)")
    obj: Any = importlib.import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


def load_form_config(path: str | Path, on_submit: Optional[Callable[[dict], Any]] = None) -> FormConfig:
    """
    Carga una definición de formulario desde un archivo YAML.

    Formato:
    ```yaml
    schema: "mi_app.forms:ClienteForm"   # opcional
    initial_values:
      nombre: "Ana"
      direccion:
        ciudad: "Montevideo"
    masked:
      telefono: ["9999-9999", "99 9999-9999"]
      fecha: date
    ```

    Args:
        path: Ruta del archivo YAML
        on_submit: Callback opcional de envío

    Returns:
        FormConfig validado
    """
    import yaml

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Archivo no encontrado: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    unknown = sorted(set(data) - FORM_FILE_KEYS)
    if unknown:
        warnings.warn(
            f"Claves desconocidas en {config_path.name}: {', '.join(unknown)}",
            UserWarning,
        )

    schema = data.get("schema")
    if isinstance(schema, str):
        schema = import_object(schema)

    return FormConfig(
        schema=schema,
        initial_values=data.get("initial_values"),
        masked=data.get("masked"),
        on_submit=on_submit,
    )

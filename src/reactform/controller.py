"""
Controlador de estado de formularios.

Mantiene un árbol de valores y un mapa de errores, ambos observables,
sincronizados ante actualizaciones parciales. Toda edición y todo envío
pasan por ``validate``; los campos con patrón registrado se enmascaran
antes de almacenarse.
"""

from collections.abc import Mapping
from copy import deepcopy
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel

from reactform.binding import EVENT_SUBMIT, FIELD_EVENTS, Container, DetachHandle
from reactform.config import FormConfig
from reactform.core.mask import PatternSpec, mask
from reactform.core.paths import (
    PathLike,
    build_tree,
    deep_merge,
    flatten,
    get_in,
    join_path,
    set_in,
    unflatten,
)
from reactform.core.validation import Success, ValidationAdapter, ValidationResult
from reactform.store import Store


class FieldStatus(str, Enum):
    """Estado de un campo."""
    PRISTINE = "pristine"  # Sin editar desde la creación o el último reset
    DIRTY = "dirty"  # Editado después de la última validación
    VALID = "valid"  # Última validación sin error para el campo
    INVALID = "invalid"  # Con mensaje de error


class FormController:
    """
    Controlador de un formulario.

    Args:
        schema: Esquema de validación (ver ValidationAdapter); None la desactiva
        initial_values: Valores iniciales, anidados o con claves con puntos
        on_submit: Callback invocado con los valores normalizados al enviar
        masked: Ruta de campo -> especificación de patrón
    """

    def __init__(
        self,
        schema: Any = None,
        initial_values: Optional[Mapping] = None,
        on_submit: Optional[Callable[[dict], Any]] = None,
        masked: Optional[Mapping] = None,
    ):
        self.config = FormConfig(
            schema=schema,
            initial_values=dict(initial_values or {}),
            on_submit=on_submit,
            masked=dict(masked or {}),
        )
        self.initial_values: dict = unflatten(self.config.initial_values)
        self.on_submit = self.config.on_submit
        self._masked: dict[str, PatternSpec] = self.config.masked
        self._adapter = ValidationAdapter(schema) if schema is not None else None

        self.values: Store[dict] = Store(deepcopy(self.initial_values))
        self.errors: Store[dict[str, str]] = Store({})

        # Rutas editadas desde el último reset / desde la última validación
        self._touched: set[str] = set()
        self._dirty: set[str] = set()

    @classmethod
    def from_config(cls, config: FormConfig) -> "FormController":
        """Crea un controlador desde un FormConfig ya validado."""
        return cls(
            schema=config.form_schema,
            initial_values=config.initial_values,
            on_submit=config.on_submit,
            masked=config.masked,
        )

    # ========================================================================
    # Valores
    # ========================================================================

    def update_field(self, path: PathLike, value: Any) -> None:
        """Escribe un valor en la ruta y limpia su error."""
        key = join_path(path)
        self.values.update(lambda tree: set_in(tree, key, value))
        self.reset_error(key)
        self._touched.add(key)
        self._dirty.add(key)

    def update_fields(self, values: Mapping) -> None:
        """Aplica update_field a cada hoja de un árbol parcial, en orden."""
        for path, value in flatten(values).items():
            self.update_field(path, value)

    def get_value(self, path: PathLike, default: Any = None) -> Any:
        return deepcopy(get_in(self.values.get(), path, default))

    def get_values(self) -> dict:
        """Copia del árbol de valores actual."""
        return deepcopy(self.values.get())

    def pattern_for(self, path: PathLike) -> Optional[PatternSpec]:
        return self._masked.get(join_path(path))

    # ========================================================================
    # Errores
    # ========================================================================

    def set_error(self, path: PathLike, message: str) -> None:
        key = join_path(path)
        self.errors.update(lambda errors: {**errors, key: message})

    def set_errors(self, errors: Mapping[str, str]) -> None:
        """Combina mensajes en el mapa de errores, sobrescribiendo por ruta."""
        patch = {join_path(k): v for k, v in errors.items()}
        self.errors.update(lambda current: {**current, **patch})

    def reset_error(self, path: PathLike) -> None:
        key = join_path(path)
        if key in self.errors.get():
            self.errors.update(lambda errors: {k: v for k, v in errors.items() if k != key})

    def reset_errors(self) -> None:
        self.errors.set({})

    def get_errors(self) -> dict[str, str]:
        return dict(self.errors.get())

    def error_for(self, path: PathLike) -> str:
        """Mensaje de error de un campo, o cadena vacía."""
        return self.errors.get().get(join_path(path)) or ""

    @property
    def is_valid(self) -> bool:
        """True si ningún campo tiene un mensaje de error."""
        return not any(self.errors.get().values())

    # ========================================================================
    # Estado
    # ========================================================================

    def field_status(self, path: PathLike) -> FieldStatus:
        key = join_path(path)
        if self.error_for(key):
            return FieldStatus.INVALID
        if key in self._dirty:
            return FieldStatus.DIRTY
        if key in self._touched:
            return FieldStatus.VALID
        return FieldStatus.PRISTINE

    def reset(self) -> None:
        """Restaura los valores iniciales (copia nueva) y limpia los errores."""
        self._touched.clear()
        self._dirty.clear()
        self.errors.set({})
        self.values.set(deepcopy(self.initial_values))

    # ========================================================================
    # Validación
    # ========================================================================

    def _parse(self, candidate: dict) -> ValidationResult:
        if self._adapter is None:
            return Success(data=candidate)
        return self._adapter.parse(candidate)

    @staticmethod
    def _as_tree(data: Any) -> dict:
        if isinstance(data, BaseModel):
            return data.model_dump()
        if isinstance(data, Mapping):
            return deepcopy(dict(data))
        raise TypeError(f"Los datos normalizados deben ser un mapeo, no {type(data).__name__}")

    def validate(self, values: Optional[Mapping] = None) -> bool:
        """
        Combina valores candidatos y valida el árbol resultante.

        En caso de éxito los datos normalizados por el esquema reemplazan
        a los valores. En caso de fallo los valores quedan con la
        combinación cruda y los errores se reemplazan por los del fallo;
        un fallo sin errores conserva los actuales.

        Args:
            values: Árbol parcial (anidado o con claves con puntos)

        Returns:
            True si el esquema aceptó los datos
        """
        merged = deep_merge(self.values.get(), unflatten(values or {}))
        result = self._parse(merged)
        self._dirty.clear()

        if result.ok:
            self.values.set(self._as_tree(result.data))
            return True

        self.values.set(merged)
        if result.issues:
            self.errors.set(result.as_error_map())
        return False

    # ========================================================================
    # Eventos de la capa de interfaz
    # ========================================================================

    def handle_field_input(self, path: PathLike, raw_value: Any) -> Any:
        """
        Procesa lo tecleado o pegado en un campo.

        Enmascara si hay patrón registrado, actualiza y valida; el error del
        campo editado se limpia de forma optimista hasta la próxima
        validación completa.

        Returns:
            Valor almacenado para el campo
        """
        key = join_path(path)
        pattern = self._masked.get(key)
        value = raw_value if pattern is None else mask(raw_value, pattern)

        self.update_field(key, value)
        self.validate(build_tree(key, value))
        self._dirty.add(key)
        self.set_error(key, "")
        return self.get_value(key)

    def handle_submit(self, snapshot: Optional[Mapping] = None) -> bool:
        """
        Valida la instantánea del formulario e invoca on_submit si es válida.

        Returns:
            True si el envío fue aceptado
        """
        if not self.validate(snapshot):
            return False
        if self.on_submit is not None:
            self.on_submit(self.get_values())
        return True

    # ========================================================================
    # Enlace
    # ========================================================================

    def attach(self, container: Container) -> DetachHandle:
        """
        Enlaza el formulario a un contenedor de la capa de interfaz.

        Siembra los valores iniciales, conecta input/paste de cada campo y
        el envío, y refleja valores y errores en los elementos.
        """
        paths = [join_path(p) for p in container.field_paths()]
        for path, value in flatten(self.initial_values).items():
            container.write(path, value)

        removers = []
        for path in paths:
            for event in FIELD_EVENTS:
                removers.append(container.listen(
                    event, path, lambda raw, key=path: self.handle_field_input(key, raw)
                ))
        removers.append(container.listen(EVENT_SUBMIT, None, self.handle_submit))

        def show_values(tree: dict) -> None:
            flat = flatten(tree)
            for path in paths:
                container.write(path, flat.get(path))

        def show_errors(errors: dict[str, str]) -> None:
            for path in paths:
                container.write_error(path, errors.get(path) or "")

        removers.append(self.values.subscribe(show_values))
        removers.append(self.errors.subscribe(show_errors))
        return DetachHandle(removers)

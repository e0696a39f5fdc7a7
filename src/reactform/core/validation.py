"""
Adaptador de validación.

Envuelve una capacidad de esquema externa y normaliza su resultado a
``Success(data)`` o ``Failure(issues)``, donde cada issue es un par
(ruta, mensaje). Acepta modelos pydantic, TypeAdapter, objetos con
``safe_parse`` y funciones simples.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .paths import FieldPath, PathLike, join_path, to_path

# Clave del ErrorMap para issues sin ruta (errores de todo el formulario)
ROOT_ERROR_KEY = "__root__"


@dataclass(frozen=True)
class Issue:
    """Problema de validación en una ruta."""
    path: FieldPath
    message: str

    @property
    def key(self) -> str:
        """Ruta con puntos, o ROOT_ERROR_KEY si la ruta está vacía."""
        return join_path(self.path) or ROOT_ERROR_KEY

    @classmethod
    def of(cls, path: PathLike, message: Any) -> "Issue":
        return cls(path=to_path(() if path is None else path), message=str(message))


@dataclass(frozen=True)
class Success:
    """Validación exitosa con los datos normalizados por el esquema."""
    data: Any
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """Validación fallida con la lista ordenada de issues."""
    issues: tuple[Issue, ...]
    ok: bool = field(default=False, init=False)

    def as_error_map(self) -> dict[str, str]:
        """ErrorMap de los issues; el último mensaje por ruta prevalece."""
        errors: dict[str, str] = {}
        for issue in self.issues:
            errors[issue.key] = issue.message
        return errors


ValidationResult = Union[Success, Failure]


def _issue_from(item: Any) -> Issue:
    if isinstance(item, Issue):
        return item
    if isinstance(item, (tuple, list)):
        path, message = item
        return Issue.of(path, message)
    return Issue.of(_field(item, "path"), _field(item, "message") or "")


def failure(issues: Sequence[Any]) -> Failure:
    """
    Construye un Failure a partir de issues heterogéneos.

    Acepta Issue, pares (ruta, mensaje) o dicts con claves path/message.
    """
    return Failure(issues=tuple(_issue_from(item) for item in issues))


def _from_pydantic_error(exc: ValidationError) -> Failure:
    return Failure(issues=tuple(
        Issue.of(err.get("loc", ()), err.get("msg", "")) for err in exc.errors()
    ))


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _coerce_result(result: Any) -> ValidationResult:
    """Normaliza el resultado de un safe_parse arbitrario."""
    if isinstance(result, (Success, Failure)):
        return result

    success = _field(result, "success")
    if success is True:
        return Success(data=_field(result, "data"))
    if success is False:
        issues = _field(_field(result, "error"), "issues")
        if issues is None:
            issues = _field(result, "issues") or ()
        return failure(issues)

    raise TypeError(f"Resultado de esquema no reconocido: {type(result).__name__}")


class ValidationAdapter:
    """
    Capacidad de validación normalizada.

    Args:
        schema: Modelo pydantic, TypeAdapter, objeto con safe_parse
            (o safeParse) o función candidate -> ValidationResult
    """

    def __init__(self, schema: Any):
        self.schema = schema
        self._parse = self._resolve(schema)

    @staticmethod
    def _resolve(schema: Any) -> Callable[[Any], Any]:
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            def parse_model(candidate: Any) -> ValidationResult:
                try:
                    return Success(data=schema.model_validate(candidate).model_dump())
                except ValidationError as exc:
                    return _from_pydantic_error(exc)
            return parse_model

        if isinstance(schema, TypeAdapter):
            def parse_adapter(candidate: Any) -> ValidationResult:
                try:
                    return Success(data=schema.dump_python(schema.validate_python(candidate)))
                except ValidationError as exc:
                    return _from_pydantic_error(exc)
            return parse_adapter

        for name in ("safe_parse", "safeParse"):
            method = getattr(schema, name, None)
            if callable(method):
                return method

        if callable(schema):
            return schema

        raise TypeError(f"Esquema no soportado: {type(schema).__name__}")

    def parse(self, candidate: Any) -> ValidationResult:
        """Valida un candidato y retorna el resultado normalizado."""
        return _coerce_result(self._parse(candidate))

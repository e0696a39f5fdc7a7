"""
Núcleo de reactform.

- paths: rutas de campos anidados y árboles de valores
- mask: motor de máscaras de entrada
- validation: adaptador de esquemas de validación
"""

from .paths import (
    FieldPath,
    to_path,
    join_path,
    get_in,
    set_in,
    delete_in,
    flatten,
    unflatten,
    deep_merge,
    build_tree,
)
from .mask import MaskToken, PatternSpec, mask, select_pattern, apply_pattern
from .validation import (
    ROOT_ERROR_KEY,
    Issue,
    Success,
    Failure,
    ValidationResult,
    ValidationAdapter,
    failure,
)

__all__ = [
    # Rutas
    "FieldPath",
    "to_path",
    "join_path",
    "get_in",
    "set_in",
    "delete_in",
    "flatten",
    "unflatten",
    "deep_merge",
    "build_tree",
    # Máscaras
    "MaskToken",
    "PatternSpec",
    "mask",
    "select_pattern",
    "apply_pattern",
    # Validación
    "ROOT_ERROR_KEY",
    "Issue",
    "Success",
    "Failure",
    "ValidationResult",
    "ValidationAdapter",
    "failure",
]

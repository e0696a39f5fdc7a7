"""
reactform - Controlador reactivo de formularios con máscaras de entrada.

Mantiene valores anidados y errores por campo, valida contra un esquema
declarativo y formatea lo que el usuario teclea según patrones.
"""

from reactform.binding import Container, DetachHandle, MemoryContainer
from reactform.config import FormConfig, load_form_config
from reactform.controller import FieldStatus, FormController
from reactform.core.mask import MaskToken, PatternSpec, mask
from reactform.core.validation import (
    ROOT_ERROR_KEY,
    Failure,
    Issue,
    Success,
    ValidationAdapter,
    ValidationResult,
)
from reactform.store import Store

__version__ = "0.1.0"

__all__ = [
    # Controlador
    "FormController",
    "FieldStatus",
    "FormConfig",
    "load_form_config",
    "Store",
    # Máscaras
    "mask",
    "MaskToken",
    "PatternSpec",
    # Validación
    "ValidationAdapter",
    "ValidationResult",
    "Success",
    "Failure",
    "Issue",
    "ROOT_ERROR_KEY",
    # Enlace
    "Container",
    "DetachHandle",
    "MemoryContainer",
]

"""Configuración de pytest para tests de reactform."""

import pytest
from pydantic import BaseModel, Field

from reactform import FormController, MemoryContainer


class Direccion(BaseModel):
    calle: str = Field(..., min_length=1)
    ciudad: str = Field(..., min_length=1)


class Cliente(BaseModel):
    """Esquema de ejemplo con un campo anidado y coerción de tipos."""
    nombre: str = Field(..., min_length=2)
    edad: int = Field(..., ge=18)
    direccion: Direccion
    telefono: str = ""
    fecha: str = ""


@pytest.fixture
def cliente_schema():
    return Cliente


@pytest.fixture
def valid_values():
    """Valores que el esquema Cliente acepta (edad como texto)."""
    return {
        "nombre": "Ana",
        "edad": "30",
        "direccion": {"calle": "Rivera 1234", "ciudad": "Montevideo"},
    }


@pytest.fixture
def initial_values():
    return {"nombre": "Ana", "direccion": {"ciudad": "Montevideo"}}


@pytest.fixture
def form(cliente_schema, initial_values):
    """Formulario con esquema, valores iniciales y máscaras."""
    return FormController(
        schema=cliente_schema,
        initial_values=initial_values,
        masked={"telefono": ["9999-9999", "99 9999-9999"], "fecha": "date"},
    )


@pytest.fixture
def container():
    return MemoryContainer(["nombre", "edad", "direccion.calle", "direccion.ciudad", "telefono", "fecha"])

"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da decodificación estructural y documentación autocontenida (Field) sin
  acoplar el Core a librerías de I/O.
- Campos ausentes o `null` toman su default; números se aceptan como texto.
  Solo una forma incompatible (p.ej. `employees` no es lista) falla.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class EmployeeRecord(BaseModel):
    """Un empleado tal como se muestra en una fila del listado.

    Valor inmutable: dos registros con los mismos campos son iguales.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    name: str = Field(
        default="",
        description="Nombre del empleado.",
    )
    profile: str = Field(
        default="",
        description="Rol o puesto (p.ej. 'Engineer').",
    )

    @field_validator("name", "profile", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def as_row(self) -> tuple[str, str]:
        return (self.name, self.profile)


class EmployeeCollectionResponse(BaseModel):
    """Sobre (envelope) devuelto por el endpoint.

    El orden de `employees` es el orden de visualización.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    message: str = Field(
        default="",
        description="Mensaje de estado enviado por el servidor.",
    )
    employees: list[EmployeeRecord] = Field(
        default_factory=list,
        description="Registros de empleados en orden de visualización.",
    )

    @field_validator("message", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

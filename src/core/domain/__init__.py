"""Modelos, errores y resultados del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) del listado.
- El dominio no conoce HTTP, CLI, ni SDKs: solo empleados y sus fallos.
"""

from core.domain.errors import DecodeError, RosterError, RowIndexError, TransportError
from core.domain.models import EmployeeCollectionResponse, EmployeeRecord
from core.domain.results import LoadResult

__all__ = [
    "DecodeError",
    "EmployeeCollectionResponse",
    "EmployeeRecord",
    "LoadResult",
    "RosterError",
    "RowIndexError",
    "TransportError",
]

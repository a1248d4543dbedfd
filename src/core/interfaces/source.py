"""Contrato de la fuente del listado.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el fetcher HTTP por un stub en tests o por otra fuente
  sin acoplar el controlador a una implementación concreta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmployeeSource(Protocol):
    """Contrato mínimo para obtener el cuerpo crudo del listado.

    Reglas de diseño:
    - `fetch` es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve los bytes una sola vez o lanza `TransportError`, nunca ambos.
    """

    async def fetch(self) -> bytes:
        """Obtiene el cuerpo crudo de la respuesta."""

        ...

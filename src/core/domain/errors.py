"""Errores del dominio.

Taxonomía:
- `TransportError`: la petición no produjo un cuerpo utilizable (red, timeout,
  status no 2xx).
- `DecodeError`: el cuerpo no es JSON con la forma esperada.

Ambos se capturan en su origen y se convierten en un `LoadResult` fallido;
la UI los trata igual, pero los logs conservan la causa.
"""

from __future__ import annotations

from typing import Any


class RosterError(Exception):
    """Base de todos los errores de la aplicación."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TransportError(RosterError):
    """Fallo de transporte al pedir el listado."""

    def __init__(self, url: str, reason: str, *, status_code: int | None = None) -> None:
        message = f"Request to {url} failed: {reason}"
        super().__init__(
            message=message,
            details={"url": url, "reason": reason, "status_code": status_code},
        )
        self.url = url
        self.reason = reason
        self.status_code = status_code


class DecodeError(RosterError):
    """El cuerpo de la respuesta no se pudo decodificar."""

    def __init__(self, reason: str) -> None:
        super().__init__(message=f"Could not decode employee list: {reason}", details={"reason": reason})
        self.reason = reason


class RowIndexError(IndexError):
    """Índice de fila fuera de `[0, count())`."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Row index {index} out of range for {count} rows")
        self.index = index
        self.count = count

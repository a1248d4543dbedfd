"""Resultado explícito de una carga (éxito con valor o fallo con causa)."""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.errors import DecodeError, RosterError, TransportError
from core.domain.models import EmployeeCollectionResponse


@dataclass(frozen=True)
class LoadResult:
    """Exactamente uno de `response` / `error` está presente."""

    response: EmployeeCollectionResponse | None = None
    error: RosterError | None = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            raise ValueError("LoadResult needs exactly one of response or error")

    @classmethod
    def success(cls, response: EmployeeCollectionResponse) -> "LoadResult":
        return cls(response=response)

    @classmethod
    def failure(cls, error: RosterError) -> "LoadResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.response is not None

    @property
    def is_transport_error(self) -> bool:
        return isinstance(self.error, TransportError)

    @property
    def is_decode_error(self) -> bool:
        return isinstance(self.error, DecodeError)

"""Presenter del listado de empleados.

El presenter es el único dueño de la colección de filas (RowCollection):
- se crea vacía,
- se reemplaza completa con `replace_all` (sin merge ni diff),
- la capa de vista la consulta bajo demanda con `count()` y `row_at(i)`.

Solo el hilo que creó el presenter puede mutarlo; el controlador se encarga
de despachar la actualización a ese hilo.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable, Iterable

import structlog

from core.domain.errors import RowIndexError
from core.domain.models import EmployeeRecord

logger = structlog.get_logger(__name__)

ChangeListener = Callable[[tuple[EmployeeRecord, ...]], None]


class PresenterState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class EmployeePresenter:
    def __init__(self) -> None:
        self._rows: tuple[EmployeeRecord, ...] = ()
        self._state = PresenterState.EMPTY
        self._listeners: list[ChangeListener] = []
        self._owner_thread = threading.get_ident()
        self._closed = False

    @property
    def state(self) -> PresenterState:
        return self._state

    @property
    def rows(self) -> tuple[EmployeeRecord, ...]:
        return self._rows

    @property
    def closed(self) -> bool:
        return self._closed

    def add_listener(self, listener: ChangeListener) -> None:
        """Registra un callback que se invoca tras cada `replace_all` (invalidación de vista)."""

        self._listeners.append(listener)

    def replace_all(self, records: Iterable[EmployeeRecord]) -> tuple[EmployeeRecord, ...]:
        """Descarta las filas actuales e instala `records`; devuelve el nuevo estado."""

        if threading.get_ident() != self._owner_thread:
            raise RuntimeError("EmployeePresenter must be mutated from the thread that owns it")
        if self._closed:
            raise RuntimeError("EmployeePresenter is closed")

        self._rows = tuple(records)
        self._state = PresenterState.POPULATED
        logger.debug("rows_replaced", count=len(self._rows))

        for listener in list(self._listeners):
            listener(self._rows)
        return self._rows

    def count(self) -> int:
        return len(self._rows)

    def row_at(self, index: int) -> tuple[str, str]:
        if not 0 <= index < len(self._rows):
            raise RowIndexError(index, len(self._rows))
        return self._rows[index].as_row()

    def close(self) -> None:
        """Marca el presenter como destruido junto con su vista."""

        self._closed = True
        self._listeners.clear()

"""Despacho de callbacks al hilo dueño de la vista.

Por qué aquí:
- El fetch y el decode no asumen en qué hilo corren.
- La mutación del presenter sí debe ocurrir en el hilo dueño; el controlador
  entrega la actualización a un `Dispatcher` y este la ejecuta donde toca.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Dispatcher(Protocol):
    def submit(self, callback: Callable[[], None]) -> None:
        """Programa `callback` en el hilo dueño."""

        ...


class InlineDispatcher(Dispatcher):
    """Ejecuta el callback de inmediato (el llamador ya es el dueño)."""

    def submit(self, callback: Callable[[], None]) -> None:
        callback()


class LoopDispatcher(Dispatcher):
    """Encola el callback en el event loop dueño (thread-safe)."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def submit(self, callback: Callable[[], None]) -> None:
        self._loop.call_soon_threadsafe(callback)

"""Controlador: fetch -> decode -> actualización del presenter.

Este módulo orquesta el único flujo de la app. Mantiene los efectos de UI
fuera de la lógica de carga:
- `load()` no toca el presenter y puede correr en cualquier hilo/loop.
- `start()` hace la carga una sola vez y entrega el resultado al hilo dueño
  a través del `Dispatcher`.

Los fallos (transporte o decodificación) se capturan en su origen y se
devuelven como `LoadResult` fallido; el presenter queda como estaba.
"""

from __future__ import annotations

import structlog

from core.dispatch import Dispatcher, InlineDispatcher
from core.domain.errors import DecodeError, TransportError
from core.domain.results import LoadResult
from core.interfaces.source import EmployeeSource
from core.services.employee_decoder import parse_response
from core.services.employee_presenter import EmployeePresenter

logger = structlog.get_logger(__name__)


class EmployeeController:
    def __init__(
        self,
        presenter: EmployeePresenter,
        source: EmployeeSource,
        *,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self._presenter = presenter
        self._source = source
        self._dispatcher = dispatcher or InlineDispatcher()
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def load(self) -> LoadResult:
        try:
            body = await self._source.fetch()
        except TransportError as exc:
            logger.warning("load_failed", kind="transport", reason=exc.reason, status_code=exc.status_code)
            return LoadResult.failure(exc)

        try:
            response = parse_response(body)
        except DecodeError as exc:
            logger.warning("load_failed", kind="decode", reason=exc.reason)
            return LoadResult.failure(exc)

        logger.info("load_succeeded", employees=len(response.employees), message=response.message)
        return LoadResult.success(response)

    async def start(self) -> LoadResult:
        """Lanza la única carga de esta sesión y despacha el resultado al presenter."""

        if self._started:
            raise RuntimeError("EmployeeController.start() may only be called once")
        self._started = True

        result = await self.load()
        self._dispatcher.submit(lambda: self._deliver(result))
        return result

    def _deliver(self, result: LoadResult) -> None:
        if self._presenter.closed:
            logger.info("late_result_dropped", ok=result.ok)
            return
        if result.response is None:
            return
        self._presenter.replace_all(result.response.employees)

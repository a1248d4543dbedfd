"""Fetcher HTTP del listado de empleados.

Una única petición GET a la URL configurada, sin parámetros ni cuerpo.
No hay reintentos ni backoff: un fallo se reporta tal cual.

Decisión sobre status HTTP:
- Un status no 2xx se trata como fallo de transporte; el cuerpo (HTML o JSON
  de error) nunca llega al decoder.
"""

from __future__ import annotations

import httpx
import structlog

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import TransportError
from core.interfaces.source import EmployeeSource

logger = structlog.get_logger(__name__)


class EmployeeFetcher(EmployeeSource):
    """Obtiene el cuerpo crudo del endpoint de empleados."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._url = url or self._settings.employees_url
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> bytes:
        logger.debug("fetch_started", url=self._url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(self._url)
        except httpx.HTTPError as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.warning("fetch_failed", url=self._url, reason=reason)
            raise TransportError(self._url, reason) from exc

        if not response.is_success:
            reason = f"HTTP {response.status_code}"
            logger.warning("fetch_failed", url=self._url, reason=reason, status_code=response.status_code)
            raise TransportError(self._url, reason, status_code=response.status_code)

        body = response.content
        logger.debug("fetch_succeeded", url=self._url, status_code=response.status_code, size=len(body))
        return body

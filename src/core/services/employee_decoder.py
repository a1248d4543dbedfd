"""Decoder: bytes crudos -> `EmployeeCollectionResponse`.

Dos variantes:
- `parse_response` lanza `DecodeError` con la causa (la usa el controlador
  para distinguir fallos de decodificación de fallos de transporte).
- `decode_response` falla "suave" devolviendo `None` y registra la causa.
"""

from __future__ import annotations

import json

import structlog
from pydantic import ValidationError

from core.domain.errors import DecodeError
from core.domain.models import EmployeeCollectionResponse

logger = structlog.get_logger(__name__)


def parse_response(data: bytes) -> EmployeeCollectionResponse:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"body is not valid UTF-8 ({exc.reason})") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"malformed JSON: {exc.msg} at line {exc.lineno} column {exc.colno}") from exc

    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")

    try:
        return EmployeeCollectionResponse.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DecodeError(
            f"unexpected shape at {location}: {first['msg']} ({exc.error_count()} error(s))"
        ) from exc


def decode_response(data: bytes) -> EmployeeCollectionResponse | None:
    """Decodifica el cuerpo o devuelve `None` si no tiene la forma esperada."""

    try:
        return parse_response(data)
    except DecodeError as exc:
        logger.warning("decode_failed", reason=exc.reason)
        return None

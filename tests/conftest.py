"""Shared fixtures for the employee roster tests."""

from __future__ import annotations

import json

import httpx
import pytest

from core.config import AppSettings
from core.domain.errors import TransportError

ONE_EMPLOYEE_BODY = b'{"message":"ok","employees":[{"name":"Asha","profile":"Engineer"}]}'
EMPTY_BODY = b'{"message":"ok","employees":[]}'
TEST_URL = "https://employees.test/v1/list"


class StubSource:
    """In-memory EmployeeSource returning a fixed body or raising a fixed error."""

    def __init__(self, body: bytes | None = None, error: Exception | None = None) -> None:
        self._body = body
        self._error = error
        self.calls = 0

    async def fetch(self) -> bytes:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._body or b""


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, employees_url=TEST_URL, http_timeout_seconds=2.0)


@pytest.fixture
def three_employees_body():
    payload = {
        "message": "Employees fetched",
        "employees": [
            {"name": "Asha", "profile": "Engineer"},
            {"name": "Ravi", "profile": "Designer"},
            {"name": "Meera", "profile": "Manager"},
        ],
    }
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def refused_source():
    return StubSource(error=TransportError(TEST_URL, "Connection refused"))


def json_transport(body: bytes, status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=body, headers={"Content-Type": "application/json"})

    return httpx.MockTransport(handler)


def refusing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)

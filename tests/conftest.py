from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from employee_engine.api_client import EmployeeApiClient
from employee_engine.settings import ClientSettings

SAMPLE_PAYLOAD: dict[str, Any] = {
    "message": "ok",
    "employees": [
        {"name": "Asha", "profile": "Engineer"},
        {"name": "Ravi", "profile": "Designer"},
    ],
}

TEST_SETTINGS = ClientSettings(
    base_url="https://directory.test/v3/",
    endpoint_path="employees",
    timeout_seconds=5.0,
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(
    requests_seen: list[httpx.Request],
) -> Callable[..., EmployeeApiClient]:
    """Build a client whose transport answers every request with the given response."""

    def _make(
        *,
        status_code: int = 200,
        payload: Any = SAMPLE_PAYLOAD,
        body: bytes | None = None,
        exc: Exception | None = None,
    ) -> EmployeeApiClient:
        def _handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if exc is not None:
                raise exc
            content = body if body is not None else json.dumps(payload).encode("utf-8")
            return httpx.Response(
                status_code,
                content=content,
                headers={"Content-Type": "application/json"},
            )

        return EmployeeApiClient(TEST_SETTINGS, transport=httpx.MockTransport(_handler))

    return _make

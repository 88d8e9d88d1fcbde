"""
HTTP client for the employee list endpoint.

Notes
-----
The client issues exactly one GET per `fetch_employees()` call. There is no
retry and no caching. Every failure is wrapped in `FetchError`.

The coroutine must not be awaited on the UI thread. Callers go through a
`FetchDispatcher` (see `employee_engine.dispatch`).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from employee_engine.data_models import EmployeeListResponse
from employee_engine.errors import FetchError
from employee_engine.settings import ClientSettings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: ClientSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an `httpx.AsyncClient` configured from settings.

    Parameters
    ----------
    settings:
        Client settings (timeout).
    transport:
        Optional transport override. Tests pass an `httpx.MockTransport`.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


def decode_employee_list(payload: Any) -> EmployeeListResponse:
    """
    Validate a decoded JSON document as an employee list.

    Raises
    ------
    FetchError
        If the document does not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise FetchError(f"Unexpected response body: expected a JSON object, got {type(payload).__name__}")
    try:
        return EmployeeListResponse.from_payload(payload)
    except ValidationError as exc:
        raise FetchError(f"Malformed employee list: {exc.error_count()} validation error(s)", cause=exc) from exc


class EmployeeApiClient:
    """Fetches the employee list from the configured endpoint."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings.defaults()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.url

    async def fetch_employees(self) -> EmployeeListResponse:
        """
        Fetch and decode the employee list.

        Returns
        -------
        EmployeeListResponse
            The decoded payload, employees in server order.

        Raises
        ------
        FetchError
            On connectivity problems, malformed URLs, timeouts, non-2xx status codes, or a body
            that is not valid JSON of the expected shape.
        """
        url = self._settings.url
        logger.debug("GET %s", url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Employee list request failed with status %s", exc.response.status_code)
            raise FetchError(
                f"HTTP {exc.response.status_code} {exc.response.reason_phrase} from {url}", cause=exc
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Employee list request failed: %s", exc)
            raise FetchError(f"Request to {url} failed: {exc}", cause=exc) from exc
        except ValueError as exc:
            logger.warning("Employee list response is not valid JSON: %s", exc)
            raise FetchError(f"Response from {url} is not valid JSON", cause=exc) from exc

        try:
            result = decode_employee_list(payload)
        except FetchError:
            logger.warning("Employee list response from %s has an unexpected shape", url)
            raise
        logger.debug("Fetched %d employee(s)", len(result.employees))
        return result


__all__ = ["EmployeeApiClient", "build_async_client", "decode_employee_list"]

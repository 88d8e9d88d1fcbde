"""
View state for the employee list.

Purpose
-------
- Own the single fetch performed for the lifetime of a view.
- Publish `result`, `error`, `loading` and `status` to subscribers.

Notes
-----
State is only written from the thread that owns the view model: directly in
`start_fetch()` / `close()`, and from dispatcher callbacks, which dispatchers
deliver on that same thread. No locking is required.

Fetch lifecycle::

    IDLE --start_fetch()--> IN_FLIGHT --success--> SUCCEEDED
                                      --failure--> FAILED
    any  --close()--------> CLOSED

A second `start_fetch()` is refused in every phase other than IDLE.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, TypeVar

from employee_engine.api_client import EmployeeApiClient
from employee_engine.data_models import EmployeeListResponse
from employee_engine.dispatch import FetchDispatcher
from employee_engine.errors import FetchError
from employee_engine.presentation import DEFAULT_TITLE, status_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Observable(Generic[T]):
    """
    A value whose updates are delivered to registered subscribers.

    Subscribers are called in registration order on every `publish()`, even
    when the new value equals the old one.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None], *, replay: bool = False) -> Callable[[], None]:
        """
        Register `callback` for future updates.

        Parameters
        ----------
        callback:
            Called with each published value.
        replay:
            If True, `callback` is called once immediately with the current value.

        Returns
        -------
        Callable[[], None]
            A function that removes the subscription. Safe to call more than once.
        """
        self._subscribers.append(callback)
        if replay:
            callback(self._value)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def publish(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)


class FetchPhase(str, Enum):
    """Lifecycle phase of the view's single fetch."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CLOSED = "closed"


class EmployeesViewModel:
    """
    View-state holder for the employee list.

    Responsibilities
    ----------------
    - Start the one fetch allowed per view lifetime.
    - Republish the outcome unchanged: a response to `result`, a failure to `error`.
    - Cancel an in-flight fetch on teardown and drop late completions.

    Notes
    -----
    A successful fetch does not clear a previously published error, and a
    failed fetch leaves `result` untouched.
    """

    def __init__(self, client: EmployeeApiClient, dispatcher: FetchDispatcher) -> None:
        self._client = client
        self._dispatcher = dispatcher
        self._phase = FetchPhase.IDLE

        self.result: Observable[EmployeeListResponse | None] = Observable(None)
        self.error: Observable[FetchError | None] = Observable(None)
        self.loading: Observable[bool] = Observable(False)
        self.status: Observable[str] = Observable(DEFAULT_TITLE)

    @property
    def phase(self) -> FetchPhase:
        return self._phase

    def start_fetch(self) -> bool:
        """
        Start the view's fetch.

        Returns
        -------
        bool
            True if a fetch was started. False if one was already started or
            the view model is closed; nothing is published in that case.
        """
        if self._phase is not FetchPhase.IDLE:
            logger.info("Ignoring start_fetch() in phase %s", self._phase.value)
            return False

        self._phase = FetchPhase.IN_FLIGHT
        self.loading.publish(True)
        self._dispatcher.submit(self._client.fetch_employees, self._on_success, self._on_failure)
        return True

    def close(self) -> None:
        """
        Tear down the view state.

        Notes
        -----
        Cancels an in-flight fetch. Any completion delivered afterwards is
        dropped. This method is safe to call multiple times.
        """
        if self._phase is FetchPhase.CLOSED:
            return
        was_in_flight = self._phase is FetchPhase.IN_FLIGHT
        self._phase = FetchPhase.CLOSED
        if was_in_flight:
            logger.info("Cancelling in-flight employee fetch")
            self._dispatcher.cancel()
            self.loading.publish(False)

    def _accepts_completion(self) -> bool:
        if self._phase is FetchPhase.IN_FLIGHT:
            return True
        logger.info("Dropping fetch completion delivered in phase %s", self._phase.value)
        return False

    def _on_success(self, response: EmployeeListResponse) -> None:
        if not self._accepts_completion():
            return
        self._phase = FetchPhase.SUCCEEDED
        try:
            self.result.publish(response)
            self.status.publish(status_text(response.message))
        finally:
            self.loading.publish(False)

    def _on_failure(self, error: FetchError) -> None:
        if not self._accepts_completion():
            return
        self._phase = FetchPhase.FAILED
        try:
            self.error.publish(error)
        finally:
            self.loading.publish(False)


__all__ = ["EmployeesViewModel", "FetchPhase", "Observable"]

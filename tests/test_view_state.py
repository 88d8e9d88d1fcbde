from __future__ import annotations

from typing import Callable

import httpx
import pytest

from employee_engine.api_client import EmployeeApiClient
from employee_engine.data_models import EmployeeListResponse, EmployeeRecord
from employee_engine.dispatch import FailureCallback, FetchJob, InlineDispatcher, SuccessCallback
from employee_engine.errors import FetchError
from employee_engine.presentation import DEFAULT_TITLE, row_fields
from employee_engine.view_state import EmployeesViewModel, FetchPhase, Observable

RESPONSE = EmployeeListResponse(
    message="ok",
    employees=(
        EmployeeRecord(name="Asha", profile="Engineer"),
        EmployeeRecord(name="Ravi", profile="Designer"),
    ),
)


class _ManualDispatcher:
    """Holds submitted jobs until the test completes them."""

    def __init__(self) -> None:
        self.jobs: list[tuple[FetchJob, SuccessCallback, FailureCallback]] = []
        self.cancelled = 0

    def submit(self, job: FetchJob, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        self.jobs.append((job, on_success, on_failure))

    def cancel(self) -> None:
        self.cancelled += 1

    def succeed(self, response: EmployeeListResponse) -> None:
        _, on_success, _ = self.jobs[-1]
        on_success(response)

    def fail(self, error: FetchError) -> None:
        _, _, on_failure = self.jobs[-1]
        on_failure(error)


def _record_events(vm: EmployeesViewModel) -> list[tuple[str, object]]:
    events: list[tuple[str, object]] = []
    vm.loading.subscribe(lambda v: events.append(("loading", v)))
    vm.result.subscribe(lambda v: events.append(("result", v)))
    vm.error.subscribe(lambda v: events.append(("error", v)))
    return events


def _view_model(dispatcher: _ManualDispatcher) -> EmployeesViewModel:
    return EmployeesViewModel(EmployeeApiClient(), dispatcher)


def test_observable_notifies_in_registration_order_and_unsubscribes() -> None:
    seen: list[str] = []
    obs: Observable[int] = Observable(0)
    unsubscribe_a = obs.subscribe(lambda v: seen.append(f"a{v}"))
    obs.subscribe(lambda v: seen.append(f"b{v}"))

    obs.publish(1)
    unsubscribe_a()
    unsubscribe_a()
    obs.publish(2)

    assert seen == ["a1", "b1", "b2"]
    assert obs.value == 2


def test_observable_replay_delivers_current_value() -> None:
    seen: list[str] = []
    obs: Observable[str] = Observable("initial")
    obs.subscribe(seen.append, replay=True)
    assert seen == ["initial"]


def test_initial_state() -> None:
    vm = _view_model(_ManualDispatcher())
    assert vm.phase is FetchPhase.IDLE
    assert vm.result.value is None
    assert vm.error.value is None
    assert vm.loading.value is False
    assert vm.status.value == DEFAULT_TITLE


def test_start_fetch_sets_loading_synchronously() -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)
    events = _record_events(vm)

    assert vm.start_fetch() is True

    assert events == [("loading", True)]
    assert vm.phase is FetchPhase.IN_FLIGHT
    assert len(dispatcher.jobs) == 1


def test_success_publishes_result_then_clears_loading() -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)
    events = _record_events(vm)

    vm.start_fetch()
    dispatcher.succeed(RESPONSE)

    assert events == [("loading", True), ("result", RESPONSE), ("loading", False)]
    assert vm.phase is FetchPhase.SUCCEEDED
    assert vm.status.value == f"{DEFAULT_TITLE} : ok"
    assert [row_fields(r) for r in vm.result.value.employees] == [("Asha", "Engineer"), ("Ravi", "Designer")]


def test_failure_publishes_error_and_leaves_result_unchanged() -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)
    vm.result.publish(RESPONSE)
    events = _record_events(vm)
    error = FetchError("HTTP 500 Internal Server Error")

    vm.start_fetch()
    dispatcher.fail(error)

    assert events == [("loading", True), ("error", error), ("loading", False)]
    assert vm.result.value is RESPONSE
    assert vm.status.value == DEFAULT_TITLE
    assert vm.phase is FetchPhase.FAILED


def test_success_does_not_clear_earlier_error() -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)
    earlier = FetchError("earlier failure")
    vm.error.publish(earlier)

    vm.start_fetch()
    dispatcher.succeed(RESPONSE)

    assert vm.error.value is earlier


@pytest.mark.parametrize("complete", ["in_flight", "succeeded", "failed"])
def test_second_start_fetch_is_refused(complete: str) -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)
    vm.start_fetch()
    if complete == "succeeded":
        dispatcher.succeed(RESPONSE)
    elif complete == "failed":
        dispatcher.fail(FetchError("nope"))
    events = _record_events(vm)

    assert vm.start_fetch() is False

    assert len(dispatcher.jobs) == 1
    assert events == []


def test_close_while_in_flight_cancels_and_drops_late_completion() -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)
    vm.start_fetch()
    events = _record_events(vm)

    vm.close()
    vm.close()
    dispatcher.succeed(RESPONSE)
    dispatcher.fail(FetchError("late"))

    assert dispatcher.cancelled == 1
    assert events == [("loading", False)]
    assert vm.result.value is None
    assert vm.error.value is None
    assert vm.phase is FetchPhase.CLOSED
    assert vm.start_fetch() is False


def test_close_when_idle_does_not_cancel() -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)

    vm.close()

    assert dispatcher.cancelled == 0
    assert vm.loading.value is False


def test_inline_dispatcher_end_to_end_success(make_client: Callable[..., EmployeeApiClient]) -> None:
    vm = EmployeesViewModel(make_client(), InlineDispatcher())
    events = _record_events(vm)

    vm.start_fetch()

    assert [name for name, _ in events] == ["loading", "result", "loading"]
    assert vm.result.value == RESPONSE


@pytest.mark.parametrize(
    "kwargs",
    [
        {"status_code": 500, "payload": {"detail": "boom"}},
        {"payload": {"message": "ok"}},
    ],
    ids=["http-500", "missing-employees"],
)
def test_inline_dispatcher_end_to_end_failure(
    make_client: Callable[..., EmployeeApiClient], kwargs: dict[str, object]
) -> None:
    vm = EmployeesViewModel(make_client(**kwargs), InlineDispatcher())
    events = _record_events(vm)

    vm.start_fetch()

    assert [name for name, _ in events] == ["loading", "error", "loading"]
    assert isinstance(vm.error.value, FetchError)
    assert vm.result.value is None
    assert vm.phase is FetchPhase.FAILED


def test_inline_dispatcher_connect_error(make_client: Callable[..., EmployeeApiClient]) -> None:
    vm = EmployeesViewModel(make_client(exc=httpx.ConnectError("unreachable")), InlineDispatcher())
    vm.start_fetch()
    assert isinstance(vm.error.value, FetchError)
    assert isinstance(vm.error.value.cause, httpx.ConnectError)


@pytest.mark.parametrize("outcome", ["result", "error"])
def test_loading_cleared_even_if_subscriber_raises(outcome: str) -> None:
    dispatcher = _ManualDispatcher()
    vm = _view_model(dispatcher)

    def _broken(_value: object) -> None:
        raise RuntimeError("renderer bug")

    getattr(vm, outcome).subscribe(_broken)
    loading: list[bool] = []
    vm.loading.subscribe(loading.append)
    vm.start_fetch()

    with pytest.raises(RuntimeError, match="renderer bug"):
        if outcome == "result":
            dispatcher.succeed(RESPONSE)
        else:
            dispatcher.fail(FetchError("nope"))

    assert loading == [True, False]
    assert vm.loading.value is False

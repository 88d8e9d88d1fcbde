"""
Fetch dispatch abstractions.

Notes
-----
A dispatcher runs a fetch job away from the thread that owns view state and
delivers the outcome back to that thread. The GUI uses a QThread-backed
dispatcher (`gui.adapters.fetch_dispatcher`). `InlineDispatcher` runs the job
to completion in the calling thread and is used by the command line and tests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol

from employee_engine.data_models import EmployeeListResponse
from employee_engine.errors import FetchError

FetchJob = Callable[[], Awaitable[EmployeeListResponse]]
SuccessCallback = Callable[[EmployeeListResponse], None]
FailureCallback = Callable[[FetchError], None]


class FetchDispatcher(Protocol):
    """Runs fetch jobs and hands the outcome to callbacks on the owning thread."""

    def submit(self, job: FetchJob, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """
        Start `job` and arrange for exactly one callback to run on completion.

        Notes
        -----
        Neither callback runs if the job is cancelled before it completes.
        """
        ...

    def cancel(self) -> None:
        """Cancel the running job, if any."""
        ...


@dataclass(slots=True)
class InlineDispatcher:
    """Dispatcher that runs the job to completion before `submit` returns."""

    def submit(self, job: FetchJob, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        try:
            response = asyncio.run(_await(job))
        except FetchError as exc:
            on_failure(exc)
            return
        on_success(response)

    def cancel(self) -> None:
        # Jobs finish inside submit(); nothing can be running here.
        return None


async def _await(job: FetchJob) -> EmployeeListResponse:
    return await job()


__all__ = [
    "FetchDispatcher",
    "FetchJob",
    "FailureCallback",
    "InlineDispatcher",
    "SuccessCallback",
]

"""Qt dispatcher for employee fetches.

The engine view model never touches Qt. It hands fetch jobs to this adapter,
which runs them on a worker thread and delivers the outcome back on the GUI
thread through queued signals.

Threading model
--------------
- A single worker QObject lives on a dedicated QThread.
- The worker runs each job in its own asyncio event loop.
- The adapter lives on the GUI thread; the worker's result signals are
  delivered to it as queued connections, so callbacks run on the GUI thread.
- `cancel()` cancels the running task via `call_soon_threadsafe`.
"""

from __future__ import annotations

import asyncio
import logging
import threading

from PySide6.QtCore import QObject, Qt, QThread, Signal, Slot

from employee_engine.data_models import EmployeeListResponse
from employee_engine.dispatch import FailureCallback, FetchJob, SuccessCallback
from employee_engine.errors import FetchError

logger = logging.getLogger(__name__)


class FetchWorker(QObject):
    """Worker that runs fetch jobs on a background thread."""

    succeeded = Signal(object)  # EmployeeListResponse
    failed = Signal(object)  # FetchError

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Future[EmployeeListResponse] | None = None
        self._cancel_requested = False

    def reset(self) -> None:
        with self._lock:
            self._cancel_requested = False

    def cancel(self) -> None:
        """Cancel the running job. Callable from any thread."""
        with self._lock:
            self._cancel_requested = True
            if self._loop is not None and self._task is not None:
                self._loop.call_soon_threadsafe(self._task.cancel)

    @Slot(object)
    def run(self, job: FetchJob) -> None:
        try:
            response = asyncio.run(self._run(job))
        except asyncio.CancelledError:
            logger.info("Employee fetch cancelled")
            return
        except FetchError as exc:
            self.failed.emit(exc)
            return
        except Exception as exc:
            logger.exception("Unexpected error while fetching employees")
            self.failed.emit(FetchError(f"Unexpected error: {exc}", cause=exc))
            return
        self.succeeded.emit(response)

    async def _run(self, job: FetchJob) -> EmployeeListResponse:
        task = asyncio.ensure_future(job())
        with self._lock:
            self._loop = asyncio.get_running_loop()
            self._task = task
            if self._cancel_requested:
                task.cancel()
        try:
            return await task
        finally:
            with self._lock:
                self._loop = None
                self._task = None


class QtFetchDispatcher(QObject):
    """Qt adapter that marshals fetch jobs onto a worker thread."""

    # Request (wired as a queued connection to the worker slot)
    request_run = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._on_success: SuccessCallback | None = None
        self._on_failure: FailureCallback | None = None

        self._thread = QThread()
        self._worker = FetchWorker()
        self._worker.moveToThread(self._thread)

        self.request_run.connect(self._worker.run, type=Qt.ConnectionType.QueuedConnection)
        self._worker.succeeded.connect(self._deliver_success, type=Qt.ConnectionType.QueuedConnection)
        self._worker.failed.connect(self._deliver_failure, type=Qt.ConnectionType.QueuedConnection)

        self._thread.start()

    def submit(self, job: FetchJob, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        self._on_success = on_success
        self._on_failure = on_failure
        self._worker.reset()
        self.request_run.emit(job)

    def cancel(self) -> None:
        # Results already queued for the GUI thread are dropped as well.
        self._on_success = None
        self._on_failure = None
        self._worker.cancel()

    @Slot(object)
    def _deliver_success(self, response: object) -> None:
        callback = self._on_success
        self._on_success = self._on_failure = None
        if callback is None:
            return
        assert isinstance(response, EmployeeListResponse)
        callback(response)

    @Slot(object)
    def _deliver_failure(self, error: object) -> None:
        callback = self._on_failure
        self._on_success = self._on_failure = None
        if callback is None:
            return
        assert isinstance(error, FetchError)
        callback(error)

    def is_running(self) -> bool:
        """Whether the worker thread is still running."""
        return self._thread.isRunning()

    def shutdown(self) -> None:
        """
        Cancel any running job and stop the worker thread.

        Notes
        -----
        This method is safe to call multiple times.
        """
        self.cancel()
        self._thread.quit()
        self._thread.wait(2000)

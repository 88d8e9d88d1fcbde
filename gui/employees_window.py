"""
Employee list window.

Purpose
-------
- Subscribe to the view model and start its single fetch.
- Render one row per employee, in server order.
- Show transient success and error notifications.

Notes
-----
All view model callbacks arrive on the GUI thread; the dispatcher guarantees it.
"""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QProgressBar,
    QVBoxLayout,
    QWidget,
)

from employee_engine.data_models import EmployeeListResponse
from employee_engine.errors import FetchError
from employee_engine.presentation import DEFAULT_TITLE, error_notice, success_notice
from employee_engine.view_state import EmployeesViewModel
from gui.adapters.fetch_dispatcher import QtFetchDispatcher
from gui.widgets.employee_row import EmployeeRow
from gui.widgets.toast import Toast

logger = logging.getLogger(__name__)


class EmployeesWindow(QWidget):
    """
    Main window listing employees.

    Responsibilities
    ----------------
    - Bind to the view model's observables and trigger the fetch once.
    - Replace all rows whenever a result is published.
    - Shut down the view model and dispatcher on close.
    """

    def __init__(self, view_model: EmployeesViewModel, dispatcher: QtFetchDispatcher) -> None:
        super().__init__()
        self._view_model = view_model
        self._dispatcher = dispatcher
        self._unsubscribers: list[Callable[[], None]] = []

        self.setWindowTitle(DEFAULT_TITLE)
        self.resize(420, 640)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(8, 8, 8, 8)

        self.status_label = QLabel(view_model.status.value)
        f = self.status_label.font()
        f.setPointSize(14)
        f.setBold(True)
        self.status_label.setFont(f)

        header_layout.addWidget(self.status_label)
        header_layout.addStretch(1)
        root.addWidget(header)

        self.busy_bar = QProgressBar()
        self.busy_bar.setRange(0, 0)
        self.busy_bar.setTextVisible(False)
        self.busy_bar.setFixedHeight(4)
        self.busy_bar.setVisible(view_model.loading.value)
        root.addWidget(self.busy_bar)

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.list_widget.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        root.addWidget(self.list_widget, 1)

        self.toast = Toast(self)

        self._unsubscribers = [
            view_model.result.subscribe(self._on_result),
            view_model.error.subscribe(self._on_error),
            view_model.loading.subscribe(self._on_loading),
            view_model.status.subscribe(self.status_label.setText),
        ]

        view_model.start_fetch()

    def _on_result(self, response: EmployeeListResponse | None) -> None:
        if response is None:
            return
        logger.debug("Rendering %d employee row(s)", len(response.employees))
        self._render_rows(response)
        self.toast.show_message(success_notice(response))

    def _on_error(self, error: FetchError | None) -> None:
        if error is None:
            return
        self.toast.show_message(error_notice(error))

    def _on_loading(self, loading: bool) -> None:
        self.busy_bar.setVisible(loading)

    def _render_rows(self, response: EmployeeListResponse) -> None:
        self.list_widget.clear()
        for record in response.employees:
            row = EmployeeRow(record)
            item = QListWidgetItem(self.list_widget)
            item.setSizeHint(row.sizeHint())
            self.list_widget.setItemWidget(item, row)

    def shutdown(self) -> None:
        """
        Tear down the view model and the dispatcher's worker thread.

        Notes
        -----
        This method is safe to call multiple times.
        """
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._view_model.close()
        self._dispatcher.shutdown()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        try:
            self.shutdown()
        finally:
            super().closeEvent(event)

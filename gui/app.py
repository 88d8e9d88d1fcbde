"""
Employee directory GUI app.

Builds the engine components (client, view model) around a Qt dispatcher and
shows the employee list window.
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from employee_engine.api_client import EmployeeApiClient
from employee_engine.settings import ClientSettings
from employee_engine.view_state import EmployeesViewModel
from gui.adapters.fetch_dispatcher import QtFetchDispatcher
from gui.employees_window import EmployeesWindow


def build_window(settings: ClientSettings) -> EmployeesWindow:
    """
    Wire the window to a fresh view model.

    Notes
    -----
    A QApplication must exist before calling this. The window starts its fetch
    during construction.
    """
    dispatcher = QtFetchDispatcher()
    view_model = EmployeesViewModel(EmployeeApiClient(settings), dispatcher)
    return EmployeesWindow(view_model, dispatcher)


def main(settings: ClientSettings | None = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    w = build_window(settings or ClientSettings.defaults())
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())

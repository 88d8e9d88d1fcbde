"""Row widget for one employee."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from employee_engine.data_models import EmployeeRecord
from employee_engine.presentation import row_fields


class EmployeeRow(QWidget):
    """Displays one record's name and profile. Rows hold no state and are not interactive."""

    def __init__(self, record: EmployeeRecord) -> None:
        super().__init__()
        name, profile = row_fields(record)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(2)

        self.name_label = QLabel(name)
        f = self.name_label.font()
        f.setBold(True)
        self.name_label.setFont(f)

        self.profile_label = QLabel(profile)
        self.profile_label.setStyleSheet("color: #666;")

        layout.addWidget(self.name_label)
        layout.addWidget(self.profile_label)

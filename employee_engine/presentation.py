"""User-facing text for the employee list view."""

from __future__ import annotations

from employee_engine.data_models import EmployeeListResponse, EmployeeRecord

DEFAULT_TITLE = "Employee Directory"


def status_text(message: str) -> str:
    """Status line shown above the list after a successful fetch."""
    return f"{DEFAULT_TITLE} : {message}"


def success_notice(response: EmployeeListResponse) -> str:
    """Transient notification shown after a successful fetch."""
    return f"Success : {response.message}"


def error_notice(error: BaseException) -> str:
    """Human-readable description of a failure, falling back to the type name."""
    text = str(error).strip()
    return text or type(error).__name__


def row_fields(record: EmployeeRecord) -> tuple[str, str]:
    """The two texts displayed by one row: (name, profile)."""
    return record.name, record.profile


def format_listing(response: EmployeeListResponse) -> str:
    """Plain-text rendering used by the command line: status line then one row per line."""
    lines = [status_text(response.message)]
    lines.extend("\t".join(row_fields(record)) for record in response.employees)
    return "\n".join(lines)

"""
Domain exceptions for the employee directory viewer.

Notes
-----
The engine does not interpret fetch failures. Every transport or decode
problem is wrapped in a single `FetchError` and republished as-is.
"""

from __future__ import annotations


class EmployeeDirectoryError(RuntimeError):
    """Base exception for all employee directory failures."""


class FetchError(EmployeeDirectoryError):
    """
    Raised when the employee list cannot be fetched or decoded.

    Attributes
    ----------
    cause:
        The underlying exception (transport error, HTTP status error, decode
        error), or None when the failure has no originating exception.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

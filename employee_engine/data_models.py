"""Data models for the employee directory.

This module defines the typed representation of the employee list payload
returned by the directory endpoint. Models are immutable pydantic models so
that JSON decoding and shape validation happen in one place.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, StrictStr


class EmployeeRecord(BaseModel):
    """One employee as listed by the server. Equality is structural."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr
    profile: StrictStr


class EmployeeListResponse(BaseModel):
    """
    The decoded employee list payload.

    Attributes
    ----------
    message:
        Server-supplied status string.
    employees:
        Records in the order returned by the server.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: StrictStr
    employees: tuple[EmployeeRecord, ...]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EmployeeListResponse":
        """
        Validate a decoded JSON object.

        Raises
        ------
        pydantic.ValidationError
            If required keys are missing or hold values of the wrong type.
        """
        return cls.model_validate(payload)


__all__ = ["EmployeeRecord", "EmployeeListResponse"]

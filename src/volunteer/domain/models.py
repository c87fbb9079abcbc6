# src/volunteer/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Volunteer application messages
- Interest reference records and their categories
- Operation results returned by the backend adapter

Files that USE this module:
- volunteer.adapters.backend.* (adapters consume and produce domain models)
- volunteer.app (logs fetched interest lists)
- tests.* (tests use domain models for test data)

Files that this module USES:
- volunteer.domain.errors (InvalidInterestRecordError for malformed records)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import IntEnum  # Integer-valued enumerations
from typing import Any, Mapping, NamedTuple, Optional  # Type hints

from volunteer.domain.errors import InvalidInterestRecordError


@dataclass(frozen=True)
class VolunteerMessage:
    """
    Applicant information collected by the signup form.

    Only part of it is forwarded to the backend; see
    SupabaseBackend.submit_volunteer_application.
    """
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    zip: str = ""
    body: str = ""


class InterestCategory(IntEnum):
    """Values of interest_type_id for each reference list."""
    GENERAL = 2
    OUTREACH_SUB_COMMITTEE = 3
    STANDING_COMMITTEE = 4
    LANGUAGES = 5


def _optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInterestRecordError(f"{key} must be an integer or null, got {value!r}")
    return value


@dataclass(frozen=True)
class Interest:
    """
    Selectable volunteer interest, read from the 'interest' table.

    Attributes:
        id: Row id
        interest_type_id: Category id (see InterestCategory), may be null
        name: Display name (the 'interest' column)
        order_by: Sort order for display, may be null
    """
    id: int
    interest_type_id: Optional[int] = None
    name: str = ""
    order_by: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Interest":
        """
        Build an Interest from a backend JSON object.

        Raises:
            InvalidInterestRecordError: If data is not an object or has a
                missing/invalid id or mistyped columns
        """
        if not isinstance(data, Mapping):
            raise InvalidInterestRecordError(f"Interest record must be an object, got {type(data).__name__}")

        record_id = _optional_int(data, "id")
        if record_id is None:
            raise InvalidInterestRecordError("Interest record is missing 'id'")

        name = data.get("interest")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise InvalidInterestRecordError(f"interest must be a string, got {name!r}")

        return cls(
            id=record_id,
            interest_type_id=_optional_int(data, "interest_type_id"),
            name=name,
            order_by=_optional_int(data, "order_by"),
        )


class OperationResult(NamedTuple):
    """Outcome of a write operation. message is empty on success."""
    success: bool
    message: str = ""

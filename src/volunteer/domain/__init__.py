# src/volunteer/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from volunteer.domain.models import (
    Interest,
    InterestCategory,
    OperationResult,
    VolunteerMessage,
)
from volunteer.domain.errors import (
    DomainError,
    InvalidInterestRecordError,
)

__all__ = [
    "Interest",
    "InterestCategory",
    "OperationResult",
    "VolunteerMessage",
    "DomainError",
    "InvalidInterestRecordError",
]

# src/volunteer/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while turning
backend data into domain models.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidInterestRecordError(DomainError):
    """Raised when an interest record from the backend is malformed."""
    pass

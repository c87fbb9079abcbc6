# src/volunteer/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- JSON key casing
- Logging configuration
"""

from volunteer.shared.validators import (
    validate_api_key,
    validate_base_url,
    validate_endpoint_url,
)
from volunteer.shared.casing import camel_case_keys, to_camel_case
from volunteer.shared.logging_conf import setup_logging

__all__ = [
    "validate_api_key",
    "validate_base_url",
    "validate_endpoint_url",
    "camel_case_keys",
    "to_camel_case",
    "setup_logging",
]

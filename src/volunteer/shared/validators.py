# src/volunteer/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for configuration values:
the Supabase base URL, Edge Function URLs and the anon API key.

Files that USE this module:
- volunteer.config.settings (uses validation functions in Settings field validators)
- tests.test_shared (unit tests)

Files that this module USES:
- None (pure utility functions)
"""
import re
from urllib.parse import urlparse


def validate_base_url(url: str) -> bool:
    """
    Validate an absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or re.search(r'\s', url):
        return False

    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_endpoint_url(url: str) -> bool:
    """
    Validate an endpoint URL.

    Endpoints may be absolute http(s) URLs or paths relative to the
    base URL (e.g. 'functions/v1/create-volunteer').

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or re.search(r'\s', url):
        return False

    parsed = urlparse(url)
    if parsed.scheme:
        return validate_base_url(url)
    # Relative: no host part allowed
    return not parsed.netloc and bool(parsed.path)


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return len(api_key) >= min_length and not re.search(r'\s', api_key)

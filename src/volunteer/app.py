# src/volunteer/app.py
"""
Application Entry Point - Backend Wiring and Connectivity Check

This module is the composition root of the signup service layer. It builds
the Supabase adapter from settings for the UI layer, and when run directly
it performs a read-only connectivity check by fetching every interest list.

Usage:
    python -m volunteer.app

Files that USE this module:
- python -m volunteer.app (module entry point)
- tests.test_app (unit tests)

Files that this module USES:
- volunteer.shared.logging_conf (setup_logging for logging configuration)
- volunteer.config (settings for configuration management)
- volunteer.adapters.backend (SupabaseBackend, VolunteerBackend)
- volunteer.domain.models (InterestCategory)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import asyncio  # Run the async connectivity check
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import Dict, Optional  # Type hints

import requests  # HTTP session shared by the adapter

from volunteer.shared.logging_conf import setup_logging  # Configure logging with file rotation
from volunteer.config import Settings  # Settings type for dependency injection
from volunteer.adapters.backend import SupabaseBackend, VolunteerBackend  # Backend adapter
from volunteer.domain.models import InterestCategory  # Fixed interest category ids

log = logging.getLogger(__name__)


def build_backend(
    app_settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> SupabaseBackend:
    """
    Build the Supabase adapter from settings.

    Args:
        app_settings: Settings to use (defaults to the global settings instance)
        session: Optional requests session to share with other components

    Returns:
        Configured SupabaseBackend
    """
    if app_settings is None:
        from volunteer.config import settings as app_settings

    return SupabaseBackend(
        backend_settings=app_settings.backend,
        email_settings=app_settings.email,
        session=session,
        timeout=app_settings.http_timeout_seconds,
    )


async def check_interest_lists(backend: VolunteerBackend) -> Dict[str, int]:
    """
    Fetch every interest category concurrently and count the records.

    Returns:
        Mapping of category name to number of records returned
    """
    categories = list(InterestCategory)
    results = await asyncio.gather(
        *(backend.fetch_interest_list(category) for category in categories)
    )
    return {category.name.lower(): len(items) for category, items in zip(categories, results)}


def main() -> None:
    """
    Run the connectivity check.

    Exits with status 1 when the base URL is missing or every list comes
    back empty (the adapter reports read failures as empty lists).
    """
    from volunteer.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    if not settings.backend.url:
        log.error("SUPABASE_URL missing")
        sys.exit(1)

    with build_backend(settings) as backend:
        counts = asyncio.run(check_interest_lists(backend))

    for name, count in counts.items():
        log.info("Interest list %s: %d records", name, count)

    if not any(counts.values()):
        log.error("All interest lists are empty - check SUPABASE_URL and SUPABASE_ANON_KEY")
        sys.exit(1)


if __name__ == "__main__":
    main()

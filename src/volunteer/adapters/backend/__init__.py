# src/volunteer/adapters/backend/__init__.py
"""
Backend Adapters - Volunteer Signup Backend Clients

This package contains adapters for the signup backend.
All adapters implement the VolunteerBackend interface.
"""

from volunteer.adapters.backend.base import VolunteerBackend
from volunteer.adapters.backend.supabase import SupabaseBackend

__all__ = [
    "VolunteerBackend",
    "SupabaseBackend",
]

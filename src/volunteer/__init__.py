# src/volunteer/__init__.py
"""
Volunteer - Signup Backend Adapter

Service layer of the volunteer-registration front end. Submits applicant
information to a Supabase backend (REST + Edge Functions) and fetches the
interest reference lists shown on the signup forms.
"""

__version__ = "1.0.0"

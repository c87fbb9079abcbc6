# src/volunteer/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Backend (Supabase REST API and Edge Functions)
"""

__all__ = []

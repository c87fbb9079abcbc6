# src/volunteer/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables and an optional .env file.
"""

from volunteer.config.settings import BackendSettings, EmailSettings, Settings, settings

__all__ = ["BackendSettings", "EmailSettings", "Settings", "settings"]

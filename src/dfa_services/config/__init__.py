"""Configuration module."""

from .settings import LIBRARY_VERSION, DfaSettings, get_settings

__all__ = ["LIBRARY_VERSION", "DfaSettings", "get_settings"]

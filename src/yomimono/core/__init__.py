"""Core utilities and configuration for Yomimono.

This module contains:
- Configuration and settings management
- Security utilities (password hashing, JWT tokens)
"""
from .config import Settings, get_settings, settings
from .security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

__all__ = [
    # Config
    "settings",
    "Settings",
    "get_settings",
    # Security - Password
    "hash_password",
    "verify_password",
    # Security - JWT
    "create_access_token",
    "decode_access_token",
]

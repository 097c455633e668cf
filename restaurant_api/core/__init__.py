"""
Core module initialization.
Exports configuration, logging and error utilities.
"""

from restaurant_api.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from restaurant_api.core.errors import (
    AppError,
    ValidationError,
    ConflictError,
    NotFound,
    UnhandledStoreError,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "AppError",
    "ValidationError",
    "ConflictError",
    "NotFound",
    "UnhandledStoreError",
]

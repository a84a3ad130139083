"""
Core utilities package for Plant Care Application.
Provides the shared exception hierarchy.
"""

from .exceptions import (
    PlantCareException,
    ValidationError,
    NotFoundError,
    InvalidConfigError,
    InvalidTimestampError,
    UnknownEntityError,
)

__all__ = [
    "PlantCareException",
    "ValidationError",
    "NotFoundError",
    "InvalidConfigError",
    "InvalidTimestampError",
    "UnknownEntityError",
]

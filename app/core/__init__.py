# app/core/__init__.py

from .config import get_settings, Settings
from .exceptions import (
    ApplicationError,
    NotFoundError,
    UniqueViolationError,
    UsernameAlreadyExistsError,
    ConnectivityError,
    UrlConstructionError,
    ImmutableFieldError,
)

__all__ = [
    "get_settings",
    "Settings",
    "ApplicationError",
    "NotFoundError",
    "UniqueViolationError",
    "UsernameAlreadyExistsError",
    "ConnectivityError",
    "UrlConstructionError",
    "ImmutableFieldError",
]

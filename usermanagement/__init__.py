"""In-memory user management with a plain-text report."""

from __future__ import annotations

from .config import ServiceSettings, load_settings, resolve_config_path
from .models import User, UserStatus
from .service import MissingFieldsError, UnderageError, UserService, UserValidationError


def create_service(settings: ServiceSettings | None = None) -> UserService:
    """Factory function that returns an empty :class:`UserService`."""

    return UserService(settings)


__all__ = [
    "MissingFieldsError",
    "ServiceSettings",
    "UnderageError",
    "User",
    "UserService",
    "UserStatus",
    "UserValidationError",
    "create_service",
    "load_settings",
    "resolve_config_path",
]

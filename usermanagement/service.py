"""In-memory user management service."""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .config import ServiceSettings
from .models import User, UserStatus

logger = logging.getLogger("usermanagement.service")

REPORT_HEADER = "--- Relatório de Usuários ---"
EMPTY_REPORT = "Nenhum usuário cadastrado."


class UserValidationError(ValueError):
    """Raised when user data is rejected at creation time."""


class MissingFieldsError(UserValidationError):
    """Raised when name, email or age is missing."""

    def __init__(self, message: str = "Nome, email e idade são obrigatórios.") -> None:
        super().__init__(message)


class UnderageError(UserValidationError):
    """Raised when the user is younger than the configured minimum age."""

    def __init__(self, message: str = "O usuário deve ser maior de idade.") -> None:
        super().__init__(message)


def _current_timestamp() -> datetime:
    return datetime.now(timezone.utc)


def _generate_user_id() -> str:
    return uuid.uuid4().hex


class UserService:
    """Create, look up and deactivate users held in process memory."""

    def __init__(self, settings: Optional[ServiceSettings] = None) -> None:
        self._settings = settings or ServiceSettings()
        self._users: Dict[str, User] = {}

    @property
    def settings(self) -> ServiceSettings:
        return self._settings

    def __len__(self) -> int:
        return len(self._users)

    # ------------------------------------------------------------------
    # User management
    # ------------------------------------------------------------------
    def create_user(
        self,
        name: str,
        email: str,
        age: int,
        is_admin: bool = False,
    ) -> User:
        """Validate and store a new active user, returning the record."""

        if not name or not email or not age:
            raise MissingFieldsError()
        if age < self._settings.minimum_age:
            raise UnderageError()

        user_id = _generate_user_id()
        while user_id in self._users:
            user_id = _generate_user_id()

        user = User(
            id=user_id,
            name=name,
            email=email,
            age=age,
            is_admin=is_admin,
            created_at=_current_timestamp(),
        )
        self._users[user_id] = user
        logger.info("Created user %s (admin=%s)", user_id, is_admin)
        return user

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def list_users(self) -> List[User]:
        """Return every stored user in creation order."""

        return list(self._users.values())

    def deactivate_user(self, user_id: str) -> bool:
        """Mark a non-admin user inactive.

        Returns ``False`` without touching the store when the id is unknown or
        the user is an administrator. Deactivating an already inactive user
        succeeds again.
        """

        user = self._users.get(user_id)
        if user is None:
            logger.warning("Cannot deactivate unknown user %s", user_id)
            return False
        if user.is_admin:
            logger.warning("Refusing to deactivate admin user %s", user_id)
            return False

        user.status = UserStatus.INACTIVE
        logger.info("Deactivated user %s", user_id)
        return True

    def reset(self) -> None:
        """Drop every stored user."""

        self._users.clear()

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def generate_user_report(self) -> str:
        lines = [REPORT_HEADER, ""]
        users = self.list_users()
        if not users:
            lines.append(EMPTY_REPORT)
            return "\n".join(lines) + "\n"

        for user in users:
            lines.append(
                f"ID: {user.id}, Nome: {user.name}, Email: {user.email}, Status: {user.status.value}"
            )
        return "\n".join(lines) + "\n"


__all__ = [
    "EMPTY_REPORT",
    "MissingFieldsError",
    "REPORT_HEADER",
    "UnderageError",
    "UserService",
    "UserValidationError",
]

"""Domain models for the in-memory user store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class UserStatus(str, Enum):
    """Lifecycle state of a user record."""

    ACTIVE = "ativo"
    INACTIVE = "inativo"


@dataclass
class User:
    """Represents a user account held by :class:`~usermanagement.service.UserService`.

    ``id`` and ``created_at`` are fixed once the record is built; reassigning
    them raises :class:`AttributeError`.
    """

    id: str
    name: str
    email: str
    age: int
    created_at: datetime
    is_admin: bool = False
    status: UserStatus = UserStatus.ACTIVE

    def __setattr__(self, name: str, value: object) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"User.{name} cannot be changed after creation")
        super().__setattr__(name, value)

    @property
    def is_active(self) -> bool:
        """Return ``True`` while the user has not been deactivated."""

        return self.status is UserStatus.ACTIVE


__all__ = ["User", "UserStatus"]

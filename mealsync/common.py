"""Shared errors, domain types and request-context helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ValidationError(ServiceError):
    """The input handed to a service is not acceptable."""


class NotFoundError(ServiceError):
    """A requested record does not exist."""


class ForbiddenError(ServiceError):
    """The caller may not perform the requested operation."""


class InternalError(ServiceError):
    """A storage or infrastructure operation failed."""


class UnauthorizedError(ServiceError):
    """The caller is not authenticated."""


class UserRole(str, Enum):
    """Roles a user account can hold."""

    ADMIN = "admin"


class NotificationType(str, Enum):
    """Kinds of notifications delivered to users."""

    CONFIRMATION = "confirmation"
    REMINDER = "reminder"
    ADMIN_MESSAGE = "admin_message"


@dataclass
class Notification:
    """A message addressed to a single user."""

    user_id: int = 0
    type: Any = ""
    payload: bytes = b""
    message: str = ""
    read: bool = False
    delivered: bool = False
    created_by: int = 0
    updated_by: int = 0
    id: int = 0


@dataclass
class MenuSetItem:
    """Link between a menu set and one of its menu items."""

    menu_set_id: int = 0
    menu_item_id: int = 0
    created_by: int = 0
    updated_by: int = 0
    id: int = 0


USER_ID_KEY = "user_id"
ROLE_KEY = "role"


def get_user_id_from_context(context: Mapping[str, Any]) -> int:
    """Return the authenticated user's ID stored in the request context."""
    if USER_ID_KEY not in context:
        raise UnauthorizedError("user not authenticated")
    return context[USER_ID_KEY]


def is_admin_from_context(context: Mapping[str, Any]) -> bool:
    """Tell whether the request context belongs to an administrator."""
    role = context.get(ROLE_KEY)
    if role is None:
        return False
    if isinstance(role, UserRole):
        role = role.value
    return role == UserRole.ADMIN.value
"""Business rules for notifications sent to users."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import Any

from mealsync.common import (
    NotFoundError,
    Notification,
    NotificationType,
    ValidationError,
)

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_payload(data: dict[str, Any]) -> bytes:
    """Encode ``data`` as compact JSON with sorted keys and HTML-safe escaping."""
    text = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def _format_rfc3339(moment: datetime) -> str:
    """Format ``moment`` as an RFC 3339 timestamp with whole seconds."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return stamp + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    return f"{stamp}{sign}{hours:02d}:{rest // 60:02d}"


class NotificationService:
    """Creates, lists and updates notifications addressed to users."""

    def __init__(self, notification_repo: Any, user_repo: Any) -> None:
        self.notification_repo = notification_repo
        self.user_repo = user_repo

    def get_notifications(self, user_id: int) -> list:
        """Return the notifications of a user."""
        return self.notification_repo.find_by_user_id(user_id)

    def create_notification(self, notification: Any, user_id: int) -> None:
        """Store a new unread notification for ``user_id``."""
        if notification is None:
            raise ValidationError("notification cannot be nil")
        if not notification.type:
            raise ValidationError("notification type is required")

        notification.user_id = user_id
        notification.read = False
        notification.created_by = user_id
        notification.updated_by = user_id
        self.notification_repo.create(notification)

    def mark_notification_as_read(self, notification_id: int, user_id: int) -> None:
        """Mark a notification the user owns as read."""
        self._find_owned(notification_id, user_id, "mark this notification as read")
        self.notification_repo.mark_as_read(notification_id)

    def mark_notification_as_delivered(self, notification_id: int, user_id: int) -> None:
        """Mark a notification the user owns as delivered."""
        self._find_owned(notification_id, user_id, "mark this notification as delivered")
        self.notification_repo.mark_as_delivered(notification_id)

    def delete_notification(self, notification_id: int, user_id: int) -> None:
        """Soft delete a notification the user owns."""
        notification = self._find_owned(notification_id, user_id, "delete this notification")
        notification.updated_by = user_id
        self.notification_repo.delete(notification)

    def get_unread_notification_count(self, user_id: int) -> int:
        """Return how many of the user's notifications are unread."""
        return self.notification_repo.count_unread_by_user_id(user_id)

    def get_undelivered_notification_count(self, user_id: int) -> int:
        """Return how many of the user's notifications are undelivered."""
        return self.notification_repo.count_undelivered_by_user_id(user_id)

    def get_notifications_by_type(self, user_id: int, notification_type: Any) -> list:
        """Return the user's notifications of one type."""
        return self.notification_repo.find_by_type(user_id, notification_type)

    def get_unread_notifications(self, user_id: int) -> list:
        """Return the user's unread notifications."""
        return self.notification_repo.find_unread_by_user_id(user_id)

    def create_meal_confirmation_notification(
        self, user_id: int, meal_event_id: int, message: str
    ) -> None:
        """Notify a user that a meal is confirmed."""
        self._store(
            user_id,
            NotificationType.CONFIRMATION,
            {"meal_event_id": meal_event_id, "message": message},
            message,
        )

    def create_meal_reminder_notification(
        self, user_id: int, meal_event_id: int, message: str, deadline: datetime
    ) -> None:
        """Remind a user to request a meal before ``deadline``."""
        self._store(
            user_id,
            NotificationType.REMINDER,
            {
                "meal_event_id": meal_event_id,
                "message": message,
                "deadline": _format_rfc3339(deadline),
            },
            message,
        )

    def create_meal_cancellation_notification(
        self, user_id: int, meal_event_id: int, message: str
    ) -> None:
        """Notify a user that a meal was cancelled."""
        self._store(
            user_id,
            NotificationType.CONFIRMATION,
            {"meal_event_id": meal_event_id, "message": message},
            message,
        )

    def create_admin_notification(self, user_id: int, message: str, importance: str) -> None:
        """Send a user a message from the administrators."""
        self._store(
            user_id,
            NotificationType.ADMIN_MESSAGE,
            {"message": message, "importance": importance},
            message,
        )

    def _store(
        self,
        user_id: int,
        notification_type: NotificationType,
        payload: dict[str, Any],
        message: str,
    ) -> None:
        self.notification_repo.create(
            Notification(
                user_id=user_id,
                type=notification_type,
                payload=_encode_payload(payload),
                message=message,
                read=False,
                delivered=False,
                created_by=user_id,
                updated_by=user_id,
            )
        )

    def _find_owned(self, notification_id: int, user_id: int, action: str) -> Any:
        notification = self.notification_repo.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("notification not found")
        if notification.user_id != user_id:
            raise ValidationError(f"unauthorized to {action}")
        return notification
"""Business rules for users' meal requests and the items in them."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from mealsync.common import (
    ForbiddenError,
    NotFoundError,
    UserRole,
    ValidationError,
)


def _cutoff_passed(cutoff: datetime) -> bool:
    """Tell whether ``cutoff`` lies in the past."""
    return datetime.now(cutoff.tzinfo) > cutoff


class MealRequestService:
    """Creates and manages meal requests, enforcing ownership and deadlines."""

    def __init__(self, request_repo: Any, meal_repo: Any, user_repo: Any) -> None:
        self.request_repo = request_repo
        self.meal_repo = meal_repo
        self.user_repo = user_repo

    def get_meal_requests(self, user_id: int, is_admin: bool) -> list:
        """Return every request for an admin, or the user's own requests."""
        if is_admin:
            return self.request_repo.find_all()
        return self.request_repo.find_by_user_id(user_id)

    def get_meal_request_by_id(self, request_id: int, user_id: int, is_admin: bool) -> Any:
        """Return one request the caller may see."""
        request = self._find_request(request_id)
        self._check_access(request, user_id, is_admin, "access")
        return request

    def create_meal_request(self, request: Any, user_id: int) -> None:
        """Store a new request of ``user_id`` for an open meal event."""
        if request is None:
            raise ValidationError("request cannot be nil")

        meal = self._find_meal(request.meal_event_id)
        self._check_open(meal)

        existing = self.request_repo.find_by_meal_event_id(request.meal_event_id)
        if any(other.user_id == user_id for other in existing):
            raise ValidationError("user already has a request for this meal event")

        request.user_id = user_id
        request.created_by = user_id
        request.updated_by = user_id
        self.request_repo.create(request)

    def update_meal_request(
        self, request_id: int, request: Any, user_id: int, is_admin: bool
    ) -> None:
        """Change the menu set and address of a request before the cutoff."""
        if request is None:
            raise ValidationError("request cannot be nil")

        existing = self._find_request(request_id)
        self._check_access(existing, user_id, is_admin, "update")

        meal = self._find_meal(existing.meal_event_id)
        self._check_open(meal)

        existing.menu_set_id = request.menu_set_id
        existing.event_address_id = request.event_address_id
        existing.updated_by = user_id
        self.request_repo.update(existing)

    def delete_meal_request(self, request_id: int, user_id: int, is_admin: bool) -> None:
        """Soft delete a request before the meal's cutoff time."""
        request = self._find_request(request_id)
        self._check_access(request, user_id, is_admin, "delete")

        meal = self._find_meal(request.meal_event_id)
        if _cutoff_passed(meal.cutoff_time):
            raise ValidationError("cutoff time has passed")

        request.updated_by = user_id
        self.request_repo.delete(request)

    def add_request_item(
        self, request_id: int, item: Any, user_id: int, is_admin: bool
    ) -> None:
        """Add an item to a request the caller may modify."""
        if item is None:
            raise ValidationError("item cannot be nil")

        request = self._find_request(request_id)
        self._check_access(request, user_id, is_admin, "modify")

        item.meal_request_id = request_id
        item.created_by = user_id
        item.updated_by = user_id
        self.request_repo.add_request_item(item)

    def remove_request_item(
        self, request_id: int, item_id: int, user_id: int, is_admin: bool
    ) -> None:
        """Remove one item from a request the caller may modify."""
        request = self._find_request(request_id)
        self._check_access(request, user_id, is_admin, "modify")

        items = self.request_repo.find_request_items(request_id)
        item = next((candidate for candidate in items if candidate.id == item_id), None)
        if item is None:
            raise NotFoundError("request item not found")

        item.updated_by = user_id
        self.request_repo.remove_request_item(item)

    def get_request_items(self, request_id: int, user_id: int, is_admin: bool) -> list:
        """Return the items of a request the caller may see."""
        request = self._find_request(request_id)
        self._check_access(request, user_id, is_admin, "view")
        return self.request_repo.find_request_items(request_id)

    def update_request_status(self, request_id: int, status: Any, user_id: int) -> None:
        """Set the status of a request; only administrators may do so."""
        user = self.user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError("user not found")
        if user.role != UserRole.ADMIN.value:
            raise ForbiddenError("unauthorized to update request status")
        self.request_repo.update_request_status(request_id, status)

    def _find_request(self, request_id: int) -> Any:
        request = self.request_repo.find_by_id(request_id)
        if request is None:
            raise NotFoundError("meal request not found")
        return request

    def _find_meal(self, meal_event_id: int) -> Any:
        meal = self.meal_repo.find_by_id(meal_event_id)
        if meal is None:
            raise NotFoundError("meal event not found")
        return meal

    @staticmethod
    def _check_open(meal: Any) -> None:
        if not meal.is_active:
            raise ValidationError("meal event is not active")
        if _cutoff_passed(meal.cutoff_time):
            raise ValidationError("cutoff time has passed")

    @staticmethod
    def _check_access(request: Any, user_id: int, is_admin: bool, action: str) -> None:
        if not is_admin and request.user_id != user_id:
            raise ForbiddenError(f"unauthorized to {action} this request")
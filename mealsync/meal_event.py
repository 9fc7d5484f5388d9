"""Business rules for meal events and the records attached to them."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from mealsync.common import NotFoundError


class MealEventService:
    """Manages meal events, their menu sets, requests and comments."""

    def __init__(
        self,
        meal_repo: Any,
        user_repo: Any,
        menu_repo: Any,
        address_repo: Any,
        request_repo: Any,
        comment_repo: Any,
        notification_service: Any,
    ) -> None:
        self.meal_repo = meal_repo
        self.user_repo = user_repo
        self.menu_repo = menu_repo
        self.address_repo = address_repo
        self.request_repo = request_repo
        self.comment_repo = comment_repo
        self.notification_service = notification_service

    # Plain storage operations

    def create(self, meal: Any) -> None:
        """Store a new meal event."""
        self.meal_repo.create(meal)

    def find_by_id(self, meal_id: int) -> Any:
        """Return a meal event or raise NotFoundError."""
        meal = self.meal_repo.find_by_id(meal_id)
        if meal is None:
            raise NotFoundError("meal event not found")
        return meal

    def find_all(self) -> list:
        """Return every meal event."""
        return self.meal_repo.find_all()

    def find_active(self) -> list:
        """Return the active meal events."""
        return self.meal_repo.find_active({"is_active": True})

    def update(self, meal: Any) -> None:
        """Save changes to a meal event."""
        self.meal_repo.update(meal)

    def delete(self, meal: Any) -> None:
        """Soft delete a meal event."""
        self.meal_repo.delete(meal)

    def hard_delete(self, meal: Any) -> None:
        """Permanently delete a meal event."""
        self.meal_repo.hard_delete(meal)

    # Operations used by the API handlers

    def get_meal_by_id(self, meal_id: int, user_id: int, is_admin: bool) -> Any:
        """Return a meal event; any lookup failure becomes NotFoundError."""
        try:
            return self.find_by_id(meal_id)
        except NotFoundError:
            raise
        except Exception as exc:
            raise NotFoundError("record not found", exc) from exc

    def create_meal(self, meal: Any, user_id: int) -> None:
        """Store a new meal event created by ``user_id``."""
        meal.created_by = user_id
        meal.updated_by = user_id
        self.create(meal)

    def update_meal(self, meal_id: int, meal: Any, user_id: int) -> None:
        """Replace a meal event, keeping its creator and creation time."""
        existing = self.find_by_id(meal_id)

        meal.id = meal_id
        meal.updated_by = user_id
        meal.created_by = existing.created_by
        meal.created_at = existing.created_at
        self.update(meal)

    def delete_meal(self, meal_id: int, user_id: int) -> None:
        """Soft delete a meal event, recording who removed it."""
        meal = self.find_by_id(meal_id)
        meal.updated_by = user_id
        self.delete(meal)

    # Menu sets of an event

    def _check_event_set(self, event_set: Any) -> None:
        self.find_by_id(event_set.meal_event_id)
        if self.menu_repo.find_by_id(event_set.menu_set_id) is None:
            raise NotFoundError("menu set not found")

    def add_menu_set_to_event(self, event_set: Any) -> None:
        """Attach a menu set, with its label and note, to a meal event."""
        self._check_event_set(event_set)
        self.meal_repo.add_menu_set_to_event(event_set)

    def update_menu_set_in_event(self, event_set: Any) -> None:
        """Change the label and note of a menu set in a meal event."""
        self._check_event_set(event_set)
        self.meal_repo.update_menu_set_in_event(event_set)

    def remove_menu_set_from_event(self, meal_event_id: int, menu_set_id: int) -> None:
        """Detach a menu set from a meal event."""
        self.find_by_id(meal_event_id)
        self.meal_repo.remove_menu_set_from_event(meal_event_id, menu_set_id)

    def find_menu_sets_by_event_id(self, meal_event_id: int) -> list:
        """Return the menu sets attached to a meal event."""
        self.find_by_id(meal_event_id)
        return self.meal_repo.find_menu_sets_by_event_id(meal_event_id)

    # Meal requests

    def create_meal_request(self, request: Any) -> None:
        """Store a meal request."""
        self.meal_repo.create_request(request)

    def find_request_by_id(self, request_id: int) -> Any:
        """Return a meal request."""
        return self.meal_repo.find_request_by_id(request_id)

    def find_all_requests(self) -> list:
        """Return every meal request."""
        return self.meal_repo.find_all_requests()

    def find_requests_by_user_id(self, user_id: int) -> list:
        """Return the meal requests of a user."""
        return self.meal_repo.find_requests_by_user_id(user_id)

    def delete_meal_request(self, request: Any) -> None:
        """Delete a meal request."""
        self.meal_repo.delete_request(request)

    # Comments and queries

    def create_comment(self, comment: Any) -> None:
        """Store a comment on a menu item of a meal event."""
        self.meal_repo.create_comment(comment)

    def find_comments_by_meal_event_id(self, meal_event_id: int) -> list:
        """Return the comments of a meal event."""
        return self.meal_repo.find_comments_by_meal_event_id(meal_event_id)

    def find_upcoming_and_active(self) -> list:
        """Return meal events that are upcoming and active."""
        return self.meal_repo.find_upcoming_and_active()

    def find_by_date_range(self, start_date: datetime, end_date: datetime) -> list:
        """Return meal events between two dates."""
        return self.meal_repo.find_by_date_range(start_date, end_date)
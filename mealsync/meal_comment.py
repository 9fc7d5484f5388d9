"""Business rules for comments left on menu items of meal events."""

from __future__ import annotations

from typing import Any

from mealsync.common import ForbiddenError, NotFoundError, ValidationError


def _require(repo: Any, record_id: int, what: str) -> Any:
    """Fetch a record through ``repo`` or raise NotFoundError if it is missing."""
    record = repo.find_by_id(record_id)
    if record is None:
        raise NotFoundError(f"{what} not found")
    return record


class MenuItemCommentService:
    """Creates, edits and lists menu item comments, enforcing ownership."""

    def __init__(
        self, comment_repo: Any, meal_repo: Any, user_repo: Any, menu_repo: Any
    ) -> None:
        self.comment_repo = comment_repo
        self.meal_repo = meal_repo
        self.user_repo = user_repo
        self.menu_repo = menu_repo

    def get_comments(self, meal_event_id: int) -> list:
        """Return the comments of an existing meal event."""
        _require(self.meal_repo, meal_event_id, "meal event")
        return self.comment_repo.find_by_meal_event_id(meal_event_id)

    def get_comment_by_id(self, comment_id: int) -> Any:
        """Return one comment."""
        return _require(self.comment_repo, comment_id, "comment")

    def create_comment(self, comment: Any, user_id: int) -> None:
        """Store a new comment written by ``user_id``."""
        if comment is None:
            raise ValidationError("comment cannot be nil")

        _require(self.meal_repo, comment.meal_event_id, "meal event")
        _require(self.menu_repo, comment.menu_item_id, "menu item")

        comment.user_id = user_id
        comment.created_by = user_id
        comment.updated_by = user_id
        self.comment_repo.create(comment)

    def update_comment(self, comment_id: int, comment: Any, user_id: int) -> None:
        """Change the text and rating of a comment the user owns."""
        if comment is None:
            raise ValidationError("comment cannot be nil")

        existing = _require(self.comment_repo, comment_id, "comment")
        if existing.user_id != user_id:
            raise ForbiddenError("unauthorized to update this comment")

        existing.comment = comment.comment
        existing.rating = comment.rating
        existing.updated_by = user_id
        self.comment_repo.update(existing)

    def delete_comment(self, comment_id: int, user_id: int) -> None:
        """Soft delete a comment the user owns."""
        comment = _require(self.comment_repo, comment_id, "comment")
        if comment.user_id != user_id:
            raise ForbiddenError("unauthorized to delete this comment")

        comment.updated_by = user_id
        self.comment_repo.delete(comment)

    def get_user_comments(self, user_id: int) -> list:
        """Return every comment written by a user."""
        return self.comment_repo.find_by_user_id(user_id)

    def get_menu_item_comments(self, menu_item_id: int) -> list:
        """Return the comments on an existing menu item."""
        _require(self.menu_repo, menu_item_id, "menu item")
        return self.comment_repo.find_by_menu_item_id(menu_item_id)

    def get_replies(self, comment_id: int) -> list:
        """Return the replies to an existing comment."""
        _require(self.comment_repo, comment_id, "comment")
        return self.comment_repo.find_replies(comment_id)
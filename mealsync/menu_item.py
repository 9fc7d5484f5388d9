"""Business rules for menu items."""

from __future__ import annotations

from typing import Any

from mealsync.common import NotFoundError, ValidationError


class MenuItemService:
    """Validates and stores menu items through a repository."""

    def __init__(self, menu_item_repo: Any, user_repo: Any) -> None:
        self.menu_item_repo = menu_item_repo
        self.user_repo = user_repo

    def get_menu_items(self) -> list:
        """Return all active menu items."""
        return self.menu_item_repo.find_active({"is_active": True})

    def get_menu_item_by_id(self, item_id: int) -> Any:
        """Return one menu item or raise NotFoundError."""
        return self._find(item_id)

    def create_menu_item(self, menu_item: Any, user_id: int) -> None:
        """Validate and store a new menu item."""
        if menu_item is None:
            raise ValidationError("menu item cannot be nil")
        if not menu_item.name:
            raise ValidationError("name is required")
        if not menu_item.description:
            raise ValidationError("description is required")

        menu_item.created_by = user_id
        menu_item.updated_by = user_id
        self.menu_item_repo.create(menu_item)

    def update_menu_item(self, item_id: int, menu_item: Any, user_id: int) -> None:
        """Copy name, description and image URL onto the stored item."""
        if menu_item is None:
            raise ValidationError("menu item cannot be nil")

        existing = self._find(item_id)
        existing.name = menu_item.name
        existing.description = menu_item.description
        existing.image_url = menu_item.image_url
        existing.updated_by = user_id
        self.menu_item_repo.update(existing)

    def delete_menu_item(self, item_id: int, user_id: int) -> None:
        """Soft delete a menu item, recording who removed it."""
        menu_item = self._find(item_id)
        menu_item.updated_by = user_id
        self.menu_item_repo.delete(menu_item)

    def get_menu_items_by_category(self, category: str) -> list:
        """Return active menu items; items carry no category, so all are returned."""
        return self.menu_item_repo.find_active({"is_active": True})

    def get_menu_items_by_menu_set(self, menu_set_id: int) -> list:
        """Return the active menu items of a menu set."""
        return self.menu_item_repo.find_active(
            {"menu_set_id": menu_set_id, "is_active": True}
        )

    def _find(self, item_id: int) -> Any:
        menu_item = self.menu_item_repo.find_by_id(item_id)
        if menu_item is None:
            raise NotFoundError("menu item not found")
        return menu_item
"""Business rules for menu sets and the menu items they group."""

from __future__ import annotations

from typing import Any

from mealsync.common import MenuSetItem, NotFoundError, ValidationError


class MenuSetService:
    """Manages menu sets, menu items and the links between them."""

    def __init__(self, menu_repo: Any, menu_item_repo: Any, user_repo: Any) -> None:
        self.menu_repo = menu_repo
        self.menu_item_repo = menu_item_repo
        self.user_repo = user_repo

    # Menu sets

    def get_menu_sets(self) -> list:
        """Return all active menu sets."""
        return self.menu_repo.find_active({"is_active": True})

    def get_menu_set_by_id(self, menu_set_id: int) -> Any:
        """Return one menu set or raise NotFoundError."""
        return self._find_set(menu_set_id)

    def create_menu_set(self, menu_set: Any, user_id: int) -> None:
        """Validate and store a new menu set."""
        if menu_set is None:
            raise ValidationError("menu set cannot be nil")
        if not menu_set.menu_set_name:
            raise ValidationError("menu set name is required")

        menu_set.created_by = user_id
        menu_set.updated_by = user_id
        self.menu_repo.create(menu_set)

    def update_menu_set(self, menu_set_id: int, menu_set: Any, user_id: int) -> None:
        """Copy the name and description onto the stored menu set."""
        if menu_set is None:
            raise ValidationError("menu set cannot be nil")

        existing = self._find_set(menu_set_id)
        existing.menu_set_name = menu_set.menu_set_name
        existing.menu_set_description = menu_set.menu_set_description
        existing.updated_by = user_id
        self.menu_repo.update(existing)

    def delete_menu_set(self, menu_set_id: int, user_id: int) -> None:
        """Soft delete a menu set, recording who removed it."""
        menu_set = self._find_set(menu_set_id)
        menu_set.updated_by = user_id
        self.menu_repo.delete(menu_set)

    # Menu items

    def get_menu_items(self) -> list:
        """Return all active menu items."""
        return self.menu_item_repo.find_active({"is_active": True})

    def get_menu_item_by_id(self, item_id: int) -> Any:
        """Return one menu item or raise NotFoundError."""
        return self._find_item(item_id)

    def create_menu_item(self, menu_item: Any, user_id: int) -> None:
        """Validate and store a new menu item."""
        if menu_item is None:
            raise ValidationError("menu item cannot be nil")
        if not menu_item.name:
            raise ValidationError("menu item name is required")

        menu_item.created_by = user_id
        menu_item.updated_by = user_id
        self.menu_item_repo.create(menu_item)

    def update_menu_item(self, item_id: int, menu_item: Any, user_id: int) -> None:
        """Copy name, description and image URL onto the stored item."""
        if menu_item is None:
            raise ValidationError("menu item cannot be nil")

        existing = self._find_item(item_id)
        existing.name = menu_item.name
        existing.description = menu_item.description
        existing.image_url = menu_item.image_url
        existing.updated_by = user_id
        self.menu_item_repo.update(existing)

    def delete_menu_item(self, item_id: int, user_id: int) -> None:
        """Soft delete a menu item, recording who removed it."""
        menu_item = self._find_item(item_id)
        menu_item.updated_by = user_id
        self.menu_item_repo.delete(menu_item)

    # Links between sets and items

    def add_item_to_menu_set(self, menu_set_id: int, menu_item_id: int, user_id: int) -> None:
        """Link an existing menu item to an existing menu set."""
        self._find_set(menu_set_id)
        self._find_item(menu_item_id)
        self.menu_repo.add_menu_item(
            MenuSetItem(
                menu_set_id=menu_set_id,
                menu_item_id=menu_item_id,
                created_by=user_id,
                updated_by=user_id,
            )
        )

    def remove_item_from_menu_set(
        self, menu_set_id: int, menu_item_id: int, user_id: int
    ) -> None:
        """Unlink a menu item from a menu set."""
        self.menu_repo.remove_menu_item(
            MenuSetItem(
                menu_set_id=menu_set_id,
                menu_item_id=menu_item_id,
                updated_by=user_id,
            )
        )

    def get_menu_set_items(self, menu_set_id: int) -> list:
        """Return the menu items of a menu set."""
        return self.menu_repo.find_menu_items(menu_set_id)

    def _find_set(self, menu_set_id: int) -> Any:
        menu_set = self.menu_repo.find_by_id(menu_set_id)
        if menu_set is None:
            raise NotFoundError("menu set not found")
        return menu_set

    def _find_item(self, item_id: int) -> Any:
        menu_item = self.menu_item_repo.find_by_id(item_id)
        if menu_item is None:
            raise NotFoundError("menu item not found")
        return menu_item
"""Business rules for the addresses attached to meal events."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from mealsync.common import InternalError, NotFoundError, ValidationError


class EventAddressService:
    """Validates and stores meal event addresses through a repository."""

    def __init__(self, address_repo: Any, user_repo: Any) -> None:
        self.address_repo = address_repo
        self.user_repo = user_repo

    def get_addresses(self) -> list:
        """Return all active event addresses."""
        return self.address_repo.find_active({"is_active": True})

    def get_address_by_id(self, address_id: int) -> Any:
        """Return one event address or raise NotFoundError."""
        return self._find(address_id)

    def create_address(self, address: Any, user_id: int) -> None:
        """Validate and store a new event address."""
        if address is None:
            raise ValidationError("address cannot be nil")
        self._validate(address)

        address.created_by = user_id
        address.updated_by = user_id

        try:
            self.address_repo.create(address)
        except Exception as exc:
            raise InternalError("failed to create event address", exc) from exc

    def update_address(self, address_id: int, address: Any, user_id: int) -> None:
        """Copy the editable fields of ``address`` onto the stored one."""
        if address is None:
            raise ValidationError("address cannot be nil")

        existing = self._find(address_id)
        self._validate(address)

        existing.meal_event_id = address.meal_event_id
        existing.address_id = address.address_id
        existing.updated_by = user_id

        try:
            self.address_repo.update(existing)
        except Exception as exc:
            raise InternalError("failed to update event address", exc) from exc

    def delete_address(self, address_id: int, user_id: int) -> None:
        """Soft delete an event address, recording who removed it."""
        address = self._find(address_id)
        address.updated_by = user_id
        try:
            self.address_repo.delete(address)
        except Exception as exc:
            raise InternalError("failed to delete event address", exc) from exc

    def get_addresses_by_type(self, address_type: str) -> list:
        """Return event addresses of the given type."""
        if not address_type:
            raise ValidationError("address type is required")
        try:
            return self.address_repo.find_by_address_type(address_type)
        except Exception as exc:
            raise InternalError("failed to fetch addresses by type", exc) from exc

    def get_addresses_by_capacity(self, min_capacity: int, max_capacity: int) -> list:
        """Return event addresses whose capacity lies in the given range."""
        if min_capacity < 0 or max_capacity < min_capacity:
            raise ValidationError("invalid capacity range")
        try:
            return self.address_repo.find_by_capacity(min_capacity, max_capacity)
        except Exception as exc:
            raise InternalError("failed to fetch addresses by capacity", exc) from exc

    def get_addresses_by_location(
        self, latitude: float, longitude: float, radius: float
    ) -> list:
        """Return event addresses within ``radius`` of a point."""
        if radius <= 0:
            raise ValidationError("radius must be positive")
        try:
            return self.address_repo.find_by_location(latitude, longitude, radius)
        except Exception as exc:
            raise InternalError("failed to fetch addresses by location", exc) from exc

    def get_available_addresses(self, date: datetime | None) -> list:
        """Return the addresses available on ``date``."""
        if date is None or date == datetime.min:
            raise ValidationError("date is required")
        try:
            return self.address_repo.find_available_addresses(date)
        except Exception as exc:
            raise InternalError("failed to fetch available addresses", exc) from exc

    def _find(self, address_id: int) -> Any:
        try:
            address = self.address_repo.find_by_id(address_id)
        except Exception as exc:
            raise NotFoundError("event address not found", exc) from exc
        if address is None:
            raise NotFoundError("event address not found")
        return address

    @staticmethod
    def _validate(address: Any) -> None:
        if not address.meal_event_id:
            raise ValidationError("meal event ID is required")
        if not address.address_id:
            raise ValidationError("address ID is required")
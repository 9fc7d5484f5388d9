from dataclasses import dataclass
from datetime import datetime

import pytest

from mealsync.common import InternalError, NotFoundError, ValidationError
from mealsync.event_address import EventAddressService


@dataclass
class Address:
    meal_event_id: int = 0
    address_id: int = 0
    created_by: int = 0
    updated_by: int = 0
    id: int = 0


class FakeRepo:
    def __init__(self, fail=False):
        self.items = {}
        self.fail = fail
        self.calls = []
        self.next_id = 1

    def _maybe_fail(self):
        if self.fail:
            raise RuntimeError("db down")

    def find_active(self, conditions):
        self.calls.append(("find_active", conditions))
        return list(self.items.values())

    def find_by_id(self, address_id):
        if address_id not in self.items:
            raise LookupError("record not found")
        return self.items[address_id]

    def create(self, address):
        self._maybe_fail()
        address.id = self.next_id
        self.next_id += 1
        self.items[address.id] = address

    def update(self, address):
        self._maybe_fail()
        self.items[address.id] = address

    def delete(self, address):
        self._maybe_fail()
        self.items.pop(address.id)

    def find_by_address_type(self, address_type):
        self._maybe_fail()
        self.calls.append(("type", address_type))
        return [address_type]

    def find_by_capacity(self, lo, hi):
        self._maybe_fail()
        self.calls.append(("capacity", lo, hi))
        return [lo, hi]

    def find_by_location(self, lat, lon, radius):
        self._maybe_fail()
        self.calls.append(("location", lat, lon, radius))
        return [(lat, lon)]

    def find_available_addresses(self, date):
        self._maybe_fail()
        self.calls.append(("available", date))
        return [date]


@pytest.fixture
def repo():
    return FakeRepo()


@pytest.fixture
def service(repo):
    return EventAddressService(repo, object())


def test_create_sets_metadata_and_stores(service, repo):
    address = Address(meal_event_id=4, address_id=9)
    service.create_address(address, 7)
    assert address.created_by == 7
    assert address.updated_by == 7
    assert service.get_address_by_id(address.id) is address


def test_create_none_rejected(service):
    with pytest.raises(ValidationError, match="address cannot be nil"):
        service.create_address(None, 1)


def test_create_requires_meal_event_id(service):
    with pytest.raises(ValidationError, match="meal event ID is required"):
        service.create_address(Address(address_id=2), 1)


def test_create_requires_address_id(service):
    with pytest.raises(ValidationError, match="address ID is required"):
        service.create_address(Address(meal_event_id=2), 1)


def test_create_failure_wrapped_as_internal():
    service = EventAddressService(FakeRepo(fail=True), None)
    with pytest.raises(InternalError, match="failed to create event address") as info:
        service.create_address(Address(meal_event_id=1, address_id=1), 1)
    assert isinstance(info.value.cause, RuntimeError)


def test_get_missing_raises_not_found(service):
    with pytest.raises(NotFoundError, match="event address not found") as info:
        service.get_address_by_id(99)
    assert isinstance(info.value.cause, LookupError)


def test_get_addresses_filters_active(service, repo):
    address = Address(meal_event_id=1, address_id=1)
    service.create_address(address, 1)
    assert service.get_addresses() == [address]
    assert repo.calls[-1] == ("find_active", {"is_active": True})


def test_update_copies_fields(service):
    address = Address(meal_event_id=1, address_id=2)
    service.create_address(address, 3)
    service.update_address(address.id, Address(meal_event_id=5, address_id=6), 8)
    stored = service.get_address_by_id(address.id)
    assert (stored.meal_event_id, stored.address_id) == (5, 6)
    assert stored.updated_by == 8
    assert stored.created_by == 3


def test_update_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_address(1, Address(meal_event_id=1, address_id=1), 1)


def test_update_invalid_rejected(service):
    address = Address(meal_event_id=1, address_id=2)
    service.create_address(address, 3)
    with pytest.raises(ValidationError):
        service.update_address(address.id, Address(), 1)


def test_update_none_rejected(service):
    with pytest.raises(ValidationError):
        service.update_address(1, None, 1)


def test_delete_removes_and_records_user(service):
    address = Address(meal_event_id=1, address_id=2)
    service.create_address(address, 3)
    service.delete_address(address.id, 11)
    assert address.updated_by == 11
    with pytest.raises(NotFoundError):
        service.get_address_by_id(address.id)


def test_delete_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.delete_address(5, 1)


def test_by_type(service, repo):
    assert service.get_addresses_by_type("hall") == ["hall"]


def test_by_type_empty_rejected(service):
    with pytest.raises(ValidationError, match="address type is required"):
        service.get_addresses_by_type("")


def test_by_type_failure_wrapped():
    service = EventAddressService(FakeRepo(fail=True), None)
    with pytest.raises(InternalError, match="failed to fetch addresses by type"):
        service.get_addresses_by_type("hall")


def test_by_capacity(service):
    assert service.get_addresses_by_capacity(10, 10) == [10, 10]


@pytest.mark.parametrize("lo,hi", [(-1, 5), (5, 4)])
def test_by_capacity_invalid(service, lo, hi):
    with pytest.raises(ValidationError, match="invalid capacity range"):
        service.get_addresses_by_capacity(lo, hi)


def test_by_location(service, repo):
    assert service.get_addresses_by_location(1.5, 2.5, 3.0) == [(1.5, 2.5)]
    assert repo.calls[-1] == ("location", 1.5, 2.5, 3.0)


@pytest.mark.parametrize("radius", [0, -2.0])
def test_by_location_requires_positive_radius(service, radius):
    with pytest.raises(ValidationError, match="radius must be positive"):
        service.get_addresses_by_location(0.0, 0.0, radius)


def test_available_addresses(service):
    when = datetime(2024, 5, 1, 12, 0)
    assert service.get_available_addresses(when) == [when]


@pytest.mark.parametrize("date", [None, datetime.min])
def test_available_requires_date(service, date):
    with pytest.raises(ValidationError, match="date is required"):
        service.get_available_addresses(date)


def test_available_failure_wrapped():
    service = EventAddressService(FakeRepo(fail=True), None)
    with pytest.raises(InternalError, match="failed to fetch available addresses"):
        service.get_available_addresses(datetime(2024, 1, 1))
"""Food registry: CRUD, queries and sharing over the item stores."""

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Protocol

from food_registry.domain.errors import (
    DuplicateIdError,
    NotFoundError,
    ValidationError,
)
from food_registry.domain.food_items import FoodItem, FoodItemPayload
from food_registry.services.clock import Clock, IdGenerator

_logger = logging.getLogger(__name__)

_INT_LIMIT = 2**63


class FoodItemStore(Protocol):
    """Durable map of active food items, iterated in key order."""

    def get(self, item_id: str) -> FoodItem | None:
        """Return the item stored under the id, if present."""

    def insert(self, item: FoodItem) -> None:
        """Store the item under its id, replacing any previous value."""

    def remove(self, item_id: str) -> FoodItem | None:
        """Remove and return the item stored under the id, if present."""

    def values(self) -> Iterator[FoodItem]:
        """Iterate over all stored items in key order."""


class SharedPoolStore(Protocol):
    """Durable append-only list of shared food items."""

    def append(self, item: FoodItem) -> None:
        """Append a shared item to the end of the pool."""

    def list_items(self) -> list[FoodItem]:
        """Return all shared items in insertion order."""


@dataclass
class FoodRegistry:
    """Application service owning the active items and the shared pool."""

    items: FoodItemStore
    shared_pool: SharedPoolStore
    clock: Clock
    id_generator: IdGenerator
    allow_non_positive_quantity_update: bool = True

    def create(self, caller: str, payload: FoodItemPayload) -> FoodItem:
        """Validate the payload and store a new item owned by the caller."""
        _validate_payload(payload)
        item_id = self.id_generator.new_id()
        if self.items.get(item_id) is not None:
            _logger.error("Generated food item id already exists: id=%s", item_id)
            raise DuplicateIdError("Food item with the same id already exists")
        item = FoodItem(
            id=item_id,
            name=payload.name,
            quantity=payload.quantity,
            expiration_date=payload.expiration_date,
            owner_id=caller,
            created_at=self.clock.now(),
            updated_at=None,
        )
        self.items.insert(item)
        _logger.debug("Created food item: id=%s owner=%s", item.id, caller)
        return item

    def get_by_id(self, item_id: str) -> FoodItem:
        """Return an active item or raise NotFoundError."""
        _validate_id(item_id)
        return self._require(item_id)

    def get_by_name(self, name: str) -> list[FoodItem]:
        """Return active items whose name matches, ignoring case."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Invalid name")
        wanted = name.lower()
        return [item for item in self.items.values() if item.name.lower() == wanted]

    def get_all(self) -> list[FoodItem]:
        """Return every active item regardless of owner."""
        return list(self.items.values())

    def get_by_quantity_range(
        self, min_quantity: float, max_quantity: float
    ) -> list[FoodItem]:
        """Return active items with a quantity inside the inclusive range."""
        if not _is_number(min_quantity) or not _is_number(max_quantity):
            raise ValidationError("Quantity bounds must be numbers")
        if min_quantity > max_quantity:
            return []
        return [
            item
            for item in self.items.values()
            if min_quantity <= item.quantity <= max_quantity
        ]

    def update(self, item_id: str, payload: FoodItemPayload) -> FoodItem:
        """Replace the mutable fields of an active item."""
        _validate_id(item_id)
        _validate_payload(payload)
        current = self._require(item_id)
        updated = replace(
            current,
            name=payload.name,
            quantity=payload.quantity,
            expiration_date=payload.expiration_date,
            updated_at=self.clock.now(),
        )
        self.items.insert(updated)
        return updated

    def update_quantity(self, item_id: str, new_quantity: float) -> FoodItem:
        """Overwrite only the quantity of an active item."""
        _validate_id(item_id)
        if not _is_number(new_quantity):
            raise ValidationError("Quantity must be a number")
        if not self.allow_non_positive_quantity_update and new_quantity <= 0:
            raise ValidationError("Quantity must be greater than zero.")
        current = self._require(item_id)
        updated = replace(
            current, quantity=new_quantity, updated_at=self.clock.now()
        )
        self.items.insert(updated)
        return updated

    def delete(self, item_id: str) -> FoodItem:
        """Permanently remove an active item and return it."""
        _validate_id(item_id)
        removed = self.items.remove(item_id)
        if removed is None:
            raise _not_found(item_id)
        _logger.debug("Deleted food item: id=%s", item_id)
        return removed

    def share(self, item_id: str) -> FoodItem:
        """Move an active item into the shared pool unchanged."""
        _validate_id(item_id)
        item = self.items.remove(item_id)
        if item is None:
            raise _not_found(item_id)
        try:
            self.shared_pool.append(item)
        except Exception:
            self.items.insert(item)
            raise
        _logger.info(
            'Shared: Food item "%s" has been shared with the community!', item.name
        )
        return item

    def list_shared(self) -> list[FoodItem]:
        """Return every shared item in the order it was shared."""
        return self.shared_pool.list_items()

    def _require(self, item_id: str) -> FoodItem:
        item = self.items.get(item_id)
        if item is None:
            raise _not_found(item_id)
        return item


def _is_number(value: object) -> bool:
    """Accept ints that fit a signed 64-bit column and non-NaN floats."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    if isinstance(value, int):
        return -_INT_LIMIT < value < _INT_LIMIT
    return not math.isnan(value)


def _validate_id(item_id: object) -> None:
    if not isinstance(item_id, str) or not item_id:
        raise ValidationError("Invalid ID parameter.")


def _validate_payload(payload: FoodItemPayload) -> None:
    """Check the fields shared by create and full update."""
    if not isinstance(payload.name, str) or not payload.name.strip():
        raise ValidationError("Invalid payload: name is required")
    if not _is_number(payload.quantity):
        raise ValidationError("Invalid payload: quantity must be a number in range")
    if payload.quantity <= 0:
        raise ValidationError("Quantity must be greater than zero.")
    expiration = payload.expiration_date
    if isinstance(expiration, str):
        if not expiration.strip():
            raise ValidationError("Invalid payload: expirationDate is required")
    elif not _is_number(expiration):
        raise ValidationError("Invalid payload: expirationDate is required")


def _not_found(item_id: str) -> NotFoundError:
    return NotFoundError(f"Food Item with ID={item_id} not found.")

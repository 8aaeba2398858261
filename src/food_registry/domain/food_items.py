"""Domain models for registered food items."""

from dataclasses import dataclass

ExpirationDate = str | int | float


@dataclass(frozen=True)
class FoodItemPayload:
    """Caller-supplied fields for creating or replacing a food item."""

    name: str
    quantity: float
    expiration_date: ExpirationDate


@dataclass(frozen=True)
class FoodItem:
    """Represents a food item owned by a caller."""

    id: str
    name: str
    quantity: float
    expiration_date: ExpirationDate
    owner_id: str
    created_at: int
    updated_at: int | None = None

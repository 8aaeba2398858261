"""Row mapping shared by the storage adapters."""

from food_registry.domain.food_items import FoodItem

ITEM_COLUMNS = (
    "id",
    "name",
    "quantity",
    "expiration_date",
    "owner_id",
    "created_at",
    "updated_at",
)


def item_to_row(item: FoodItem) -> dict[str, object]:
    """Convert a food item into a storage row."""
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "expiration_date": item.expiration_date,
        "owner_id": item.owner_id,
        "created_at": item.created_at,
        "updated_at": item.updated_at,
    }


def row_to_item(row: dict[str, object]) -> FoodItem:
    """Parse a storage row into a food item."""
    updated_raw = row.get("updated_at")
    return FoodItem(
        id=str(row["id"]),
        name=str(row["name"]),
        quantity=row["quantity"],
        expiration_date=row["expiration_date"],
        owner_id=str(row["owner_id"]),
        created_at=int(row["created_at"]),
        updated_at=int(updated_raw) if updated_raw is not None else None,
    )

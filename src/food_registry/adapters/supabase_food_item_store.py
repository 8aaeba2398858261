"""Supabase implementation of the active food item map."""

from collections.abc import Iterator
from dataclasses import dataclass

from supabase import Client

from food_registry.adapters.food_item_rows import item_to_row, row_to_item
from food_registry.domain.food_items import FoodItem
from food_registry.services.registry import FoodItemStore


@dataclass
class SupabaseFoodItemStore(FoodItemStore):
    """Supabase-backed map of active food items keyed by id."""

    client: Client
    table_name: str = "food_items"

    def get(self, item_id: str) -> FoodItem | None:
        """Return the item stored under the id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return row_to_item(response.data[0])

    def insert(self, item: FoodItem) -> None:
        """Insert or replace the item under its id."""
        response = (
            self.client.table(self.table_name).upsert(item_to_row(item)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store food item")

    def remove(self, item_id: str) -> FoodItem | None:
        """Delete the item and return the deleted row."""
        response = (
            self.client.table(self.table_name).delete().eq("id", item_id).execute()
        )
        if not response.data:
            return None
        return row_to_item(response.data[0])

    def values(self) -> Iterator[FoodItem]:
        """Iterate over all items ordered by id."""
        response = (
            self.client.table(self.table_name).select("*").order("id").execute()
        )
        return (row_to_item(row) for row in response.data or [])

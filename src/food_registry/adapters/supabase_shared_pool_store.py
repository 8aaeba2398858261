"""Supabase implementation of the shared food pool."""

from dataclasses import dataclass

from supabase import Client

from food_registry.adapters.food_item_rows import item_to_row, row_to_item
from food_registry.domain.food_items import FoodItem
from food_registry.services.registry import SharedPoolStore


@dataclass
class SupabaseSharedPoolStore(SharedPoolStore):
    """Supabase-backed pool; ``position`` is an identity column."""

    client: Client
    table_name: str = "shared_food_items"

    def append(self, item: FoodItem) -> None:
        """Append a shared item."""
        response = self.client.table(self.table_name).insert(item_to_row(item)).execute()
        if not response.data:
            raise RuntimeError("Failed to share food item")

    def list_items(self) -> list[FoodItem]:
        """Return shared items in insertion order."""
        response = (
            self.client.table(self.table_name).select("*").order("position").execute()
        )
        return [row_to_item(row) for row in response.data or []]

"""SQLite implementation of the active food item map."""

import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass

from food_registry.adapters.food_item_rows import (
    ITEM_COLUMNS,
    item_to_row,
    row_to_item,
)
from food_registry.domain.food_items import FoodItem
from food_registry.services.registry import FoodItemStore

_COLUMN_LIST = ", ".join(ITEM_COLUMNS)
_PLACEHOLDERS = ", ".join(f":{column}" for column in ITEM_COLUMNS)


@dataclass
class SqliteFoodItemStore(FoodItemStore):
    """SQLite-backed map of active food items keyed by id."""

    connection: sqlite3.Connection

    def get(self, item_id: str) -> FoodItem | None:
        """Return the item stored under the id, if present."""
        row = self.connection.execute(
            f"SELECT {_COLUMN_LIST} FROM food_items WHERE id = ?", (item_id,)
        ).fetchone()
        if row is None:
            return None
        return row_to_item(dict(row))

    def insert(self, item: FoodItem) -> None:
        """Insert or replace the item under its id."""
        with self.connection:
            self.connection.execute(
                f"INSERT OR REPLACE INTO food_items ({_COLUMN_LIST}) "
                f"VALUES ({_PLACEHOLDERS})",
                item_to_row(item),
            )

    def remove(self, item_id: str) -> FoodItem | None:
        """Delete the item and return what was stored."""
        with self.connection:
            row = self.connection.execute(
                f"SELECT {_COLUMN_LIST} FROM food_items WHERE id = ?", (item_id,)
            ).fetchone()
            if row is None:
                return None
            self.connection.execute("DELETE FROM food_items WHERE id = ?", (item_id,))
        return row_to_item(dict(row))

    def values(self) -> Iterator[FoodItem]:
        """Iterate over all items ordered by id."""
        rows = self.connection.execute(
            f"SELECT {_COLUMN_LIST} FROM food_items ORDER BY id"
        ).fetchall()
        return (row_to_item(dict(row)) for row in rows)

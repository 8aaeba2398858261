"""SQLite implementation of the shared food pool."""

import sqlite3
from dataclasses import dataclass

from food_registry.adapters.food_item_rows import (
    ITEM_COLUMNS,
    item_to_row,
    row_to_item,
)
from food_registry.domain.food_items import FoodItem
from food_registry.services.registry import SharedPoolStore

_COLUMN_LIST = ", ".join(ITEM_COLUMNS)
_PLACEHOLDERS = ", ".join(f":{column}" for column in ITEM_COLUMNS)


@dataclass
class SqliteSharedPoolStore(SharedPoolStore):
    """SQLite-backed append-only pool ordered by insertion."""

    connection: sqlite3.Connection

    def append(self, item: FoodItem) -> None:
        """Append a shared item."""
        with self.connection:
            self.connection.execute(
                f"INSERT INTO shared_food_items ({_COLUMN_LIST}) "
                f"VALUES ({_PLACEHOLDERS})",
                item_to_row(item),
            )

    def list_items(self) -> list[FoodItem]:
        """Return shared items in insertion order."""
        rows = self.connection.execute(
            f"SELECT {_COLUMN_LIST} FROM shared_food_items ORDER BY position"
        ).fetchall()
        return [row_to_item(dict(row)) for row in rows]

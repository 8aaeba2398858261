"""SQLite connection and schema setup for local storage.

Both the active item map and the shared pool live in the same database
file, so they share one durability guarantee. ``expiration_date`` is
declared without a type so SQLite keeps text and numeric values as given.
``quantity`` uses NUMERIC affinity: integers come back as ints and
fractional values as floats, while an integral float such as ``10.0`` is
read back as the int ``10``.
Connections skip the same-thread check; the API serves every operation
from the event loop thread, one at a time.
"""

import sqlite3
from pathlib import Path

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS food_items (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        quantity NUMERIC NOT NULL,
        expiration_date,
        owner_id TEXT NOT NULL,
        created_at INTEGER NOT NULL,
        updated_at INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS shared_food_items (
        position INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL,
        name TEXT NOT NULL,
        quantity NUMERIC NOT NULL,
        expiration_date,
        owner_id TEXT NOT NULL,
        created_at INTEGER NOT NULL,
        updated_at INTEGER
    )
    """,
)


def connect(path: str | Path) -> sqlite3.Connection:
    """Open the database, creating the file, parent directory and tables."""
    db_path = Path(path)
    if str(db_path) != ":memory:":
        db_path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(db_path, check_same_thread=False)
    connection.row_factory = sqlite3.Row
    with connection:
        for statement in _SCHEMA:
            connection.execute(statement)
    return connection

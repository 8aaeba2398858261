"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_registry.adapters import sqlite_db
from food_registry.adapters.sqlite_food_item_store import SqliteFoodItemStore
from food_registry.adapters.sqlite_shared_pool_store import SqliteSharedPoolStore
from food_registry.adapters.supabase_food_item_store import SupabaseFoodItemStore
from food_registry.adapters.supabase_shared_pool_store import (
    SupabaseSharedPoolStore,
)
from food_registry.config import Settings, parse_api_tokens
from food_registry.services.clock import SystemClock, Uuid4IdGenerator
from food_registry.services.registry import (
    FoodItemStore,
    FoodRegistry,
    SharedPoolStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    registry: FoodRegistry
    api_tokens: dict[str, str]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend = resolved_settings.storage_backend.lower()
    close_callbacks: list[Callable[[], None]] = []
    items: FoodItemStore
    shared_pool: SharedPoolStore
    if backend == "sqlite":
        connection = sqlite_db.connect(resolved_settings.sqlite_path)
        items = SqliteFoodItemStore(connection)
        shared_pool = SqliteSharedPoolStore(connection)
        close_callbacks.append(connection.close)
    elif backend == "supabase":
        if not (
            resolved_settings.supabase_url and resolved_settings.supabase_service_key
        ):
            raise ValueError("Supabase backend requires supabase_url and key")
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        items = SupabaseFoodItemStore(supabase_client)
        shared_pool = SupabaseSharedPoolStore(supabase_client)
    else:
        raise ValueError(f"Unknown storage backend: {resolved_settings.storage_backend}")

    registry = FoodRegistry(
        items=items,
        shared_pool=shared_pool,
        clock=SystemClock(),
        id_generator=Uuid4IdGenerator(),
        allow_non_positive_quantity_update=(
            resolved_settings.allow_non_positive_quantity_update
        ),
    )

    async def close_resources() -> None:
        for callback in close_callbacks:
            callback()

    return AppContainer(
        settings=resolved_settings,
        registry=registry,
        api_tokens=parse_api_tokens(resolved_settings.api_tokens),
        close_resources=close_resources,
    )

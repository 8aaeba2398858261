"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from food_registry.config import Settings, parse_api_tokens
from food_registry.containers import AppContainer
from food_registry.domain.food_items import FoodItem
from food_registry.services.clock import Clock, IdGenerator
from food_registry.services.registry import (
    FoodItemStore,
    FoodRegistry,
    SharedPoolStore,
)


@dataclass
class InMemoryFoodItemStore(FoodItemStore):
    """In-memory ordered item map for tests."""

    items: dict[str, FoodItem] = field(default_factory=dict)

    def get(self, item_id: str) -> FoodItem | None:
        return self.items.get(item_id)

    def insert(self, item: FoodItem) -> None:
        self.items[item.id] = item

    def remove(self, item_id: str) -> FoodItem | None:
        return self.items.pop(item_id, None)

    def values(self) -> Iterator[FoodItem]:
        return (self.items[key] for key in sorted(self.items))


@dataclass
class InMemorySharedPoolStore(SharedPoolStore):
    """In-memory shared pool that can be told to fail."""

    items: list[FoodItem] = field(default_factory=list)
    fail_appends: bool = False

    def append(self, item: FoodItem) -> None:
        if self.fail_appends:
            raise RuntimeError("Failed to share food item")
        self.items.append(item)

    def list_items(self) -> list[FoodItem]:
        return list(self.items)


@dataclass
class StepClock(Clock):
    """Clock that advances by a fixed step on every read."""

    current: int = 1_000
    step: int = 10

    def now(self) -> int:
        self.current += self.step
        return self.current


@dataclass
class SequentialIdGenerator(IdGenerator):
    """Deterministic ids: item-0001, item-0002, ..."""

    counter: int = 0
    repeat: bool = False

    def new_id(self) -> str:
        if not self.repeat or self.counter == 0:
            self.counter += 1
        return f"item-{self.counter:04d}"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        storage_backend="sqlite",
        sqlite_path=str(tmp_path / "food_registry.db"),
        api_tokens="token-alice:alice,token-bob:bob",
    )


@pytest.fixture
def item_store() -> InMemoryFoodItemStore:
    return InMemoryFoodItemStore()


@pytest.fixture
def shared_pool() -> InMemorySharedPoolStore:
    return InMemorySharedPoolStore()


@pytest.fixture
def registry(
    item_store: InMemoryFoodItemStore, shared_pool: InMemorySharedPoolStore
) -> FoodRegistry:
    return FoodRegistry(
        items=item_store,
        shared_pool=shared_pool,
        clock=StepClock(),
        id_generator=SequentialIdGenerator(),
    )


@pytest.fixture
def container(settings: Settings, registry: FoodRegistry) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        registry=registry,
        api_tokens=parse_api_tokens(settings.api_tokens),
        close_resources=close_resources,
    )

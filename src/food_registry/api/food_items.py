"""Food registry endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from food_registry.api.auth import require_caller
from food_registry.api.models import FoodItemPayloadBody, QuantityUpdateBody
from food_registry.domain.food_items import FoodItem

if TYPE_CHECKING:
    from food_registry.services.registry import FoodRegistry

router = APIRouter(tags=["food-items"], dependencies=[Depends(require_caller)])


def _registry(request: Request) -> FoodRegistry:
    return request.app.state.container.registry


@router.post("/food-items", status_code=status.HTTP_201_CREATED)
async def create_food_item(
    body: FoodItemPayloadBody,
    request: Request,
    caller: str = Depends(require_caller),
) -> dict[str, object]:
    """Register a new food item owned by the caller."""
    return _serialize_item(_registry(request).create(caller, body.to_payload()))


@router.get("/food-items")
async def get_all_food_items(request: Request) -> dict[str, object]:
    """Return every active food item."""
    return _serialize_items(_registry(request).get_all())


@router.get("/food-items/search")
async def get_food_items_by_name(
    request: Request, name: str = Query()
) -> dict[str, object]:
    """Return active items whose name matches, ignoring case."""
    return _serialize_items(_registry(request).get_by_name(name))


@router.get("/food-items/by-quantity")
async def get_food_items_by_quantity(
    request: Request,
    min_quantity: float = Query(alias="min"),
    max_quantity: float = Query(alias="max"),
) -> dict[str, object]:
    """Return active items with a quantity in the inclusive range."""
    registry = _registry(request)
    return _serialize_items(registry.get_by_quantity_range(min_quantity, max_quantity))


@router.get("/food-items/{item_id}")
async def get_food_item(item_id: str, request: Request) -> dict[str, object]:
    """Return a single active item."""
    return _serialize_item(_registry(request).get_by_id(item_id))


@router.put("/food-items/{item_id}")
async def update_food_item(
    item_id: str, body: FoodItemPayloadBody, request: Request
) -> dict[str, object]:
    """Replace the name, quantity and expiration date of an item."""
    return _serialize_item(_registry(request).update(item_id, body.to_payload()))


@router.patch("/food-items/{item_id}/quantity")
async def update_food_item_quantity(
    item_id: str, body: QuantityUpdateBody, request: Request
) -> dict[str, object]:
    """Overwrite the quantity of an item."""
    return _serialize_item(_registry(request).update_quantity(item_id, body.quantity))


@router.delete("/food-items/{item_id}")
async def delete_food_item(item_id: str, request: Request) -> dict[str, object]:
    """Permanently delete an item."""
    return _serialize_item(_registry(request).delete(item_id))


@router.post("/food-items/{item_id}/share")
async def share_excess_food(item_id: str, request: Request) -> dict[str, object]:
    """Move an item into the shared community pool."""
    return _serialize_item(_registry(request).share(item_id))


@router.get("/shared-food-items")
async def get_all_shared_food_items(request: Request) -> dict[str, object]:
    """Return the shared pool in the order items were shared."""
    return _serialize_items(_registry(request).list_shared())


def _serialize_item(item: FoodItem) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "expirationDate": item.expiration_date,
        "ownerId": item.owner_id,
        "createdAt": item.created_at,
        "updatedAt": item.updated_at,
    }


def _serialize_items(items: list[FoodItem]) -> dict[str, object]:
    return {"items": [_serialize_item(item) for item in items]}

"""Tests for the food registry HTTP endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from food_registry.api.app import create_app
from food_registry.containers import AppContainer, build_container

ALICE = {"X-Api-Token": "token-alice"}
BOB = {"X-Api-Token": "token-bob"}


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def _create(client: TestClient, headers=ALICE, **overrides) -> dict:
    body = {"name": "Rice", "quantity": 10, "expirationDate": "2025-06-01"}
    body.update(overrides)
    response = client.post("/food-items", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_health_is_public(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requests_without_known_token_are_rejected(container) -> None:
    client = _client(container)

    assert client.get("/food-items").status_code == 401
    assert client.get("/food-items", headers={"X-Api-Token": "nope"}).status_code == 401


def test_create_returns_camel_case_item(container) -> None:
    created = _create(_client(container))

    assert created == {
        "id": "item-0001",
        "name": "Rice",
        "quantity": 10,
        "expirationDate": "2025-06-01",
        "ownerId": "alice",
        "createdAt": 1010,
        "updatedAt": None,
    }


def test_create_validation_errors_use_error_envelope(container) -> None:
    client = _client(container)

    empty_name = client.post(
        "/food-items",
        json={"name": "", "quantity": 5, "expirationDate": "2025-01-01"},
        headers=ALICE,
    )
    zero_quantity = client.post(
        "/food-items",
        json={"name": "Bread", "quantity": 0, "expirationDate": "2025-01-01"},
        headers=ALICE,
    )
    missing_field = client.post(
        "/food-items", json={"name": "Bread", "quantity": 2}, headers=ALICE
    )

    assert empty_name.status_code == 400
    assert empty_name.json()["error"]["type"] == "ValidationError"
    assert zero_quantity.status_code == 400
    assert zero_quantity.json()["error"]["message"] == (
        "Quantity must be greater than zero."
    )
    assert missing_field.status_code == 400
    assert missing_field.json()["error"] == {
        "type": "ValidationError",
        "message": "Invalid payload: expirationDate",
    }


def test_get_by_id_and_not_found(container) -> None:
    client = _client(container)
    created = _create(client)

    found = client.get(f"/food-items/{created['id']}", headers=BOB)
    missing = client.get("/food-items/missing", headers=BOB)

    assert found.json() == created
    assert missing.status_code == 404
    assert missing.json()["error"] == {
        "type": "NotFoundError",
        "message": "Food Item with ID=missing not found.",
    }


def test_list_search_and_quantity_queries(container) -> None:
    client = _client(container)
    rice = _create(client, name="Rice", quantity=10)
    beans = _create(client, headers=BOB, name="Beans", quantity=2)

    everything = client.get("/food-items", headers=ALICE).json()["items"]
    by_name = client.get("/food-items/search", params={"name": "RICE"}, headers=ALICE)
    by_quantity = client.get(
        "/food-items/by-quantity", params={"min": 1, "max": 5}, headers=ALICE
    )
    inverted = client.get(
        "/food-items/by-quantity", params={"min": 5, "max": 1}, headers=ALICE
    )

    assert everything == [rice, beans]
    assert by_name.json() == {"items": [rice]}
    assert by_quantity.json() == {"items": [beans]}
    assert inverted.json() == {"items": []}


def test_search_rejects_blank_name(container) -> None:
    response = _client(container).get(
        "/food-items/search", params={"name": " "}, headers=ALICE
    )

    assert response.status_code == 400


def test_update_and_quantity_update(container) -> None:
    client = _client(container)
    created = _create(client)

    updated = client.put(
        f"/food-items/{created['id']}",
        json={"name": "Brown rice", "quantity": 4, "expirationDate": 1767225600},
        headers=BOB,
    ).json()
    quantity = client.patch(
        f"/food-items/{created['id']}/quantity", json={"quantity": 3}, headers=BOB
    ).json()

    assert updated["name"] == "Brown rice"
    assert updated["expirationDate"] == 1767225600
    assert updated["ownerId"] == "alice"
    assert updated["createdAt"] == created["createdAt"]
    assert quantity["quantity"] == 3
    assert quantity["updatedAt"] > updated["updatedAt"]


def test_update_missing_item(container) -> None:
    response = _client(container).patch(
        "/food-items/missing/quantity", json={"quantity": 3}, headers=ALICE
    )

    assert response.status_code == 404


def test_delete_item(container) -> None:
    client = _client(container)
    created = _create(client)

    deleted = client.delete(f"/food-items/{created['id']}", headers=ALICE)
    again = client.delete(f"/food-items/{created['id']}", headers=ALICE)

    assert deleted.json() == created
    assert again.status_code == 404


def test_share_moves_item_to_shared_pool(container) -> None:
    client = _client(container)
    created = _create(client)
    client.patch(
        f"/food-items/{created['id']}/quantity", json={"quantity": 3}, headers=ALICE
    )

    shared = client.post(f"/food-items/{created['id']}/share", headers=ALICE)
    lookup = client.get(f"/food-items/{created['id']}", headers=ALICE)
    pool = client.get("/shared-food-items", headers=BOB).json()["items"]

    assert shared.status_code == 200
    assert lookup.status_code == 404
    assert len(pool) == 1
    assert pool[0]["id"] == created["id"]
    assert pool[0]["quantity"] == 3


def test_unauthorized_uses_error_envelope(container) -> None:
    response = _client(container).get("/food-items")

    assert response.status_code == 401
    assert response.json() == {
        "error": {
            "type": "Unauthorized",
            "message": "Missing or unknown API token",
        }
    }


def test_oversized_quantity_is_a_validation_error(settings) -> None:
    container = build_container(settings)
    client = _client(container)

    response = client.post(
        "/food-items",
        json={"name": "Rice", "quantity": 10**30, "expirationDate": "2025-06-01"},
        headers=ALICE,
    )

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "ValidationError"
    assert client.get("/food-items", headers=ALICE).json() == {"items": []}
    asyncio.run(container.close_resources())


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Rice", "quantity": True, "expirationDate": "2025-06-01"},
        {"name": "Rice", "quantity": "7", "expirationDate": "2025-06-01"},
        {"name": "Rice", "quantity": 7, "expirationDate": True},
        {"name": 5, "quantity": 7, "expirationDate": "2025-06-01"},
    ],
)
def test_create_does_not_coerce_field_types(container, body) -> None:
    client = _client(container)

    response = client.post("/food-items", json=body, headers=ALICE)

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "ValidationError"
    assert client.get("/food-items", headers=ALICE).json() == {"items": []}


@pytest.mark.parametrize("quantity", [True, "3"])
def test_quantity_update_does_not_coerce_field_types(container, quantity) -> None:
    client = _client(container)
    created = _create(client)

    response = client.patch(
        f"/food-items/{created['id']}/quantity",
        json={"quantity": quantity},
        headers=ALICE,
    )

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "ValidationError"
    assert client.get(f"/food-items/{created['id']}", headers=ALICE).json() == created

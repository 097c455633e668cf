import pytest


def test_create_item_defaults_to_available(client, make_category):
    category = make_category("Drinks")

    response = client.post(
        "/api/admin/items",
        json={"name": " Cola ", "price": 2.5, "categoryId": category["id"]},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["name"] == "Cola"
    assert body["price"] == 2.5
    assert body["categoryId"] == category["id"]
    assert body["available"] is True


def test_create_item_accepts_zero_price(client, make_category):
    category = make_category("Extras")

    response = client.post(
        "/api/admin/items",
        json={"name": "Tap water", "price": 0, "categoryId": category["id"]},
    )

    assert response.status_code == 201
    assert response.json()["price"] == 0


@pytest.mark.parametrize("missing", ["name", "price", "categoryId"])
def test_create_item_requires_fields(client, make_category, missing):
    category = make_category("Drinks")
    body = {"name": "Cola", "price": 2.5, "categoryId": category["id"]}
    del body[missing]

    response = client.post("/api/admin/items", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_create_item_rejects_unknown_category(client):
    response = client.post(
        "/api/admin/items",
        json={"name": "Cola", "price": 2.5, "categoryId": "does-not-exist"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "invalid categoryId"


def test_create_item_rejects_non_numeric_price(client, make_category):
    category = make_category("Drinks")

    response = client.post(
        "/api/admin/items",
        json={"name": "Cola", "price": "cheap", "categoryId": category["id"]},
    )

    assert response.status_code == 400


def test_update_item_availability_only(client, make_category, make_item):
    category = make_category("Drinks")
    item = make_item(category["id"], "Cola", 2.5)
    client.put(f"/api/admin/items/{item['id']}", json={"available": False})

    response = client.put(f"/api/admin/items/{item['id']}", json={"available": True})

    assert response.status_code == 200
    assert response.json() == {**item, "available": True}


def test_update_item_fields(client, make_category, make_item):
    category = make_category("Drinks")
    item = make_item(category["id"], "Cola", 2.5)

    response = client.put(
        f"/api/admin/items/{item['id']}",
        json={"name": "Diet Cola", "price": 2.75},
    )

    assert response.json()["name"] == "Diet Cola"
    assert response.json()["price"] == 2.75
    assert response.json()["categoryId"] == category["id"]


def test_update_item_moves_to_another_category(client, make_category, make_item):
    drinks = make_category("Drinks")
    soft = make_category("Soft drinks")
    item = make_item(drinks["id"])

    response = client.put(f"/api/admin/items/{item['id']}", json={"categoryId": soft["id"]})

    assert response.status_code == 200
    assert response.json()["categoryId"] == soft["id"]


def test_update_item_rejects_unknown_category(client, make_category, make_item):
    category = make_category("Drinks")
    item = make_item(category["id"])

    response = client.put(f"/api/admin/items/{item['id']}", json={"categoryId": "nope"})

    assert response.status_code == 400
    assert response.json()["detail"] == "invalid categoryId"
    items = client.get("/api/admin/menu").json()["items"]
    assert items[0]["categoryId"] == category["id"]


def test_update_unknown_item(client):
    response = client.put("/api/admin/items/missing", json={"available": True})

    assert response.status_code == 404


def test_delete_item(client, make_category, make_item):
    category = make_category("Drinks")
    cola = make_item(category["id"], "Cola")
    water = make_item(category["id"], "Water")

    response = client.delete(f"/api/admin/items/{cola['id']}")

    assert response.status_code == 204
    assert client.get("/api/admin/menu").json()["items"] == [water]
    assert client.delete(f"/api/admin/items/{cola['id']}").status_code == 404

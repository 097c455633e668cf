from restaurant_api.models import new_category, new_menu_item


def test_customer_root(client):
    response = client.get("/api/")

    assert response.status_code == 200
    assert response.json() == {"message": "Customer API is working"}


def test_public_menu_empty(client):
    assert client.get("/api/menu").json() == []


def test_availability_toggle_controls_public_menu(client, make_category, make_item):
    drinks = make_category("Drinks")
    assert drinks["description"] == ""
    cola = make_item(drinks["id"], "Cola", 2.5)
    assert cola["available"] is True

    client.put(f"/api/admin/items/{cola['id']}", json={"available": False})
    assert client.get("/api/menu").json() == []

    client.put(f"/api/admin/items/{cola['id']}", json={"available": True})
    assert client.get("/api/menu").json() == [
        {
            "id": cola["id"],
            "name": "Cola",
            "description": "",
            "price": 2.5,
            "category": "Drinks",
            "tags": [],
        }
    ]


def test_public_menu_excludes_every_unavailable_item(client, make_category, make_item):
    category = make_category("Mains")
    items = [make_item(category["id"], f"Dish {n}", 10.0 + n) for n in range(4)]
    for item in items[::2]:
        client.put(f"/api/admin/items/{item['id']}", json={"available": False})

    names = [entry["name"] for entry in client.get("/api/menu").json()]

    assert names == ["Dish 1", "Dish 3"]


def test_public_item_description_comes_from_category(client, make_category, make_item):
    category = make_category("Pizza", description="Stone-baked")
    make_item(category["id"], "Margherita", 14.99)

    entry = client.get("/api/menu").json()[0]

    assert entry["description"] == "Stone-baked"
    assert entry["category"] == "Pizza"


def test_inactive_category_does_not_hide_available_items(client, make_category, make_item):
    category = make_category("Seasonal")
    make_item(category["id"], "Pumpkin soup", 6.0)
    client.put(f"/api/admin/categories/{category['id']}", json={"isActive": False})

    assert [e["name"] for e in client.get("/api/menu").json()] == ["Pumpkin soup"]


async def test_orphaned_item_is_uncategorized(customer_service, repositories):
    drinks = await repositories.categories.add(new_category("Drinks", "Cold"))
    await repositories.items.add(new_menu_item("Cola", 2.5, drinks.id))
    orphan = await repositories.items.add(new_menu_item("Lemonade", 3.0, "gone"))

    menu = await customer_service.public_menu()

    assert menu[1] == {
        "id": orphan.id,
        "name": "Lemonade",
        "description": "",
        "price": 3.0,
        "category": "Uncategorized",
        "tags": [],
    }
    assert menu[0]["category"] == "Drinks"
    assert menu[0]["description"] == "Cold"


async def test_items_orphaned_by_partial_cascade(admin_service, customer_service, repositories):
    """Category removed but its items left behind: they stay on the menu."""
    drinks = await repositories.categories.add(new_category("Drinks"))
    await repositories.items.add(new_menu_item("Cola", 2.5, drinks.id))

    await repositories.categories.delete(drinks.id)

    menu = await customer_service.public_menu()
    assert [(e["name"], e["category"]) for e in menu] == [("Cola", "Uncategorized")]
    assert (await admin_service.list_menu())["items"][0]["categoryId"] == drinks.id

"""
FoodHub Backend — API Endpoint Tests
======================================

What:  End-to-end tests through the ASGI app against a throwaway SQLite
       database (see conftest.db_tables).
How:   httpx AsyncClient with ASGITransport; every test starts from an
       empty schema.
"""

import uuid

import pytest

pytestmark = pytest.mark.asyncio


def _food(name, price, category="vegetarian", **extra):
    body = {
        "name": name,
        "description": f"{name} description",
        "price": price,
        "image": "/uploads/2024/01/15/food.jpg",
        "category": category,
        "ingredients": ["salt", "love"],
        "rating": 4,
        "servings": 1,
    }
    body.update(extra)
    return body


# ── Users & Login ─────────────────────────────────────────────────────────


async def test_register_login_and_list_users(test_client):
    response = await test_client.post(
        "/api/users",
        json={"username": "ann", "email": "a@x.com", "password": "secret1"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["user"]["username"] == "ann"
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]

    response = await test_client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 200
    login = response.json()
    assert login["message"] == "Login Successfully"
    assert login["user"]["userName"] == "ann"
    token = login["token"]

    response = await test_client.get("/api/users", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert [u["username"] for u in response.json()] == ["ann"]

    response = await test_client.get("/api/users")
    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_duplicate_email_and_username_rejected(test_client, registered_user):
    response = await test_client.post(
        "/api/users",
        json={"username": "other", "email": "ann@example.com", "password": "secret1"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists"

    response = await test_client.post(
        "/api/users",
        json={"username": "ann", "email": "fresh@example.com", "password": "secret1"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"


async def test_registration_schema_errors_are_400(test_client):
    response = await test_client.post(
        "/api/users",
        json={"username": "an", "email": "not-an-email", "password": "123"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "validation_error"
    assert len(body["details"]["errors"]) == 3


async def test_login_failures_share_one_message(test_client, registered_user):
    unknown = await test_client.post("/api/login", json={"email": "nobody@example.com", "password": "secret1"})
    wrong = await test_client.post("/api/login", json={"email": "ann@example.com", "password": "nope123"})

    assert unknown.status_code == wrong.status_code == 400
    assert unknown.json()["message"] == wrong.json()["message"] == "Invalid Credentials"


async def test_invalid_token_rejected(test_client, registered_user):
    response = await test_client.get("/api/users", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_user_get_update_delete(test_client, registered_user, auth_headers):
    user_id = registered_user["id"]

    response = await test_client.get(f"/api/users/{user_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "ann@example.com"

    response = await test_client.put(
        f"/api/users/{user_id}",
        json={"lastName": "Smith", "profilePic": "/uploads/ann.png"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    updated = response.json()["user"]
    assert updated["lastName"] == "Smith"
    assert updated["firstName"] == "Ann"
    assert updated["profilePic"] == "/uploads/ann.png"

    response = await test_client.delete(f"/api/users/{user_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}

    response = await test_client.delete(f"/api/users/{user_id}", headers=auth_headers)
    assert response.status_code == 404


async def test_malformed_user_id_is_400(test_client, auth_headers):
    response = await test_client.get("/api/users/not-a-uuid", headers=auth_headers)
    assert response.status_code == 400


# ── Food ──────────────────────────────────────────────────────────────────


async def test_food_requires_token(test_client):
    response = await test_client.get("/api/food")
    assert response.status_code == 401


async def test_create_food_missing_fields(test_client, auth_headers):
    body = _food("Soup", 120)
    del body["image"]

    response = await test_client.post("/api/food", json=body, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Please provide all required fields"


async def test_food_filters_and_pagination(test_client, auth_headers):
    fixtures = [
        _food("Salad", 80, "vegan"),
        _food("Tofu Bowl", 150, "vegan"),
        _food("Paneer", 250, "vegetarian"),
        _food("Chicken", 450, "non-vegetarian", isAvailable=False),
        _food("Cake", 600, "dessert"),
    ]
    for body in fixtures:
        response = await test_client.post("/api/food", json=body, headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["message"] == "Food item added successfully"

    response = await test_client.get(
        "/api/food", params={"minPrice": 100, "maxPrice": 500}, headers=auth_headers
    )
    assert response.status_code == 200
    prices = sorted(item["price"] for item in response.json()["foodItems"])
    assert prices == [150, 250, 450]

    response = await test_client.get("/api/food", params={"category": "vegan"}, headers=auth_headers)
    assert {item["name"] for item in response.json()["foodItems"]} == {"Salad", "Tofu Bowl"}

    response = await test_client.get("/api/food", params={"isAvailable": "false"}, headers=auth_headers)
    assert [item["name"] for item in response.json()["foodItems"]] == ["Chicken"]

    page1 = (await test_client.get("/api/food", params={"limit": 2, "page": 1}, headers=auth_headers)).json()
    page2 = (await test_client.get("/api/food", params={"limit": 2, "page": 2}, headers=auth_headers)).json()
    page3 = (await test_client.get("/api/food", params={"limit": 2, "page": 3}, headers=auth_headers)).json()

    assert page1["pagination"] == {"currentPage": 1, "totalPages": 3, "totalCount": 5, "perPage": 2}
    ids = [item["id"] for page in (page1, page2, page3) for item in page["foodItems"]]
    assert len(ids) == len(set(ids)) == 5


async def test_food_list_rejects_bad_limit(test_client, auth_headers):
    response = await test_client.get("/api/food", params={"limit": 0}, headers=auth_headers)
    assert response.status_code == 400


@pytest.mark.parametrize("path", ["/api/food", "/api/category"])
async def test_listing_rejects_huge_page(test_client, auth_headers, path):
    response = await test_client.get(path, params={"page": 10**19}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


async def test_listing_accepts_last_allowed_page(test_client, auth_headers):
    response = await test_client.get(
        "/api/food", params={"page": 1_000_000, "limit": 100}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["foodItems"] == []


async def test_food_update_get_delete(test_client, auth_headers):
    created = await test_client.post("/api/food", json=_food("Dal", 180), headers=auth_headers)
    food_id = created.json()["savedFoodItem"]["id"]

    response = await test_client.put(f"/api/food/{food_id}", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "No fields to update"

    response = await test_client.get(f"/api/food/{food_id}", headers=auth_headers)
    assert response.json()["price"] == 180

    response = await test_client.put(f"/api/food/{food_id}", json={"price": 200}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["updatedFoodItem"]["price"] == 200
    assert response.json()["updatedFoodItem"]["name"] == "Dal"

    response = await test_client.delete(f"/api/food/{food_id}", headers=auth_headers)
    assert response.status_code == 200

    response = await test_client.delete(f"/api/food/{food_id}", headers=auth_headers)
    assert response.status_code == 404


# ── Categories & Items ────────────────────────────────────────────────────


async def test_category_create_list_and_duplicate(test_client, auth_headers):
    response = await test_client.post("/api/category", json={"categoryName": "Drinks"}, headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["savedCategory"]["categoryName"] == "Drinks"

    response = await test_client.post("/api/category", json={"categoryName": "Drinks"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Category already exists"

    response = await test_client.get("/api/category", headers=auth_headers)
    body = response.json()
    assert [c["categoryName"] for c in body["categories"]] == ["Drinks"]
    assert body["pagination"]["totalCount"] == 1


async def test_item_with_unknown_category_saves_nothing(test_client):
    response = await test_client.post(
        "/api/item",
        json={"name": "Cola", "quantity": 3, "categoryId": str(uuid.uuid4())},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid category ID"

    response = await test_client.post("/api/item", json={"name": "Cola", "categoryId": "bogus"})
    assert response.status_code == 400

    response = await test_client.get("/api/items")
    assert response.json() == []


async def test_item_lifecycle(test_client, auth_headers):
    category = (
        await test_client.post("/api/category", json={"categoryName": "Snacks"}, headers=auth_headers)
    ).json()["savedCategory"]

    response = await test_client.get(f"/api/items/category/{category['id']}")
    assert response.status_code == 404
    assert response.json()["message"] == "No items found for this category"
    assert response.json()["items"] == []

    response = await test_client.post(
        "/api/item",
        json={"name": "Chips", "description": "Salted", "quantity": 10, "categoryId": category["id"]},
    )
    assert response.status_code == 201
    item = response.json()["savedItem"]

    response = await test_client.get("/api/items")
    listed = response.json()
    assert listed[0]["category"]["categoryName"] == "Snacks"

    response = await test_client.get(f"/api/items/category/{category['id']}")
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["Chips"]

    response = await test_client.put(f"/api/item/{item['id']}", json={"quantity": 0})
    assert response.status_code == 200
    assert response.json()["quantity"] == 0

    response = await test_client.get(f"/api/item/{item['id']}")
    assert response.json()["quantity"] == 0

    response = await test_client.delete(f"/api/item/{item['id']}")
    assert response.json() == {"message": "Item deleted"}

    response = await test_client.delete(f"/api/item/{item['id']}")
    assert response.status_code == 404


async def test_items_by_malformed_category_is_400(test_client):
    response = await test_client.get("/api/items/category/not-an-id")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid category ID"


# ── Upload & Health ───────────────────────────────────────────────────────


async def test_upload_and_serve_image(test_client, sample_image_bytes):
    response = await test_client.post(
        "/api/upload",
        files={"image": ("pizza.jpg", sample_image_bytes, "image/jpeg")},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["fileUrl"].startswith("/uploads/")
    assert body["fileUrl"].endswith(body["filename"])

    served = await test_client.get(body["fileUrl"])
    assert served.status_code == 200
    assert served.content == sample_image_bytes


async def test_upload_rejects_non_image(test_client):
    response = await test_client.post(
        "/api/upload",
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


async def test_upload_rejects_script_disguised_as_png(test_client):
    response = await test_client.post(
        "/api/upload",
        files={"image": ("shell.png", b"<?php system($_GET['c']); ?>", "image/png")},
    )
    assert response.status_code == 400
    assert response.json()["details"]["detected_type"] != "image/png"


async def test_upload_requires_image_field(test_client, sample_image_bytes):
    response = await test_client.post(
        "/api/upload",
        files={"file": ("pizza.jpg", sample_image_bytes, "image/jpeg")},
    )
    assert response.status_code == 400


async def test_health(test_client):
    response = await test_client.get("/health")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"
    assert "X-Request-ID" in response.headers

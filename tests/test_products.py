# tests/test_products.py
import uuid

import pytest


def test_create_and_get_product(client, product_payload):
    payload = product_payload(name="Trail Runner", category=["shoes", "sale"], price=129.5)
    resp = client.post("/products", json=payload)
    assert resp.status_code == 201, resp.text
    pid = resp.json()["id"]
    assert uuid.UUID(pid)
    assert resp.headers["location"] == f"/products/{pid}"

    resp = client.get(f"/products/{pid}")
    assert resp.status_code == 200, resp.text
    product = resp.json()["product"]
    assert product["id"] == pid
    assert product["name"] == "Trail Runner"
    assert product["category"] == ["shoes", "sale"]
    assert product["description"] == payload["description"]
    assert product["imageFile"] == payload["imageFile"]
    assert product["price"] == pytest.approx(129.5)


def test_created_ids_are_unique(client, create_product):
    ids = {create_product(name=f"Item {i}") for i in range(5)}
    assert len(ids) == 5


def test_get_missing_product_returns_404(client):
    resp = client.get(f"/products/{uuid.uuid4()}")
    assert resp.status_code == 404
    body = resp.json()
    assert body["status"] == 404
    assert body["title"] == "Not Found"
    assert resp.headers["content-type"].startswith("application/problem+json")


def test_get_product_with_malformed_id_is_bad_request(client):
    resp = client.get("/products/not-a-uuid")
    assert resp.status_code == 400


def test_list_products_returns_each_product_once(client, create_product):
    created = [create_product(name=f"Lamp {i}") for i in range(3)]

    for _ in range(2):
        resp = client.get("/products")
        assert resp.status_code == 200, resp.text
        ids = [p["id"] for p in resp.json()["products"]]
        assert ids == created


def test_list_products_empty(client):
    resp = client.get("/products")
    assert resp.status_code == 200
    assert resp.json() == {"products": []}


def test_get_products_by_category(client, create_product):
    a = create_product(name="A", category=["shoes", "sale"])
    b = create_product(name="B", category=["hats"])

    resp = client.get("/products/category/shoes")
    assert resp.status_code == 200, resp.text
    assert [p["id"] for p in resp.json()["products"]] == [a]

    resp = client.get("/products/category/hats")
    assert [p["id"] for p in resp.json()["products"]] == [b]

    # membership is exact, not substring or case-insensitive
    assert client.get("/products/category/sho").json()["products"] == []
    assert client.get("/products/category/Shoes").json()["products"] == []


@pytest.mark.parametrize(
    "override",
    [
        {"name": ""},
        {"name": "   "},
        {"category": []},
        {"price": 0},
        {"price": -5},
        {"description": ""},
        {"imageFile": ""},
    ],
)
def test_create_rejects_invalid_payload(client, product_payload, override):
    payload = {**product_payload(), **override}
    resp = client.post("/products", json=payload)
    assert resp.status_code == 400, resp.text
    body = resp.json()
    assert body["status"] == 400
    assert body["errors"]
    assert client.get("/products").json()["products"] == []


def test_create_requires_all_fields(client):
    resp = client.post("/products", json={"name": "Only a name"})
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert "body.category" in fields
    assert "body.price" in fields
    assert "body.description" in fields
    assert "body.imageFile" in fields


@pytest.mark.parametrize("missing", ["description", "imageFile"])
def test_create_without_description_or_image_is_rejected(client, product_payload, missing):
    payload = product_payload()
    del payload[missing]
    resp = client.post("/products", json=payload)
    assert resp.status_code == 400, resp.text
    assert client.get("/products").json()["products"] == []


def test_update_product(client, create_product, product_payload):
    pid = create_product(name="Old", category=["misc"], price=5)

    resp = client.put(f"/products/{pid}", json=product_payload(name="New", category=["books"], price=7.25))
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"isSuccess": True}

    product = client.get(f"/products/{pid}").json()["product"]
    assert product["id"] == pid
    assert product["name"] == "New"
    assert product["category"] == ["books"]
    assert product["price"] == pytest.approx(7.25)


def test_update_missing_product_returns_404(client, product_payload):
    resp = client.put(f"/products/{uuid.uuid4()}", json=product_payload())
    assert resp.status_code == 404


def test_delete_product(client, create_product):
    keep = create_product(name="Keep")
    gone = create_product(name="Gone")

    resp = client.delete(f"/products/{gone}")
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"isSuccess": True}

    assert client.get(f"/products/{gone}").status_code == 404
    assert [p["id"] for p in client.get("/products").json()["products"]] == [keep]
    assert client.delete(f"/products/{gone}").status_code == 404

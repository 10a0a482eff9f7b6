# tests/test_app.py
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_sender
from app.main import app
from app.services.seed import initial_products, seed_initial_products


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json() == {"status": "ok"}


def test_security_and_request_id_headers(client):
    resp = client.get("/health")
    assert resp.headers["x-content-type-options"] == "nosniff"
    assert resp.headers["x-frame-options"] == "DENY"
    assert resp.headers["x-request-id"]

    resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["x-request-id"] == "abc-123"


@pytest.mark.parametrize("supplied", ["x" * 129, "bad id", "evil\\nline", "a_b"])
def test_malformed_request_id_is_replaced(client, supplied):
    resp = client.get("/health", headers={"X-Request-ID": supplied})
    request_id = resp.headers["x-request-id"]
    assert request_id != supplied
    assert len(request_id) == 32


def test_unknown_route_is_problem_404(client):
    resp = client.get("/no-such-route")
    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("application/problem+json")
    body = resp.json()
    assert body["status"] == 404
    assert body["title"] == "Not Found"
    assert body["instance"] == "/no-such-route"
    assert resp.headers["x-request-id"]


def test_wrong_method_is_problem_405_with_allow(client):
    resp = client.patch("/products")
    assert resp.status_code == 405
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.json()["title"] == "Method Not Allowed"
    # the router reports the methods of the first route matching the path
    assert "GET" in resp.headers["allow"]


def test_unhandled_error_becomes_problem_500(doc_store):
    class BrokenSender:
        async def send(self, request):
            raise RuntimeError("disk on fire")

    app.dependency_overrides[get_sender] = lambda: BrokenSender()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/products")
    finally:
        app.dependency_overrides.pop(get_sender, None)

    assert resp.status_code == 500
    body = resp.json()
    assert body["title"] == "Internal Server Error"
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.headers["x-request-id"]
    assert resp.headers["x-content-type-options"] == "nosniff"
    # internal details are not leaked
    assert "disk on fire" not in resp.text


def test_seed_fills_empty_store_once(doc_store):
    assert seed_initial_products(doc_store) == len(initial_products())
    assert seed_initial_products(doc_store) == 0
    assert doc_store.count("products") == len(initial_products())


def test_seeded_products_are_served(client, doc_store):
    seed_initial_products(doc_store)
    products = client.get("/products").json()["products"]
    assert [p["name"] for p in products][:2] == ["IPhone X", "Samsung 10"]

    cameras = client.get("/products/category/Camera").json()["products"]
    assert [p["name"] for p in cameras] == ["Panasonic Lumix"]

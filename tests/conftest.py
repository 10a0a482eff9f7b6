# tests/conftest.py
import os
import sys

import pytest
from fastapi.testclient import TestClient

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app.main import app  # noqa: E402
from app.api.deps import get_store  # noqa: E402
from app.database import DocumentStore  # noqa: E402


@pytest.fixture
def doc_store(tmp_path):
    """
    Isolated document store on a per-test temp directory.
    """
    return DocumentStore(tmp_path / "data")


@pytest.fixture
def client(doc_store):
    app.dependency_overrides[get_store] = lambda: doc_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def product_payload():
    """
    Return a callable building a create/update body.
    Usage: body = product_payload(name="Hat", category=["hats"])
    """
    def _fn(name="Test Wooden Bowl", category=None, description="Handmade wooden bowl",
            image_file="bowl.png", price=19.99):
        return {
            "name": name,
            "category": ["kitchen"] if category is None else category,
            "description": description,
            "imageFile": image_file,
            "price": price,
        }
    return _fn


@pytest.fixture
def create_product(client, product_payload):
    """
    Create a product through the API and return its id.
    Usage: pid = create_product(name="Hat", category=["hats"])
    """
    def _fn(**kwargs):
        resp = client.post("/products", json=product_payload(**kwargs))
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]
    return _fn

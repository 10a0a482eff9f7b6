# app/services/seed.py
"""Initial catalog used to populate an empty products collection."""
import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from app.database import DocumentStore
from app.models.product import Product

logger = logging.getLogger(__name__)


def initial_products() -> List[Product]:
    return [
        Product(
            id=UUID("5334c996-8457-4cf0-815c-ed2b77c4ff61"),
            name="IPhone X",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-1.png",
            price=Decimal("950.00"),
            category=["Smart Phone"],
        ),
        Product(
            id=UUID("c67d6323-e8b1-4bdf-9a75-b0d0d2e7e914"),
            name="Samsung 10",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-2.png",
            price=Decimal("840.00"),
            category=["Smart Phone"],
        ),
        Product(
            id=UUID("4f136e9f-ff8c-4c1f-9a33-d12f689bdab8"),
            name="Huawei Plus",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-3.png",
            price=Decimal("650.00"),
            category=["White Appliances"],
        ),
        Product(
            id=UUID("6ec1297b-ec0a-4aa1-be25-6726e3b51a27"),
            name="Xiaomi Mi 9",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-4.png",
            price=Decimal("470.00"),
            category=["White Appliances"],
        ),
        Product(
            id=UUID("b786103d-c621-4f5a-b498-23452610f88c"),
            name="HTC U11+ Plus",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-5.png",
            price=Decimal("380.00"),
            category=["Smart Phone"],
        ),
        Product(
            id=UUID("c4bbc4a2-4555-45d8-97cc-2a99b2167bff"),
            name="LG G7 ThinQ",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-6.png",
            price=Decimal("240.00"),
            category=["Home Kitchen"],
        ),
        Product(
            id=UUID("93170c85-7795-489c-8e8f-7dcf3b4f4188"),
            name="Panasonic Lumix",
            description="This phone is the company's biggest change to its flagship smartphone in years. It includes a borderless.",
            image_file="product-6.png",
            price=Decimal("240.00"),
            category=["Camera"],
        ),
    ]


def seed_initial_products(store: DocumentStore) -> int:
    """
    Store the initial catalog if the products collection is empty.
    Returns the number of products written (0 when data already exists).
    """
    if store.count(Product.collection) > 0:
        logger.info("Products collection already has data; skipping seed")
        return 0
    products = initial_products()
    store.commit(Product.collection, {str(p.id): p.to_dict() for p in products}, set())
    logger.info("Seeded %d initial products", len(products))
    return len(products)

"""Creates the data directory and seeds the initial product catalog."""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.config import settings  # noqa: E402
from app.database import DocumentStore  # noqa: E402
from app.services.seed import seed_initial_products  # noqa: E402


os.makedirs(settings.DATA_DIR, exist_ok=True)

written = seed_initial_products(DocumentStore(settings.DATA_DIR))
if written:
    print(f"Seeded {written} products into {settings.DATA_DIR}")
else:
    print(f"{settings.DATA_DIR} already has products")

# app/models/product.py
from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Dict, List, Optional
from uuid import UUID


@dataclass
class Product:
    """
    Catalog product document. The document store keeps each product as one
    JSON body, so these helpers convert to and from plain JSON types.
    `id` stays None until the product is first stored in a session.
    """
    collection: ClassVar[str] = "products"

    id: Optional[UUID] = None
    name: str = ""
    category: List[str] = field(default_factory=list)
    description: str = ""
    image_file: str = ""
    price: Decimal = Decimal("0")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        if d is None:
            raise ValueError("Cannot construct Product from None")
        id_raw = d.get("id")
        category = d.get("category") or []
        if isinstance(category, str):
            category = [category]

        # price is persisted as a decimal string to stay exact
        try:
            price = Decimal(str(d.get("price"))) if d.get("price") not in (None, "") else Decimal("0")
        except InvalidOperation as e:
            raise ValueError(f"Invalid price for product {id_raw}: {d.get('price')!r}") from e

        return cls(
            id=UUID(str(id_raw)) if id_raw else None,
            name=str(d.get("name") or ""),
            category=[str(c) for c in category],
            description=str(d.get("description") or ""),
            image_file=str(d.get("image_file") or ""),
            price=price,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id) if self.id else None,
            "name": self.name,
            "category": list(self.category),
            "description": self.description,
            "image_file": self.image_file,
            "price": str(self.price),
        }

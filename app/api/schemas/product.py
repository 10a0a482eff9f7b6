# app/api/schemas/product.py
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from app.models.product import Product


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductWrite(CamelModel):
    name: str = Field(..., min_length=1)
    category: List[str] = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_file: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def _labels_not_blank(cls, v: List[str]) -> List[str]:
        if any(not label.strip() for label in v):
            raise ValueError("category labels must not be blank")
        return v


class CreateProductRequest(ProductWrite):
    pass


class UpdateProductRequest(ProductWrite):
    pass


class CreateProductResponse(CamelModel):
    id: UUID


class ProductOut(CamelModel):
    id: UUID
    name: str
    category: List[str]
    description: str
    image_file: str
    price: Decimal

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_product(cls, product: Product) -> "ProductOut":
        return cls(
            id=product.id,
            name=product.name,
            category=list(product.category),
            description=product.description,
            image_file=product.image_file,
            price=product.price,
        )


class GetProductByIdResponse(CamelModel):
    product: ProductOut


class GetProductsResponse(CamelModel):
    products: List[ProductOut]


class GetProductByCategoryResponse(CamelModel):
    products: List[ProductOut]


class UpdateProductResponse(CamelModel):
    is_success: bool


class DeleteProductResponse(CamelModel):
    is_success: bool

# app/services/products.py
"""
Product commands, queries and their handlers. Each handler performs one
document-session operation and returns a result record.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List
from uuid import UUID

from app.core.cqrs import Command, CommandHandler, Query, QueryHandler
from app.core.exceptions import ProductNotFoundError
from app.core.mediator import HandlerRegistry
from app.models.product import Product

logger = logging.getLogger(__name__)


# --- create ---

@dataclass(frozen=True)
class CreateProductResult:
    id: UUID


@dataclass(frozen=True)
class CreateProductCommand(Command[CreateProductResult]):
    name: str
    category: List[str] = field(default_factory=list)
    description: str = ""
    image_file: str = ""
    price: Decimal = Decimal("0")


class CreateProductCommandHandler(CommandHandler[CreateProductCommand, CreateProductResult]):
    async def handle(self, command: CreateProductCommand) -> CreateProductResult:
        product = Product(
            name=command.name,
            category=list(command.category),
            description=command.description,
            image_file=command.image_file,
            price=command.price,
        )
        # id is assigned by the session
        self.session.store(product)
        await self.session.save_changes()
        return CreateProductResult(id=product.id)


# --- get by id ---

@dataclass(frozen=True)
class GetProductByIdResult:
    product: Product


@dataclass(frozen=True)
class GetProductByIdQuery(Query[GetProductByIdResult]):
    id: UUID


class GetProductByIdQueryHandler(QueryHandler[GetProductByIdQuery, GetProductByIdResult]):
    async def handle(self, query: GetProductByIdQuery) -> GetProductByIdResult:
        logger.info("GetProductByIdQueryHandler.handle called with %r", query)
        product = await self.session.load(Product, query.id)
        if product is None:
            raise ProductNotFoundError(query.id)
        return GetProductByIdResult(product=product)


# --- list / filter ---

@dataclass(frozen=True)
class GetProductsResult:
    products: List[Product]


@dataclass(frozen=True)
class GetProductsQuery(Query[GetProductsResult]):
    pass


class GetProductsQueryHandler(QueryHandler[GetProductsQuery, GetProductsResult]):
    async def handle(self, query: GetProductsQuery) -> GetProductsResult:
        logger.info("GetProductsQueryHandler.handle called with %r", query)
        products = await self.session.query(Product)
        return GetProductsResult(products=products)


@dataclass(frozen=True)
class GetProductByCategoryResult:
    products: List[Product]


@dataclass(frozen=True)
class GetProductByCategoryQuery(Query[GetProductByCategoryResult]):
    category: str


class GetProductByCategoryQueryHandler(QueryHandler[GetProductByCategoryQuery, GetProductByCategoryResult]):
    async def handle(self, query: GetProductByCategoryQuery) -> GetProductByCategoryResult:
        logger.info("GetProductByCategoryQueryHandler.handle called with %r", query)
        # exact, case-sensitive label membership
        products = await self.session.query(Product, lambda p: query.category in p.category)
        return GetProductByCategoryResult(products=products)


# --- update / delete ---

@dataclass(frozen=True)
class UpdateProductResult:
    is_success: bool


@dataclass(frozen=True)
class UpdateProductCommand(Command[UpdateProductResult]):
    id: UUID
    name: str
    category: List[str] = field(default_factory=list)
    description: str = ""
    image_file: str = ""
    price: Decimal = Decimal("0")


class UpdateProductCommandHandler(CommandHandler[UpdateProductCommand, UpdateProductResult]):
    async def handle(self, command: UpdateProductCommand) -> UpdateProductResult:
        product = await self.session.load(Product, command.id)
        if product is None:
            raise ProductNotFoundError(command.id)

        product.name = command.name
        product.category = list(command.category)
        product.description = command.description
        product.image_file = command.image_file
        product.price = command.price

        self.session.store(product)
        await self.session.save_changes()
        return UpdateProductResult(is_success=True)


@dataclass(frozen=True)
class DeleteProductResult:
    is_success: bool


@dataclass(frozen=True)
class DeleteProductCommand(Command[DeleteProductResult]):
    id: UUID


class DeleteProductCommandHandler(CommandHandler[DeleteProductCommand, DeleteProductResult]):
    async def handle(self, command: DeleteProductCommand) -> DeleteProductResult:
        product = await self.session.load(Product, command.id)
        if product is None:
            raise ProductNotFoundError(command.id)
        self.session.delete(Product, command.id)
        await self.session.save_changes()
        return DeleteProductResult(is_success=True)


def register_product_handlers(registry: HandlerRegistry) -> HandlerRegistry:
    registry.register(CreateProductCommand, CreateProductCommandHandler)
    registry.register(GetProductByIdQuery, GetProductByIdQueryHandler)
    registry.register(GetProductsQuery, GetProductsQueryHandler)
    registry.register(GetProductByCategoryQuery, GetProductByCategoryQueryHandler)
    registry.register(UpdateProductCommand, UpdateProductCommandHandler)
    registry.register(DeleteProductCommand, DeleteProductCommandHandler)
    return registry

# app/api/routes/products.py
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_sender
from app.api.schemas.product import (
    CreateProductRequest,
    CreateProductResponse,
    DeleteProductResponse,
    GetProductByCategoryResponse,
    GetProductByIdResponse,
    GetProductsResponse,
    ProductOut,
    UpdateProductRequest,
    UpdateProductResponse,
)
from app.core.mediator import Mediator
from app.services.products import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductByCategoryQuery,
    GetProductByIdQuery,
    GetProductsQuery,
    UpdateProductCommand,
)

router = APIRouter(prefix="/products", tags=["products"])

PROBLEM_400 = {status.HTTP_400_BAD_REQUEST: {"description": "Bad Request (problem details)"}}
PROBLEM_404 = {status.HTTP_404_NOT_FOUND: {"description": "Product not found (problem details)"}}


@router.post(
    "",
    name="CreateProduct",
    summary="Create Product",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateProductResponse,
    responses=PROBLEM_400,
)
async def create_product(payload: CreateProductRequest, response: Response, sender: Mediator = Depends(get_sender)):
    command = CreateProductCommand(**payload.model_dump())
    result = await sender.send(command)
    response.headers["Location"] = f"/products/{result.id}"
    return CreateProductResponse(id=result.id)


@router.get(
    "",
    name="GetProducts",
    summary="Get Products",
    response_model=GetProductsResponse,
    responses=PROBLEM_400,
)
async def get_products(sender: Mediator = Depends(get_sender)):
    result = await sender.send(GetProductsQuery())
    return GetProductsResponse(products=[ProductOut.from_product(p) for p in result.products])


@router.get(
    "/category/{category}",
    name="GetProductByCategory",
    summary="Get Product By Category",
    response_model=GetProductByCategoryResponse,
    responses=PROBLEM_400,
)
async def get_product_by_category(category: str, sender: Mediator = Depends(get_sender)):
    result = await sender.send(GetProductByCategoryQuery(category))
    return GetProductByCategoryResponse(products=[ProductOut.from_product(p) for p in result.products])


@router.get(
    "/{product_id}",
    name="GetProductById",
    summary="Get Product By Id",
    response_model=GetProductByIdResponse,
    responses={**PROBLEM_400, **PROBLEM_404},
)
async def get_product_by_id(product_id: UUID, sender: Mediator = Depends(get_sender)):
    result = await sender.send(GetProductByIdQuery(product_id))
    return GetProductByIdResponse(product=ProductOut.from_product(result.product))


@router.put(
    "/{product_id}",
    name="UpdateProduct",
    summary="Update Product",
    response_model=UpdateProductResponse,
    responses={**PROBLEM_400, **PROBLEM_404},
)
async def update_product(product_id: UUID, payload: UpdateProductRequest, sender: Mediator = Depends(get_sender)):
    result = await sender.send(UpdateProductCommand(id=product_id, **payload.model_dump()))
    return UpdateProductResponse(is_success=result.is_success)


@router.delete(
    "/{product_id}",
    name="DeleteProduct",
    summary="Delete Product",
    response_model=DeleteProductResponse,
    responses={**PROBLEM_400, **PROBLEM_404},
)
async def delete_product(product_id: UUID, sender: Mediator = Depends(get_sender)):
    result = await sender.send(DeleteProductCommand(product_id))
    return DeleteProductResponse(is_success=result.is_success)

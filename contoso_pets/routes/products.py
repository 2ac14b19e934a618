"""
ContosoPets API — Products Route Handlers
==========================================

What:  CRUD endpoints for the products resource.
How:   Each handler takes a ProductService from get_product_service, calls
       one operation, and shapes the HTTP response (status, headers).
       Errors raised by the service are turned into responses by the
       handlers registered in main.py.

    GET    /products          → 200 + list
    GET    /products/{id}     → 200 + product | 404
    POST   /products          → 201 + product + Location | 409
    PUT    /products/{id}     → 204 | 400 | 404
    DELETE /products/{id}     → 204 | 404
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from contoso_pets.dependencies import get_product_service
from contoso_pets.schemas.product import (
    PRODUCT_ID_MAX,
    PRODUCT_ID_MIN,
    ErrorResponse,
    ProductPayload,
    ProductResponse,
)
from contoso_pets.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    return await service.list_products()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Get a single product by ID",
)
async def get_product(
    product_id: int = Path(ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX, description="Product identifier"),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return await service.get_product(product_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductResponse,
    responses={
        409: {"description": "A product with this ID already exists", "model": ErrorResponse},
    },
    summary="Create a product",
    description=(
        "Stores the product under the ID given in the body. The response carries "
        "a Location header pointing at GET /products/{id}."
    ),
)
async def create_product(
    payload: ProductPayload,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    created = await service.create_product(payload)
    response.headers["Location"] = str(request.url_for("get_product", product_id=created.id))
    return created


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Path ID and body ID differ", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Replace a product's fields",
)
async def update_product(
    payload: ProductPayload,
    product_id: int = Path(ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX, description="Product identifier"),
    service: ProductService = Depends(get_product_service),
) -> Response:
    await service.update_product(product_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: int = Path(ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX, description="Product identifier"),
    service: ProductService = Depends(get_product_service),
) -> Response:
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

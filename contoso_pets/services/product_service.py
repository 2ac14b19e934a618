"""
ContosoPets API — Product Service
==================================

What:  Maps product requests onto store calls and decides the outcome of
       each one (found, created, updated, deleted, or an error).
How:   Receives a ProductStore at construction; raises application
       exceptions that the global handlers turn into status codes.
Who:   Built per request by contoso_pets.dependencies.get_product_service;
       called by the products router.

Outcomes:
    list_products   → list (never fails on an empty store)
    get_product     → product | NotFoundError
    create_product  → product | ConflictError
    update_product  → None    | BadRequestError | NotFoundError
    delete_product  → None    | NotFoundError
"""

import logging
from typing import List

from contoso_pets.exceptions import BadRequestError, ConflictError, NotFoundError
from contoso_pets.models.product import Product
from contoso_pets.schemas.product import ProductPayload, ProductResponse
from contoso_pets.stores.base import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Request-to-persistence mapping for the products resource.

    Every operation works against the one store handed in, so a service
    instance lives exactly as long as the request that created it.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    async def list_products(self) -> List[ProductResponse]:
        """Return every stored product in insertion order."""
        products = await self.store.all()
        return [ProductResponse.model_validate(p) for p in products]

    async def get_product(self, product_id: int) -> ProductResponse:
        """
        Retrieve a single product by id.

        Raises:
            NotFoundError: No product with this id (→ 404)
        """
        product = await self.store.find(product_id)
        if product is None:
            raise NotFoundError(resource="product", resource_id=product_id)
        return ProductResponse.model_validate(product)

    async def create_product(self, payload: ProductPayload) -> ProductResponse:
        """
        Insert a product under the caller's id and persist it.

        Ids are never generated server-side. An id that is already stored is
        rejected and the existing record is left untouched.

        Raises:
            ConflictError: The id is already stored (→ 409)
        """
        if await self.store.find(payload.id) is not None:
            logger.warning("Rejected create: product %d already exists", payload.id)
            raise ConflictError(resource="product", resource_id=payload.id)

        product = Product(id=payload.id, name=payload.name, price=payload.price)
        self.store.add(product)
        try:
            await self.store.save()
        except ConflictError:
            # Another request inserted the same id between find and save
            logger.warning("Rejected create: product %d inserted concurrently", payload.id)
            raise ConflictError(resource="product", resource_id=payload.id) from None

        logger.info("Product %d created", product.id)
        return ProductResponse.model_validate(product)

    async def update_product(self, product_id: int, payload: ProductPayload) -> None:
        """
        Overwrite every field of an existing product from `payload`.

        Raises:
            BadRequestError: Path id and body id differ; nothing is changed (→ 400)
            NotFoundError: No product with this id (→ 404)
        """
        if product_id != payload.id:
            logger.warning(
                "Rejected update: path id %d does not match body id %d",
                product_id,
                payload.id,
            )
            raise BadRequestError(
                message=f"Path id '{product_id}' does not match product id '{payload.id}'",
                context={"path_id": product_id, "body_id": payload.id},
            )

        try:
            existing = await self.store.first_matching(Product.id == payload.id)
        except NotFoundError:
            raise NotFoundError(resource="product", resource_id=product_id) from None

        existing.name = payload.name
        existing.price = payload.price
        try:
            await self.store.save()
        except NotFoundError:
            logger.warning("Product %d was deleted before the update was saved", product_id)
            raise NotFoundError(resource="product", resource_id=product_id) from None
        logger.info("Product %d updated", product_id)

    async def delete_product(self, product_id: int) -> None:
        """
        Remove a product permanently.

        Raises:
            NotFoundError: No product with this id; nothing is changed (→ 404)
        """
        product = await self.store.find(product_id)
        if product is None:
            raise NotFoundError(resource="product", resource_id=product_id)

        await self.store.remove(product)
        await self.store.save()
        logger.info("Product %d deleted", product_id)

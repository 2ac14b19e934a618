"""
ContosoPets API — SQLAlchemy Product Store
===========================================

What:  ProductStore implementation over a single AsyncSession.
Who:   Built per request by contoso_pets.dependencies.get_product_store.

Error translation:
    IntegrityError on save  → ConflictError (duplicate primary key)
    StaleDataError on save  → NotFoundError (row deleted concurrently)
    Any other SQLAlchemyError → DatabaseError (generic 500 for the client)
    The session is rolled back before the translated error is raised.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from contoso_pets.exceptions import ConflictError, DatabaseError, NotFoundError
from contoso_pets.models.product import Product
from contoso_pets.stores.base import ProductStore

logger = logging.getLogger(__name__)


@contextmanager
def _database_errors(operation: str) -> Iterator[None]:
    """Wrap SQLAlchemy failures raised inside the block in DatabaseError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__},
        ) from e


class SqlAlchemyProductStore(ProductStore):
    """
    Product store backed by an async SQLAlchemy session.

    The store does not own the session: get_db_session opens and closes it.
    save() commits explicitly so callers know the change is durable before
    they answer the client.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find(self, product_id: int) -> Optional[Product]:
        with _database_errors("find"):
            return await self.session.get(Product, product_id)

    def add(self, product: Product) -> None:
        self.session.add(product)

    async def first_matching(self, predicate: ColumnElement[bool]) -> Product:
        with _database_errors("first_matching"):
            result = await self.session.execute(
                select(Product).where(predicate).limit(1)
            )
            product = result.scalars().first()

        if product is None:
            raise NotFoundError(resource="product", context={"predicate": str(predicate)})
        return product

    async def remove(self, product: Product) -> None:
        with _database_errors("remove"):
            await self.session.delete(product)

    async def save(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Integrity error on save: %s", str(e.orig))
            raise ConflictError(
                resource="product",
                context={"error_type": type(e).__name__},
            ) from e
        except StaleDataError as e:
            # UPDATE matched no row: deleted by another request since it was loaded
            await self.session.rollback()
            logger.warning("Stale row on save: %s", str(e))
            raise NotFoundError(
                resource="product",
                context={"error_type": type(e).__name__},
            ) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Database error during save: %s", str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "save", "error_type": type(e).__name__},
            ) from e

    async def all(self) -> List[Product]:
        with _database_errors("all"):
            result = await self.session.execute(
                select(Product).order_by(Product.created_at, Product.id)
            )
            return list(result.scalars().all())

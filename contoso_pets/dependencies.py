"""
ContosoPets API — Request Dependencies
=======================================

What:  FastAPI dependencies that hand each request its own store and service.
How:   get_db_session → get_product_store → get_product_service. FastAPI
       caches each dependency per request, so the service and the session
       it writes through always belong to the same request.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contoso_pets.database import get_db_session
from contoso_pets.services.product_service import ProductService
from contoso_pets.stores.base import ProductStore
from contoso_pets.stores.sqlalchemy_store import SqlAlchemyProductStore


def get_product_store(db: AsyncSession = Depends(get_db_session)) -> ProductStore:
    return SqlAlchemyProductStore(db)


def get_product_service(store: ProductStore = Depends(get_product_store)) -> ProductService:
    return ProductService(store)

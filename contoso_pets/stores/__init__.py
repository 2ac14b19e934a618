# Stores package init
"""
ContosoPets API — Persistence Stores
=====================================

What:  The persistence collaborator the product service talks to.

Store Inventory:
    - ProductStore (abstract): find / add / first_matching / remove / save / all
    - SqlAlchemyProductStore: implementation over one AsyncSession

A store wraps exactly one session, so its lifetime is one request. Routes
obtain it through contoso_pets.dependencies.get_product_store.
"""

from contoso_pets.stores.base import ProductStore
from contoso_pets.stores.sqlalchemy_store import SqlAlchemyProductStore

__all__ = ["ProductStore", "SqlAlchemyProductStore"]

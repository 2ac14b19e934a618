"""
ContosoPets API — Abstract Product Store Interface
===================================================

What:  Abstract base class defining the persistence contract consumed by
       ProductService.
How:   Concrete stores inherit from ProductStore and implement every method.
Who:   ProductService calls it; SqlAlchemyProductStore implements it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import ColumnElement

from contoso_pets.models.product import Product


class ProductStore(ABC):
    """
    Abstract interface over the canonical set of products.

    Contract:
        - add() and remove() stage changes; nothing is durable until save()
        - find() returns None for a missing id; first_matching() raises
        - Implementation-specific failures are wrapped in DatabaseError
        - A primary-key collision detected on save() raises ConflictError
    """

    @abstractmethod
    async def find(self, product_id: int) -> Optional[Product]:
        """Return the product with `product_id`, or None if it is not stored."""
        ...

    @abstractmethod
    def add(self, product: Product) -> None:
        """Stage `product` for insertion."""
        ...

    @abstractmethod
    async def first_matching(self, predicate: ColumnElement[bool]) -> Product:
        """
        Return the first product satisfying `predicate`.

        Args:
            predicate: Boolean clause against the Product model,
                       e.g. ``Product.id == 4``.

        Raises:
            NotFoundError: No stored product matches.
        """
        ...

    @abstractmethod
    async def remove(self, product: Product) -> None:
        """Stage `product` for deletion."""
        ...

    @abstractmethod
    async def save(self) -> None:
        """
        Commit all staged changes.

        Raises:
            ConflictError: A staged insert collides with a stored id.
            DatabaseError: Any other persistence failure.
        """
        ...

    @abstractmethod
    async def all(self) -> List[Product]:
        """Return every stored product in insertion order."""
        ...

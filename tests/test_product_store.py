"""
ContosoPets API — SQLAlchemy Product Store Tests
=================================================

What:  Tests for SqlAlchemyProductStore lookups and error translation.
How:   Lookups run against the seeded in-memory database; failure paths use
       a mocked session that raises SQLAlchemy exceptions.

What we test:
    ✅ find / first_matching / all against real rows
    ✅ A duplicate primary key on save becomes ConflictError
    ✅ An UPDATE that matches no row on save becomes NotFoundError
    ✅ Other SQLAlchemy errors become DatabaseError and roll back
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm.exc import StaleDataError

from contoso_pets.exceptions import ConflictError, DatabaseError, NotFoundError
from contoso_pets.models.product import Product
from contoso_pets.stores.sqlalchemy_store import SqlAlchemyProductStore


class TestLookups:

    @pytest.mark.asyncio
    async def test_find_returns_product(self, product_store):
        product = await product_store.find(2)

        assert product is not None
        assert product.name == "Product2"
        assert product.price == Decimal("2.99")

    @pytest.mark.asyncio
    async def test_find_returns_none_for_missing_id(self, product_store):
        assert await product_store.find(99) is None

    @pytest.mark.asyncio
    async def test_first_matching_returns_match(self, product_store):
        product = await product_store.first_matching(Product.name == "Product5")

        assert product.id == 5

    @pytest.mark.asyncio
    async def test_first_matching_raises_when_nothing_matches(self, product_store):
        with pytest.raises(NotFoundError):
            await product_store.first_matching(Product.id == 99)

    @pytest.mark.asyncio
    async def test_all_returns_every_row(self, product_store):
        products = await product_store.all()

        assert [p.id for p in products] == [1, 2, 3, 4, 5]


class TestWrites:

    @pytest.mark.asyncio
    async def test_add_and_save_persists(self, product_store, session_factory):
        product_store.add(Product(id=10, name="Leash", price=Decimal("8.25")))
        await product_store.save()

        async with session_factory() as session:
            stored = await SqlAlchemyProductStore(session).find(10)

        assert stored is not None
        assert stored.name == "Leash"

    @pytest.mark.asyncio
    async def test_remove_and_save_deletes(self, product_store, session_factory):
        product = await product_store.find(1)
        await product_store.remove(product)
        await product_store.save()

        async with session_factory() as session:
            assert await SqlAlchemyProductStore(session).find(1) is None

    @pytest.mark.asyncio
    async def test_duplicate_primary_key_raises_conflict(self, product_store):
        # id 1 is not in this session's identity map, so the INSERT reaches the database
        product_store.add(Product(id=1, name="Duplicate", price=Decimal("1.00")))

        with pytest.raises(ConflictError):
            await product_store.save()

        assert (await product_store.find(1)).name == "Product1"


class TestErrorTranslation:

    @pytest.mark.asyncio
    async def test_find_wraps_operational_error(self, mock_db_session):
        mock_db_session.get.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        store = SqlAlchemyProductStore(mock_db_session)

        with pytest.raises(DatabaseError) as exc_info:
            await store.find(1)

        assert exc_info.value.context["operation"] == "find"
        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_all_wraps_operational_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        store = SqlAlchemyProductStore(mock_db_session)

        with pytest.raises(DatabaseError):
            await store.all()

    @pytest.mark.asyncio
    async def test_save_integrity_error_rolls_back_and_conflicts(self, mock_db_session):
        mock_db_session.commit.side_effect = IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed: products.id")
        )
        store = SqlAlchemyProductStore(mock_db_session)

        with pytest.raises(ConflictError):
            await store.save()

        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_operational_error_rolls_back(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError("COMMIT", {}, Exception("gone"))
        store = SqlAlchemyProductStore(mock_db_session)

        with pytest.raises(DatabaseError):
            await store.save()

        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_stale_row_rolls_back_and_not_found(self, mock_db_session):
        mock_db_session.commit.side_effect = StaleDataError(
            "UPDATE statement on table 'products' expected to update 1 row(s); 0 were matched."
        )
        store = SqlAlchemyProductStore(mock_db_session)

        with pytest.raises(NotFoundError):
            await store.save()

        mock_db_session.rollback.assert_awaited_once()

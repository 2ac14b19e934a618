"""
ContosoPets API — Product SQLAlchemy Model
===========================================

What:  ORM model representing the `products` table.
Who:   Used by SqlAlchemyProductStore for all CRUD operations and by
       create_tables() at startup.

Table Design:
    - id: Integer primary key supplied by the client; never auto-generated.
    - name: Display name, up to 200 characters.
    - price: Numeric(18, 2), read back as decimal.Decimal.
    - created_at: Insertion time (UTC). Internal only; gives list_all its
      insertion ordering.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Index, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from contoso_pets.database import Base


class Product(Base):
    """
    A product offered by the store.

    Lifecycle:
        1. Created by POST /products with a caller-supplied id
        2. Overwritten field by field by PUT /products/{id}
        3. Removed by DELETE /products/{id}
    """

    __tablename__ = "products"

    # ── Primary Key ───────────────────────────────────────────────────────
    # autoincrement=False: the id always comes from the request payload
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )

    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )

    price: Mapped[Decimal] = mapped_column(
        Numeric(18, 2),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_products_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"

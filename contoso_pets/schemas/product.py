"""
ContosoPets API — Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the HTTP contract of the products resource.
How:   FastAPI validates request bodies against ProductPayload, serializes
       responses through ProductResponse, and generates OpenAPI docs from both.

Schemas are kept apart from the SQLAlchemy model so the API never exposes
internal columns (created_at).
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

# Product.id is a 32-bit INTEGER column
PRODUCT_ID_MIN = -(2**31)
PRODUCT_ID_MAX = 2**31 - 1

# A float reproduces any decimal of up to 15 significant digits exactly
PRICE_MAX_DIGITS = 15


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ProductPayload(BaseModel):
    """
    Body of POST /products and PUT /products/{id}.

    The id is always supplied by the caller. On PUT it must equal the
    path id, which the service checks (400 otherwise).
    """
    id: int = Field(
        ge=PRODUCT_ID_MIN,
        le=PRODUCT_ID_MAX,
        description="Product identifier, chosen by the caller",
    )
    name: str = Field(max_length=200, description="Display name")
    price: Decimal = Field(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=2,
        description="Unit price (JSON number or numeric string)",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ProductResponse(BaseModel):
    """
    A stored product as returned by GET and POST.
    """
    id: int = Field(description="Product identifier")
    name: str = Field(description="Display name")
    price: Decimal = Field(description="Unit price")

    model_config = {"from_attributes": True}

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        """Render price as a JSON number rather than pydantic's default string."""
        return float(price)


class ErrorResponse(BaseModel):
    """
    Standardized error body for every application error.

    Example:
        {
            "error": "not_found",
            "message": "product with ID '6' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

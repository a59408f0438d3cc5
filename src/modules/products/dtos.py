"""Product DTOs for the Service Layer.

Pydantic v2 models that carry the catalog's field rules.  DTOs are
immutable (``frozen=True``).

- ``ProductDTO``: validated input for add/update.  Built with
  ``ProductDTO.model_validate(obj, from_attributes=True)`` so an unsaved
  ``Product`` instance can be checked before anything is written.
- ``ProductOutputDTO``: output view of a stored product.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    ORIGIN_COUNTRY_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRODUCT_CODE_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    QUANTITY_MAX,
)

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable, validated product fields.

    Validates:
    - text fields are non-blank and within their length limits.
    - ``price`` is a Decimal greater than zero with at most two decimals.
    - ``quantity`` is between zero and ``QUANTITY_MAX``.

    Values are kept exactly as given; nothing is trimmed or re-cased.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    origin_country: str = Field(max_length=ORIGIN_COUNTRY_MAX_LENGTH)
    product_name: str = Field(max_length=PRODUCT_NAME_MAX_LENGTH)
    product_code: str = Field(max_length=PRODUCT_CODE_MAX_LENGTH)
    price: Decimal = Field(
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    quantity: int = Field(ge=0, le=QUANTITY_MAX)
    description: str = Field(max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("origin_country", "product_name", "product_code", "description")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field must not be blank.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for rendering a stored product."""

    model_config = ConfigDict(frozen=True)

    product_code: str
    product_name: str
    origin_country: str
    price: Decimal
    quantity: int
    description: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            product_code=product.product_code,
            product_name=product.product_name,
            origin_country=product.origin_country,
            price=product.price,
            quantity=product.quantity,
            description=product.description,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

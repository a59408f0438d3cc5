"""Product model keyed by a unique product code.

Field rules are enforced twice: by ``ProductDTO`` before any write, and by
the database through a unique index and check constraints.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    MIN_PRICE,
    ORIGIN_COUNTRY_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRODUCT_CODE_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
)


class Product(BaseModel):
    """Catalog entry.

    ``product_code`` is the business key; ``unique=True`` creates the
    UNIQUE INDEX, so no extra index is declared for it.
    """

    origin_country = models.CharField(
        max_length=ORIGIN_COUNTRY_MAX_LENGTH, db_index=True
    )
    product_name = models.CharField(max_length=PRODUCT_NAME_MAX_LENGTH)
    product_code = models.CharField(max_length=PRODUCT_CODE_MAX_LENGTH, unique=True)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(MIN_PRICE)],
    )
    quantity = models.PositiveIntegerField(default=0)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH)

    class Meta:
        db_table = "products"
        ordering = ["product_code"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="products_quantity_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_code} - {self.product_name}"

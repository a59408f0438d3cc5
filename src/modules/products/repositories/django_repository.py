"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups return ``None`` / empty lists instead of raising; the manager
decides which absences are errors.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_code(self, code: str) -> Optional[Product]:
        return Product.objects.filter(product_code=code).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional exact-match look-ups.

        Example::

            {"origin_country": "Bulgaria"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            product_code=entity.product_code,
        )
        return entity

    @transaction.atomic
    def delete(self, key: str) -> bool:
        """Hard-delete the product with code ``key``.

        Returns ``False`` when no such product exists.
        """
        deleted, _ = Product.objects.filter(product_code=key).delete()
        if not deleted:
            return False
        logger.info("product.removed", product_code=key)
        return True

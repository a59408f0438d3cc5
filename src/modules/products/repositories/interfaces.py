"""Product repository interface.

Extends ``IRepository[Product, str]``: products are addressed by their
product code rather than by the surrogate primary key.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product", str]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Product]:
        """Retrieve a product by its product code."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products ordered by code, optionally filtered."""

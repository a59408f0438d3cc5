"""Product domain exceptions.

Raised by ``ProductsManager`` when input or business rules are violated.
Callers (tests, management commands) catch these by type; the message is
the user-facing text.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from modules.products.constants import INVALID_PRODUCT_MESSAGE


class InvalidProduct(Exception):
    """One or more product fields failed validation.

    ``errors`` carries the per-field details reported by the validator.
    """

    def __init__(
        self,
        message: str = INVALID_PRODUCT_MESSAGE,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidArgument(ValueError):
    """A required identifier or search key was empty."""


class ProductNotFound(LookupError):
    """The query matched no stored product."""


class ProductAlreadyExists(Exception):
    """A product with the same code is already stored."""

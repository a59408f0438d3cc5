"""Product manager (Use Cases).

Validates products and orchestrates the catalog operations, delegating
persistence to the injected ``IProductRepository``.  Nothing reaches the
repository until validation has passed, so a rejected call leaves the
store unchanged.

Note: ``ProductsManager`` is an application service; it is unrelated to
Django's model ``Manager`` class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from django.db import IntegrityError, transaction
from pydantic import ValidationError

from modules.products.constants import (
    DUPLICATE_PRODUCT_CODE_MESSAGE,
    EMPTY_COUNTRY_MESSAGE,
    EMPTY_PRODUCT_CODE_MESSAGE,
    INVALID_PRODUCT_MESSAGE,
    NO_PRODUCT_FOUND_MESSAGE,
    NO_PRODUCT_WITH_CODE_MESSAGE,
)
from modules.products.dtos import ProductDTO
from modules.products.exceptions import (
    InvalidArgument,
    InvalidProduct,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _require(value: Optional[str], message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(message)
    return value


class ProductsManager:
    """Application service for the product catalog.

    Receives an ``IProductRepository`` via constructor injection.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, product: Any) -> ProductDTO:
        """Check every field of ``product`` and return the validated DTO.

        ``product`` is any object exposing the six product fields as
        attributes, typically an unsaved ``Product``.

        Raises:
            InvalidProduct: if any field rule is violated.
        """
        try:
            return ProductDTO.model_validate(product, from_attributes=True)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            logger.warning(
                "product.invalid",
                product_code=getattr(product, "product_code", None),
                fields=[".".join(str(p) for p in err["loc"]) for err in errors],
            )
            raise InvalidProduct(INVALID_PRODUCT_MESSAGE, errors=errors) from exc

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add(self, product: Any) -> Product:
        """Validate and store a new product.

        Raises:
            InvalidProduct: if validation fails.
            ProductAlreadyExists: if the code is already stored.
        """
        dto = self.validate(product)
        log = logger.bind(product_code=dto.product_code)

        if self._repo.get_by_code(dto.product_code):
            log.warning("product.duplicate_code")
            raise ProductAlreadyExists(
                DUPLICATE_PRODUCT_CODE_MESSAGE.format(code=dto.product_code)
            )

        try:
            stored = self._repo.save(Product(**dto.model_dump()))
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same code.
            log.warning("product.duplicate_code", concurrent=True)
            raise ProductAlreadyExists(
                DUPLICATE_PRODUCT_CODE_MESSAGE.format(code=dto.product_code)
            ) from exc
        log.info("product.created", product_id=str(stored.id))
        return stored

    @transaction.atomic
    def update(self, product: Any) -> Product:
        """Overwrite the stored product that has ``product``'s code.

        Raises:
            InvalidProduct: if validation fails.
            ProductNotFound: if no product has that code.
        """
        dto = self.validate(product)

        existing = self._repo.get_by_code(dto.product_code)
        if existing is None:
            raise ProductNotFound(
                NO_PRODUCT_WITH_CODE_MESSAGE.format(code=dto.product_code)
            )

        for field, value in dto.model_dump().items():
            setattr(existing, field, value)

        stored = self._repo.save(existing)
        logger.info("product.updated", product_code=dto.product_code)
        return stored

    @transaction.atomic
    def delete(self, code: Optional[str]) -> None:
        """Remove the product with ``code``; unknown codes are ignored.

        Raises:
            InvalidArgument: if ``code`` is None, blank or not a string.
        """
        code = _require(code, EMPTY_PRODUCT_CODE_MESSAGE)
        removed = self._repo.delete(code)
        logger.info("product.deleted", product_code=code, removed=removed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self) -> List[Product]:
        """Return every stored product ordered by code.

        Raises:
            ProductNotFound: if the catalog is empty.
        """
        products = self._repo.list()
        if not products:
            raise ProductNotFound(NO_PRODUCT_FOUND_MESSAGE)
        return products

    def search_by_origin_country(self, country: Optional[str]) -> List[Product]:
        """Return the products whose origin country equals ``country``.

        Raises:
            InvalidArgument: if ``country`` is None, blank or not a string.
            ProductNotFound: if nothing matches.
        """
        country = _require(country, EMPTY_COUNTRY_MESSAGE)
        products = self._repo.list({"origin_country": country})
        if not products:
            raise ProductNotFound(NO_PRODUCT_FOUND_MESSAGE)
        logger.info("product.searched", origin_country=country, count=len(products))
        return products

    def get_specific(self, code: Optional[str]) -> Product:
        """Return the product with ``code``.

        Raises:
            InvalidArgument: if ``code`` is None, blank or not a string.
            ProductNotFound: if no product has that code.
        """
        code = _require(code, EMPTY_PRODUCT_CODE_MESSAGE)
        product = self._repo.get_by_code(code)
        if product is None:
            raise ProductNotFound(NO_PRODUCT_WITH_CODE_MESSAGE.format(code=code))
        return product

"""Application services: reprice, retire or reinstate a catalog product."""

from __future__ import annotations

import logging

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, new_price: str) -> Product:
        """Update a product's price.

        This does NOT affect any recorded purchase; their lines captured a
        price snapshot at creation time.
        """
        product = _get_or_raise(self._product_repo, product_id)
        product.update_price(Money.of(new_price, product.price.currency))
        self._product_repo.save(product)
        logger.info("Product #%s repriced to %s", product.id, product.price)
        return product


class DeactivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        """Retire a product so new purchases can no longer reference it."""
        product = _get_or_raise(self._product_repo, product_id)
        product.deactivate()
        self._product_repo.save(product)
        logger.info("Product #%s deactivated", product.id)
        return product


class ActivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        """Put a retired product back on sale."""
        product = _get_or_raise(self._product_repo, product_id)
        product.activate()
        self._product_repo.save(product)
        logger.info("Product #%s activated", product.id)
        return product


def _get_or_raise(product_repo: ProductRepository, product_id: str) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise NotFoundError(f"Product with ID '{product_id}' not found")
    return product

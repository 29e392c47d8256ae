"""Application service: Add Product use case (catalog administration)."""

from __future__ import annotations

import logging

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, name: str, price: str) -> Product:
        """Add a new, active product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        all_products = self._product_repo.list_all()
        if any(p.name.lower() == name.strip().lower() for p in all_products):
            raise ValidationError(f"Product '{name.strip()}' already exists")

        amount = Money.of(price, self._currency)
        if amount.is_zero:
            raise ValidationError("Product price must be greater than zero")

        # Numeric IDs, assigned in sequence
        numeric = [int(p.id) for p in all_products if p.id.isdigit()]
        next_id = str(max(numeric) + 1) if numeric else "1"

        product = Product(id=next_id, name=name.strip(), price=amount)
        self._product_repo.save(product)
        logger.info("Added product #%s '%s' at %s", product.id, product.name, amount)
        return product

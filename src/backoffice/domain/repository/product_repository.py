"""Abstract repository for the Product catalog.

The ledger consumes it as a read-only lookup. Defined in the domain layer
so the domain never depends on infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from backoffice.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_active(self, product_ids: Iterable[str]) -> list[Product]:
        """Return exactly the requested products that exist and are active."""

    @abstractmethod
    def get_by_ids(self, product_ids: Iterable[str]) -> dict[str, Product]:
        """Return the requested products keyed by ID, active or not."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

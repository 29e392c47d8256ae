"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from backoffice.infrastructure.config import Settings, load_settings
from backoffice.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from backoffice.infrastructure.persistence.json_purchase_repository import (
    JsonPurchaseRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository(config: Settings | None = None) -> JsonProductRepository:
    config = config or settings()
    return JsonProductRepository(config.data_dir / "products.json")


def purchase_repository(config: Settings | None = None) -> JsonPurchaseRepository:
    config = config or settings()
    return JsonPurchaseRepository(config.data_dir / "purchases.json")

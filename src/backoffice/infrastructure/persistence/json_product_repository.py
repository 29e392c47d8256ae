"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable

from backoffice.domain.exceptions import PersistenceError, ValidationError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.infrastructure.persistence.json_file import JsonRecordFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def find_active(self, product_ids: Iterable[str]) -> list[Product]:
        wanted = set(product_ids)
        return [
            p for p in self._load().values() if p.id in wanted and p.is_active
        ]

    def get_by_ids(self, product_ids: Iterable[str]) -> dict[str, Product]:
        products = self._load()
        return {pid: products[pid] for pid in set(product_ids) if pid in products}

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._file.replace([self._to_raw(p) for p in products.values()])

    # --- Serialization --------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}
        except (KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise PersistenceError(
                f"Corrupt product record in {self._file.path}: {exc}"
            ) from exc

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "is_active": product.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            is_active=raw.get("is_active", True),
        )

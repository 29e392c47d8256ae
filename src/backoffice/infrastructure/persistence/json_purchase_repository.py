"""JSON-file-backed implementation of PurchaseRepository.

A purchase and its lines form one record, and every write replaces the
whole file atomically, so a purchase is stored completely or not at all.
Concurrent writers in separate processes are not coordinated.
"""

from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from backoffice.domain.exceptions import PersistenceError, ValidationError
from backoffice.domain.model.calendar import as_utc
from backoffice.domain.model.purchase import Purchase, PurchaseLine
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.repository.purchase_repository import PurchaseRepository
from backoffice.infrastructure.persistence.json_file import JsonRecordFile


class JsonPurchaseRepository(PurchaseRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- PurchaseRepository interface -----------------------------------------

    def add(self, purchase: Purchase) -> Purchase:
        if purchase.id is not None:
            raise PersistenceError(
                f"Purchase #{purchase.id} is already recorded; purchases are append-only"
            )
        records = self._file.load()
        next_id = max((self._record_id(r) for r in records), default=0) + 1
        stored = dataclasses.replace(purchase, id=next_id)
        self._file.replace(records + [self._to_raw(stored)])
        return stored

    def get_by_id(self, purchase_id: int) -> Purchase | None:
        for raw in self._file.load():
            if self._record_id(raw) == purchase_id:
                return self._to_domain(raw)
        return None

    def list_between(
        self, start: datetime, end: datetime | None = None
    ) -> list[Purchase]:
        start = as_utc(start)
        end = as_utc(end) if end is not None else None
        purchases = [self._to_domain(raw) for raw in self._file.load()]
        return [
            p for p in purchases
            if p.date >= start and (end is None or p.date < end)
        ]

    def list_all(self) -> list[Purchase]:
        return [self._to_domain(raw) for raw in self._file.load()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(purchase: Purchase) -> dict:
        return {
            "id": purchase.id,
            "customer_name": purchase.customer_name,
            "date": purchase.date.isoformat(),
            "total": str(purchase.total.amount),
            "currency": purchase.total.currency,
            "recorded_by": purchase.recorded_by,
            "lines": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "description": line.description,
                }
                for line in purchase.lines
            ],
        }

    def _to_domain(self, raw: dict) -> Purchase:
        record_id = self._record_id(raw)
        try:
            currency = raw.get("currency", "USD")
            lines = [
                PurchaseLine(
                    product_id=line["product_id"],
                    quantity=Quantity(line["quantity"]),
                    unit_price=Money(Decimal(line["unit_price"]), currency),
                    description=line.get("description"),
                )
                for line in raw["lines"]
            ]
            return Purchase(
                id=record_id,
                customer_name=raw["customer_name"],
                lines=tuple(lines),
                total=Money(Decimal(raw["total"]), currency),
                date=datetime.fromisoformat(raw["date"]),
                recorded_by=raw.get("recorded_by"),
            )
        except (
            KeyError, TypeError, AttributeError, ValueError, InvalidOperation, ValidationError
        ) as exc:
            raise PersistenceError(
                f"Corrupt purchase record #{record_id} in {self._file.path}: {exc}"
            ) from exc

    def _record_id(self, raw: dict) -> int:
        try:
            record_id = raw["id"]
        except (KeyError, TypeError) as exc:
            raise PersistenceError(
                f"Corrupt purchase record without an id in {self._file.path}"
            ) from exc
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise PersistenceError(
                f"Corrupt purchase record id {record_id!r} in {self._file.path}"
            )
        return record_id

"""Application service: List Purchases use case (query)."""

from __future__ import annotations

from backoffice.application.dto import PurchaseListItemDTO
from backoffice.domain.repository.purchase_repository import PurchaseRepository


class ListPurchasesHandler:

    def __init__(self, purchase_repo: PurchaseRepository) -> None:
        self._purchase_repo = purchase_repo

    def handle(self) -> list[PurchaseListItemDTO]:
        """Every purchase, newest first; ties go to the higher ID."""
        purchases = sorted(
            self._purchase_repo.list_all(),
            key=lambda p: (p.date, p.id or 0),
            reverse=True,
        )
        return [
            PurchaseListItemDTO(
                id=p.id,  # type: ignore[arg-type]
                date=p.date,
                customer_name=p.customer_name,
                total=p.total.amount,
                currency=p.total.currency,
            )
            for p in purchases
        ]

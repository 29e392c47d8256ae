"""Application service: Create Purchase use case.

The only writer of the ledger. It reads the catalog once, copies the
current prices into the new lines, and hands the finished purchase to the
store in a single atomic ``add``.
"""

from __future__ import annotations

import logging
from datetime import datetime

from backoffice.application.context import CREATE_PURCHASES, CallerContext
from backoffice.application.dto import PurchaseDetailDTO, PurchaseLineSpec
from backoffice.application.show_purchase import to_detail_dto
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.purchase import Purchase, PurchaseLine
from backoffice.domain.model.value_objects import Quantity
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.purchase_repository import PurchaseRepository

logger = logging.getLogger(__name__)


class CreatePurchaseHandler:

    def __init__(
        self,
        purchase_repo: PurchaseRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._purchase_repo = purchase_repo
        self._product_repo = product_repo

    def handle(
        self,
        context: CallerContext,
        customer_name: str,
        lines: list[PurchaseLineSpec],
        date: datetime | None = None,
    ) -> PurchaseDetailDTO:
        """Record a new purchase.

        Steps:
        1. Check the caller may record purchases and the input is well formed.
        2. Look up every distinct product among the *active* ones; a count
           mismatch means some ID is unknown or retired.
        3. Build lines with the *current* prices (snapshot).
        4. Let the Purchase aggregate compute the total, then persist.
        """
        context.require(CREATE_PURCHASES)

        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not lines:
            raise ValidationError("Purchase must contain at least one line")
        quantities = [Quantity(spec.quantity) for spec in lines]

        requested_ids = {spec.product_id for spec in lines}
        products = {
            p.id: p
            for p in self._product_repo.find_active(requested_ids)
            if p.id in requested_ids
        }
        if len(products) != len(requested_ids):
            missing = sorted(requested_ids - products.keys())
            logger.warning(
                "Rejected purchase for %r: unknown or inactive products %s",
                customer_name, missing,
            )
            raise ValidationError(
                f"unknown or inactive product: {', '.join(missing)}"
            )

        purchase_lines = [
            PurchaseLine(
                product_id=spec.product_id,
                quantity=qty,
                unit_price=products[spec.product_id].price,  # <-- price snapshot
                description=spec.description,
            )
            for spec, qty in zip(lines, quantities)
        ]

        purchase = Purchase.create(
            customer_name=customer_name,
            lines=purchase_lines,
            date=date,
            recorded_by=context.user_id,
        )
        stored = self._purchase_repo.add(purchase)

        logger.info(
            "Recorded purchase #%s for %r: %d lines, total %s",
            stored.id, stored.customer_name, len(stored.lines), stored.total,
        )
        return to_detail_dto(stored, products)

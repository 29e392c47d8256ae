"""Application service: Show Purchase use case (query)."""

from __future__ import annotations

from backoffice.application.dto import PurchaseDetailDTO, PurchaseLineDTO
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.product import Product
from backoffice.domain.model.purchase import Purchase
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.purchase_repository import PurchaseRepository


class ShowPurchaseHandler:

    def __init__(
        self,
        purchase_repo: PurchaseRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._purchase_repo = purchase_repo
        self._product_repo = product_repo

    def handle(self, purchase_id: int) -> PurchaseDetailDTO:
        """Return the purchase as recorded, with today's product names.

        Unit prices come from the purchase lines, never from the catalog.
        """
        purchase = self._purchase_repo.get_by_id(purchase_id)
        if purchase is None:
            raise NotFoundError(f"Purchase #{purchase_id} not found")

        products = self._product_repo.get_by_ids(purchase.product_ids)
        return to_detail_dto(purchase, products)


def to_detail_dto(purchase: Purchase, products: dict[str, Product]) -> PurchaseDetailDTO:
    return PurchaseDetailDTO(
        id=purchase.id,  # type: ignore[arg-type]
        customer_name=purchase.customer_name,
        date=purchase.date,
        currency=purchase.total.currency,
        total=purchase.total.amount,
        recorded_by=purchase.recorded_by,
        lines=[
            PurchaseLineDTO(
                product_id=line.product_id,
                product_name=(
                    products[line.product_id].name
                    if line.product_id in products
                    else None
                ),
                quantity=line.quantity.value,
                unit_price=line.unit_price.amount,
                line_total=line.line_total.amount,
                description=line.description,
            )
            for line in purchase.lines
        ],
    )

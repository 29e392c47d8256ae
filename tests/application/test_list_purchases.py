"""Integration tests for the ListPurchases use case."""

from datetime import datetime, timezone
from decimal import Decimal

from backoffice.application.list_purchases import ListPurchasesHandler
from backoffice.domain.model.purchase import Purchase, PurchaseLine
from backoffice.domain.model.value_objects import Money, Quantity
from tests.fakes import FakePurchaseRepository


def _purchase(customer: str, when: datetime, price: str = "10.00") -> Purchase:
    line = PurchaseLine(product_id="P1", quantity=Quantity(1), unit_price=Money.of(price))
    return Purchase.create(customer, [line], date=when)


class TestListPurchases:

    def test_empty_ledger(self):
        assert ListPurchasesHandler(FakePurchaseRepository()).handle() == []

    def test_newest_first(self):
        repo = FakePurchaseRepository([
            _purchase("Alice", datetime(2024, 1, 2, tzinfo=timezone.utc)),
            _purchase("Bob", datetime(2024, 3, 1, tzinfo=timezone.utc)),
            _purchase("Carol", datetime(2024, 2, 15, tzinfo=timezone.utc)),
        ])
        rows = ListPurchasesHandler(repo).handle()
        assert [r.customer_name for r in rows] == ["Bob", "Carol", "Alice"]

    def test_same_date_higher_id_first(self):
        when = datetime(2024, 1, 2, tzinfo=timezone.utc)
        repo = FakePurchaseRepository([_purchase("Alice", when), _purchase("Bob", when)])
        assert [r.id for r in ListPurchasesHandler(repo).handle()] == [2, 1]

    def test_row_carries_summary_fields(self):
        when = datetime(2024, 1, 2, 9, 30, tzinfo=timezone.utc)
        repo = FakePurchaseRepository([_purchase("Alice", when, "25.50")])
        row = ListPurchasesHandler(repo).handle()[0]
        assert (row.id, row.date, row.customer_name, row.total, row.currency) == (
            1, when, "Alice", Decimal("25.50"), "USD",
        )

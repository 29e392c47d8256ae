"""Purchase aggregate, the unit of the ledger.

A Purchase owns its lines and is immutable once created. Each line carries
a frozen copy of the product price taken when the purchase was recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.calendar import as_utc, utc_now
from backoffice.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class PurchaseLine:
    """One product on a purchase, with its price locked at creation time."""

    product_id: str
    quantity: Quantity
    unit_price: Money  # snapshot, never re-read from the catalog
    description: str | None = None

    def __post_init__(self) -> None:
        if self.description is not None:
            cleaned = self.description.strip() or None
            object.__setattr__(self, "description", cleaned)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Purchase:
    """Aggregate root for the ledger.

    Use ``Purchase.create()`` for new purchases. The constructor is what
    repositories use to reconstitute stored ones; it still refuses a record
    whose stored total disagrees with its lines.

    Invariants:
    - at least one line
    - ``total`` equals the sum of line totals, exactly
    - ``date`` is timezone-aware UTC
    """

    id: int | None
    customer_name: str
    lines: tuple[PurchaseLine, ...]
    total: Money
    date: datetime = field(default_factory=utc_now)
    recorded_by: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "date", as_utc(self.date))
        if not self.lines:
            raise ValidationError("Purchase must contain at least one line")
        expected = Money.total(
            (line.line_total for line in self.lines), self.total.currency
        )
        if expected != self.total:
            raise ValidationError(
                f"Purchase total {self.total} does not match its lines ({expected})"
            )

    # --- Factory (used for NEW purchases only) --------------------------------

    @staticmethod
    def create(
        customer_name: str,
        lines: list[PurchaseLine],
        date: datetime | None = None,
        recorded_by: str | None = None,
    ) -> Purchase:
        """Create a new purchase, computing its total from the lines."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        if not lines:
            raise ValidationError("Purchase must contain at least one line")

        currency = lines[0].unit_price.currency
        total = Money.total((line.line_total for line in lines), currency)

        return Purchase(
            id=None,
            customer_name=customer_name.strip(),
            lines=tuple(lines),
            total=total,
            date=date if date is not None else utc_now(),
            recorded_by=recorded_by,
        )

    @property
    def product_ids(self) -> set[str]:
        return {line.product_id for line in self.lines}

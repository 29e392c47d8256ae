"""Data Transfer Objects: plain containers that cross layer boundaries.

Amounts travel as Decimal plus a currency code. Formatting them for
display belongs to whoever renders the DTO.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class PurchaseLineSpec:
    """Input: one requested line (product ID, quantity, optional note)."""

    product_id: str
    quantity: int
    description: str | None = None


@dataclass(frozen=True)
class PurchaseLineDTO:
    product_id: str
    product_name: str | None  # current catalog name, None if unknown
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    description: str | None


@dataclass(frozen=True)
class PurchaseDetailDTO:
    """Output: a purchase with its lines as recorded."""

    id: int
    customer_name: str
    date: datetime
    currency: str
    total: Decimal
    lines: list[PurchaseLineDTO]
    recorded_by: str | None = None


@dataclass(frozen=True)
class MonthlyTotalDTO:
    year: int
    month: int
    count: int
    total: Decimal


@dataclass(frozen=True)
class DailyTotalDTO:
    date: date
    count: int
    total: Decimal


@dataclass(frozen=True)
class PurchaseListItemDTO:
    """Output: one row of the purchase listing."""

    id: int
    date: datetime
    customer_name: str
    total: Decimal
    currency: str

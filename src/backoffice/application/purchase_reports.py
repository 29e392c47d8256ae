"""Application services: ledger report queries (monthly and daily totals)."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

from backoffice.application.dto import DailyTotalDTO, MonthlyTotalDTO
from backoffice.domain.model.calendar import utc_now
from backoffice.domain.repository.purchase_repository import PurchaseRepository
from backoffice.domain.service.reporting_service import ReportingService


class MonthlyTotalsHandler:

    def __init__(
        self,
        purchase_repo: PurchaseRepository,
        clock: Callable[[], datetime] = utc_now,
        currency: str = "USD",
    ) -> None:
        self._service = ReportingService(purchase_repo, clock=clock, currency=currency)

    def handle(self, months_back: int, fill_gaps: bool = False) -> list[MonthlyTotalDTO]:
        """Purchase count and total per month over the last ``months_back`` months.

        ``months_back`` is clamped, not rejected: 0 or less means 12 and
        anything above 36 means 36.
        """
        return [
            MonthlyTotalDTO(
                year=bucket.year,
                month=bucket.month,
                count=bucket.count,
                total=bucket.total.amount,
            )
            for bucket in self._service.monthly_totals(months_back, fill_gaps=fill_gaps)
        ]


class DailyTotalsHandler:

    def __init__(
        self,
        purchase_repo: PurchaseRepository,
        currency: str = "USD",
    ) -> None:
        self._service = ReportingService(purchase_repo, currency=currency)

    def handle(
        self, start: date | datetime, end: date | datetime
    ) -> list[DailyTotalDTO]:
        """One row per calendar day in the range, both ends inclusive."""
        return [
            DailyTotalDTO(date=bucket.day, count=bucket.count, total=bucket.total.amount)
            for bucket in self._service.daily_totals(start, end)
        ]

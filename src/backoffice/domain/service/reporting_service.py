"""Domain service: Ledger Reporting.

Turns a time-bounded slice of the ledger into calendar-bucketed series.
Grouping and gap-filling are pure functions; only the ledger read in
``ReportingService`` touches the store.

Range handling is silent normalization, never an error:
- months back outside ``[1, 36]``: ``<= 0`` becomes 12, ``> 36`` becomes 36
- a reversed day range is swapped
- a day range longer than 366 days is cut to 366 days after its start
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Hashable, Iterable, TypeVar

from backoffice.domain.model.calendar import (
    add_months,
    as_date,
    next_day,
    next_month,
    start_of_day,
    utc_now,
)
from backoffice.domain.model.purchase import Purchase
from backoffice.domain.model.report import DailyBucket, MonthlyBucket
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.purchase_repository import PurchaseRepository

logger = logging.getLogger(__name__)

DEFAULT_MONTHS = 12
MAX_MONTHS = 36
MAX_RANGE_DAYS = 366

K = TypeVar("K", bound=Hashable)
B = TypeVar("B")


# ---------------------------------------------------------------------------
# Input normalization
# ---------------------------------------------------------------------------


def clamp_months(months_back: int) -> int:
    if months_back <= 0:
        return DEFAULT_MONTHS
    if months_back > MAX_MONTHS:
        return MAX_MONTHS
    return months_back


def monthly_window_start(now: datetime, months_back: int) -> tuple[int, int]:
    """First (year, month) of a window ending in the month of ``now``."""
    today = as_date(now)
    return add_months(today.year, today.month, -(clamp_months(months_back) - 1))


def normalize_day_range(
    start: date | datetime, end: date | datetime
) -> tuple[date, date]:
    first, last = as_date(start), as_date(end)
    if last < first:
        first, last = last, first
    if (last - first).days > MAX_RANGE_DAYS:
        last = first + timedelta(days=MAX_RANGE_DAYS)
    return first, last


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


def group_by_month(
    purchases: Iterable[Purchase], currency: str = "USD"
) -> list[MonthlyBucket]:
    """Sparse monthly buckets, ascending, one per month with purchases."""
    groups = _group(purchases, lambda p: (p.date.year, p.date.month))
    return [
        MonthlyBucket(
            year=year,
            month=month,
            count=len(members),
            total=Money.total((p.total for p in members), currency),
        )
        for (year, month), members in sorted(groups.items())
    ]


def group_by_day(
    purchases: Iterable[Purchase], currency: str = "USD"
) -> list[DailyBucket]:
    """Sparse daily buckets, ascending, one per UTC day with purchases."""
    groups = _group(purchases, lambda p: p.date.date())
    return [
        DailyBucket(
            day=day,
            count=len(members),
            total=Money.total((p.total for p in members), currency),
        )
        for day, members in sorted(groups.items())
    ]


def _group(
    purchases: Iterable[Purchase], key: Callable[[Purchase], K]
) -> dict[K, list[Purchase]]:
    groups: dict[K, list[Purchase]] = {}
    for purchase in purchases:
        groups.setdefault(key(purchase), []).append(purchase)
    return groups


# ---------------------------------------------------------------------------
# Dense calendar join
# ---------------------------------------------------------------------------


def fill_calendar(
    sparse: Iterable[B],
    start_key: K,
    end_key: K,
    step: Callable[[K], K],
    zero: Callable[[K], B],
    key: Callable[[B], K] = lambda bucket: bucket.key,  # type: ignore[attr-defined]
) -> list[B]:
    """Emit one bucket per calendar key from ``start_key`` to ``end_key``.

    Keys found in ``sparse`` keep their bucket; missing keys get
    ``zero(key)``. Buckets outside the window are dropped. Running it on
    an already dense series returns the same series.
    """
    present = {key(bucket): bucket for bucket in sparse}
    result: list[B] = []
    current = start_key
    while current <= end_key:  # type: ignore[operator]
        result.append(present[current] if current in present else zero(current))
        current = step(current)
    return result


def fill_days(
    sparse: Iterable[DailyBucket], first: date, last: date, currency: str = "USD"
) -> list[DailyBucket]:
    return fill_calendar(
        sparse,
        first,
        last,
        step=next_day,
        zero=lambda day: DailyBucket(day=day, count=0, total=Money.zero(currency)),
    )


def fill_months(
    sparse: Iterable[MonthlyBucket],
    first: tuple[int, int],
    last: tuple[int, int],
    currency: str = "USD",
) -> list[MonthlyBucket]:
    return fill_calendar(
        sparse,
        first,
        last,
        step=next_month,
        zero=lambda ym: MonthlyBucket(
            year=ym[0], month=ym[1], count=0, total=Money.zero(currency)
        ),
    )


# ---------------------------------------------------------------------------
# Ledger-backed reports
# ---------------------------------------------------------------------------


class ReportingService:

    def __init__(
        self,
        purchase_repo: PurchaseRepository,
        clock: Callable[[], datetime] = utc_now,
        currency: str = "USD",
    ) -> None:
        self._purchase_repo = purchase_repo
        self._clock = clock
        self._currency = currency

    def monthly_totals(
        self, months_back: int, fill_gaps: bool = False
    ) -> list[MonthlyBucket]:
        """Per-month count and sum from the start of the window to now.

        Sparse by default: months without purchases are left out unless
        ``fill_gaps`` is set.
        """
        now = self._clock()
        first = monthly_window_start(now, months_back)
        window_start = start_of_day(date(first[0], first[1], 1))

        purchases = self._purchase_repo.list_between(window_start)
        buckets = group_by_month(purchases, self._currency)
        logger.debug(
            "Monthly totals from %04d-%02d: %d purchases in %d months",
            first[0], first[1], len(purchases), len(buckets),
        )

        if not fill_gaps:
            return buckets
        today = as_date(now)
        last = max([(today.year, today.month)] + [b.key for b in buckets])
        return fill_months(buckets, first, last, self._currency)

    def daily_totals(
        self, start: date | datetime, end: date | datetime
    ) -> list[DailyBucket]:
        """One bucket per day in ``[start, end]``, zero-filled, ascending."""
        first, last = normalize_day_range(start, end)

        purchases = self._purchase_repo.list_between(
            start_of_day(first), start_of_day(next_day(last))
        )
        sparse = group_by_day(purchases, self._currency)
        logger.debug(
            "Daily totals %s..%s: %d purchases on %d days",
            first, last, len(purchases), len(sparse),
        )
        return fill_days(sparse, first, last, self._currency)

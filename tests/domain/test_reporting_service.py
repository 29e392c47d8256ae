"""Unit tests for report grouping, range normalization and gap-filling."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from backoffice.domain.model.purchase import Purchase, PurchaseLine
from backoffice.domain.model.report import DailyBucket, MonthlyBucket
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.service.reporting_service import (
    ReportingService,
    clamp_months,
    fill_days,
    fill_months,
    group_by_day,
    group_by_month,
    monthly_window_start,
    normalize_day_range,
)
from tests.fakes import FakePurchaseRepository


def _purchase(when: datetime, price: str = "10.00", qty: int = 1) -> Purchase:
    line = PurchaseLine(product_id="1", quantity=Quantity(qty), unit_price=Money.of(price))
    return Purchase.create("Alice", [line], date=when)


def _at(y: int, m: int, d: int, hh: int = 12, mm: int = 0) -> datetime:
    return datetime(y, m, d, hh, mm, tzinfo=timezone.utc)


def _fixed_clock(now: datetime):
    return lambda: now


# ── Normalization ────────────────────────────────────────────────────────────


class TestClampMonths:

    @pytest.mark.parametrize(
        "given, expected",
        [(0, 12), (-5, 12), (1, 1), (12, 12), (36, 36), (37, 36), (100, 36)],
    )
    def test_clamp(self, given, expected):
        assert clamp_months(given) == expected


class TestMonthlyWindowStart:

    def test_single_month_is_current_month(self):
        assert monthly_window_start(_at(2024, 5, 17), 1) == (2024, 5)

    def test_crosses_year_boundary(self):
        assert monthly_window_start(_at(2024, 2, 10), 3) == (2023, 12)

    def test_twelve_months(self):
        assert monthly_window_start(_at(2024, 1, 31), 12) == (2023, 2)

    def test_out_of_range_is_clamped(self):
        assert monthly_window_start(_at(2024, 1, 31), 0) == (2023, 2)
        assert monthly_window_start(_at(2024, 1, 31), 100) == (2021, 2)


class TestNormalizeDayRange:

    def test_drops_time_of_day(self):
        assert normalize_day_range(_at(2024, 1, 1, 23, 59), _at(2024, 1, 3, 0, 1)) == (
            date(2024, 1, 1),
            date(2024, 1, 3),
        )

    def test_aware_bounds_are_read_on_the_utc_calendar(self):
        minus_five = timezone(timedelta(hours=-5))
        late_evening = datetime(2024, 1, 1, 22, 0, tzinfo=minus_five)  # 03:00 UTC next day
        assert normalize_day_range(late_evening, late_evening) == (
            date(2024, 1, 2),
            date(2024, 1, 2),
        )

    def test_reversed_range_is_swapped(self):
        assert normalize_day_range(date(2024, 1, 3), date(2024, 1, 1)) == (
            date(2024, 1, 1),
            date(2024, 1, 3),
        )

    def test_span_of_366_days_is_kept(self):
        first, last = normalize_day_range(date(2024, 1, 1), date(2025, 1, 1))
        assert (last - first).days == 366

    def test_longer_span_is_cut_to_366_days(self):
        first, last = normalize_day_range(date(2020, 1, 1), date(2024, 1, 1))
        assert first == date(2020, 1, 1)
        assert last == date(2021, 1, 1)  # 2020 is a leap year


# ── Grouping ─────────────────────────────────────────────────────────────────


class TestGrouping:

    def test_group_by_month_counts_and_sums(self):
        buckets = group_by_month([
            _purchase(_at(2024, 2, 1), "5.50"),
            _purchase(_at(2024, 1, 15), "10.00"),
            _purchase(_at(2024, 1, 31, 23, 59), "0.25"),
        ])
        assert buckets == [
            MonthlyBucket(2024, 1, 2, Money.of("10.25")),
            MonthlyBucket(2024, 2, 1, Money.of("5.50")),
        ]

    def test_group_by_day_uses_utc_calendar_day(self):
        buckets = group_by_day([
            _purchase(_at(2024, 1, 2, 0, 0)),
            _purchase(_at(2024, 1, 2, 23, 59)),
            _purchase(_at(2024, 1, 1, 23, 59)),
        ])
        assert [(b.day, b.count) for b in buckets] == [
            (date(2024, 1, 1), 1),
            (date(2024, 1, 2), 2),
        ]

    def test_sums_are_exact(self):
        buckets = group_by_day([_purchase(_at(2024, 1, 1), "0.10") for _ in range(10)])
        assert buckets[0].total.amount == Decimal("1.00")


# ── Dense calendar join ──────────────────────────────────────────────────────


class TestFillDays:

    def test_fills_missing_days_with_zero(self):
        sparse = [DailyBucket(date(2024, 1, 2), 1, Money.of("25.50"))]
        dense = fill_days(sparse, date(2024, 1, 1), date(2024, 1, 3))
        assert [(b.day, b.count, b.total.amount) for b in dense] == [
            (date(2024, 1, 1), 0, Decimal("0")),
            (date(2024, 1, 2), 1, Decimal("25.50")),
            (date(2024, 1, 3), 0, Decimal("0")),
        ]

    def test_is_idempotent(self):
        sparse = [DailyBucket(date(2024, 1, 2), 1, Money.of("25.50"))]
        once = fill_days(sparse, date(2024, 1, 1), date(2024, 1, 5))
        assert fill_days(once, date(2024, 1, 1), date(2024, 1, 5)) == once

    def test_drops_buckets_outside_window(self):
        sparse = [DailyBucket(date(2024, 2, 1), 1, Money.of("1.00"))]
        dense = fill_days(sparse, date(2024, 1, 1), date(2024, 1, 2))
        assert all(b.count == 0 for b in dense)

    def test_single_day(self):
        assert len(fill_days([], date(2024, 1, 1), date(2024, 1, 1))) == 1


class TestFillMonths:

    def test_crosses_year_boundary(self):
        sparse = [MonthlyBucket(2024, 1, 3, Money.of("30.00"))]
        dense = fill_months(sparse, (2023, 11), (2024, 2))
        assert [(b.year, b.month, b.count) for b in dense] == [
            (2023, 11, 0),
            (2023, 12, 0),
            (2024, 1, 3),
            (2024, 2, 0),
        ]


# ── Ledger-backed service ────────────────────────────────────────────────────


class TestReportingService:

    def test_monthly_totals_is_sparse_by_default(self):
        repo = FakePurchaseRepository([
            _purchase(_at(2024, 1, 10), "10.00"),
            _purchase(_at(2024, 3, 10), "5.00"),
        ])
        svc = ReportingService(repo, clock=_fixed_clock(_at(2024, 3, 20)))
        assert [(b.year, b.month) for b in svc.monthly_totals(3)] == [(2024, 1), (2024, 3)]

    def test_monthly_totals_fill_gaps_runs_to_current_month(self):
        repo = FakePurchaseRepository([_purchase(_at(2024, 1, 10))])
        svc = ReportingService(repo, clock=_fixed_clock(_at(2024, 3, 20)))
        filled = svc.monthly_totals(4, fill_gaps=True)
        assert [(b.year, b.month, b.count) for b in filled] == [
            (2023, 12, 0),
            (2024, 1, 1),
            (2024, 2, 0),
            (2024, 3, 0),
        ]

    def test_monthly_window_starts_on_first_of_month(self):
        repo = FakePurchaseRepository([
            _purchase(_at(2024, 1, 31, 23, 59)),
            _purchase(_at(2024, 2, 1, 0, 0)),
        ])
        svc = ReportingService(repo, clock=_fixed_clock(_at(2024, 3, 5)))
        assert [(b.year, b.month) for b in svc.monthly_totals(2)] == [(2024, 2)]

    def test_daily_totals_end_day_is_inclusive(self):
        repo = FakePurchaseRepository([
            _purchase(_at(2024, 1, 3, 23, 59)),
            _purchase(_at(2024, 1, 4, 0, 0)),
        ])
        svc = ReportingService(repo)
        series = svc.daily_totals(date(2024, 1, 1), date(2024, 1, 3))
        assert [b.count for b in series] == [0, 0, 1]

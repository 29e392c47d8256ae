"""Report buckets: computed on demand, never persisted."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from backoffice.domain.model.value_objects import Money


@dataclass(frozen=True)
class MonthlyBucket:
    year: int
    month: int
    count: int
    total: Money

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)


@dataclass(frozen=True)
class DailyBucket:
    day: date
    count: int
    total: Money

    @property
    def key(self) -> date:
        return self.day

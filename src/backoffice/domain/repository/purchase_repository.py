"""Abstract repository for the Purchase ledger (the durable record store)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from backoffice.domain.model.purchase import Purchase


class PurchaseRepository(ABC):

    @abstractmethod
    def add(self, purchase: Purchase) -> Purchase:
        """Assign an ID and persist the purchase with all its lines at once.

        Returns the stored purchase. On failure nothing is written and
        PersistenceError is raised.
        """

    @abstractmethod
    def get_by_id(self, purchase_id: int) -> Purchase | None:
        """Return a purchase by its ID, or None if not found."""

    @abstractmethod
    def list_between(
        self, start: datetime, end: datetime | None = None
    ) -> list[Purchase]:
        """Return purchases dated in ``[start, end)``; no ``end`` means open."""

    @abstractmethod
    def list_all(self) -> list[Purchase]:
        """Return every recorded purchase."""

"""Caller context passed explicitly into use cases that mutate the ledger.

Whoever authenticated the caller (HTTP middleware, the CLI) decides what
the caller may do and says so here; handlers never look at ambient state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from backoffice.domain.exceptions import PermissionDeniedError

CREATE_PURCHASES = "purchases:create"


@dataclass(frozen=True)
class CallerContext:
    user_id: str
    permissions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def with_permissions(cls, user_id: str, *permissions: str) -> CallerContext:
        return cls(user_id=user_id, permissions=frozenset(permissions))

    def require(self, permission: str) -> None:
        if permission not in self.permissions:
            raise PermissionDeniedError(
                f"User '{self.user_id}' lacks permission '{permission}'"
            )

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from rental_manager.domain.enums import ContractStatus


@dataclass(frozen=True, slots=True)
class ContractExpiryPolicy:
    """Defines when a contract counts as expired or expiring "as of" a given date.

    Semantics (intentionally centralized):
    - Closed contracts are never expired nor expiring.
    - Expired: end_date < as_of
    - Expiring: as_of <= end_date <= as_of + window_days

    Note: end_date is inclusive. A contract ending "today" is expiring, not expired.
    """

    as_of: date
    window_days: int = 30

    @property
    def window_end(self) -> date:
        return self.as_of + timedelta(days=self.window_days)

    def is_expired(self, *, status: ContractStatus, end_date: date) -> bool:
        return status != ContractStatus.CLOSED and end_date < self.as_of

    def is_expiring(self, *, status: ContractStatus, end_date: date) -> bool:
        return status != ContractStatus.CLOSED and self.as_of <= end_date <= self.window_end

    def sqlalchemy_expired_predicate(self, *, status_col, end_col):
        """Build a SQLAlchemy predicate implementing the expired rule.

        Kept here so repositories can translate the policy into SQL without
        redefining the boundary conditions.
        """
        from sqlalchemy import and_

        return and_(status_col != ContractStatus.CLOSED, end_col < self.as_of)

    def sqlalchemy_expiring_predicate(self, *, status_col, end_col):
        """Build a SQLAlchemy predicate implementing the expiring rule."""
        from sqlalchemy import and_

        return and_(
            status_col != ContractStatus.CLOSED,
            end_col >= self.as_of,
            end_col <= self.window_end,
        )

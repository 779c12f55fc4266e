from datetime import date

from sqlalchemy.orm import Session

import rental_manager.repositories.contract as contract_repo
import rental_manager.repositories.payment as payment_repo
from rental_manager.core.config import settings
from rental_manager.domain.contract_expiry import ContractExpiryPolicy
from rental_manager.domain.enums import ContractStatus
from rental_manager.schemas.dashboard import DashboardStats


def get_dashboard_stats(
    db: Session, as_of: date | None = None, window_days: int | None = None
) -> DashboardStats:
    """
    Headline counts, computed fresh on every call.

    - expired_contracts: not closed, end_date before as_of
    - expiring_contracts: not closed, end_date within [as_of, as_of + window]
    - total_contracts: active contracts
    - pending_payments: unpaid, due after as_of
    - overdue_payments: unpaid, due on or before as_of
    """
    as_of = as_of or date.today()
    if window_days is None:
        window_days = settings.expiring_contract_window_days
    policy = ContractExpiryPolicy(as_of=as_of, window_days=window_days)

    return DashboardStats(
        expired_contracts=contract_repo.count_expired_contracts(db, policy),
        expiring_contracts=contract_repo.count_expiring_contracts(db, policy),
        total_contracts=contract_repo.count_contracts_by_status(
            db, ContractStatus.ACTIVE
        ),
        pending_payments=payment_repo.count_unpaid_payments_due_after(db, as_of),
        overdue_payments=payment_repo.count_unpaid_payments_due_on_or_before(
            db, as_of
        ),
    )

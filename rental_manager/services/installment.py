"""Monthly installment schedule of a contract."""

from sqlalchemy.orm import Session

import rental_manager.repositories.payment as payment_repo
from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.db.models.payment import Payment as PaymentModel
from rental_manager.domain.installments import installment_due_dates, installment_label


def generate_installments(db: Session, contract: ContractModel) -> list[PaymentModel]:
    """
    Stage one scheduled payment per month of the contract.

    Payment ``i`` is due on ``payment_day`` of the month ``start_date`` + i
    (clamped to the month's last day), carries the contract's rent and is
    labelled "Installment i+1/duration".

    Does not commit: runs inside the caller's contract-creation transaction.
    """
    due_dates = installment_due_dates(
        contract.start_date, contract.duration, contract.payment_day
    )
    payments = [
        payment_repo.add_payment(
            db,
            contract_id=contract.id,
            due_date=due_date,
            value=contract.rent_value,
            observations=installment_label(index, contract.duration),
        )
        for index, due_date in enumerate(due_dates)
    ]
    db.flush()
    return payments

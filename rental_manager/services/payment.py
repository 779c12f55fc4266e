"""Payment lifecycle: scheduled, paid, deleted (archived)."""

import logging
from datetime import date

from sqlalchemy.orm import Session

import rental_manager.repositories.contract as contract_repo
import rental_manager.repositories.deleted_payment as deleted_payment_repo
import rental_manager.repositories.payment as payment_repo
from rental_manager.core.config import settings
from rental_manager.db.models.deleted_payment import DeletedPayment as DeletedPaymentModel
from rental_manager.db.models.payment import Payment as PaymentModel
from rental_manager.domain.late_payment import LatePaymentPolicy
from rental_manager.errors import DomainValidationError, NotFoundError
from rental_manager.schemas.payment import LateChargesQuote, PaymentCreate
from rental_manager.services.common import reject_null_fields

logger = logging.getLogger(__name__)


def default_late_payment_policy() -> LatePaymentPolicy:
    """Late payment policy with the rates from settings."""
    return LatePaymentPolicy(
        late_fee_rate=settings.late_payment_fee_rate,
        monthly_interest_rate=settings.monthly_interest_rate,
    )


def get_payment(db: Session, payment_id: int) -> PaymentModel:
    payment = payment_repo.get_payment_by_id(db, payment_id)
    if not payment:
        raise NotFoundError("Payment not found")
    return payment


def list_payments(
    db: Session,
    contract_id: int | None = None,
    is_paid: bool | None = None,
    due_from: date | None = None,
    due_to: date | None = None,
) -> list[PaymentModel]:
    return payment_repo.get_all_payments(
        db,
        contract_id=contract_id,
        is_paid=is_paid,
        due_from=due_from,
        due_to=due_to,
    )


def list_payments_by_contract(db: Session, contract_id: int) -> list[PaymentModel]:
    if not contract_repo.get_contract_by_id(db, contract_id):
        raise NotFoundError(f"Contract with id {contract_id} not found")
    return payment_repo.get_payments_by_contract_id(db, contract_id)


def create_payment(db: Session, payment_data: PaymentCreate) -> PaymentModel:
    """Add an extra scheduled payment to an existing contract."""
    if not contract_repo.get_contract_by_id(db, payment_data.contract_id):
        raise NotFoundError(f"Contract with id {payment_data.contract_id} not found")

    return payment_repo.create_payment(
        db,
        contract_id=payment_data.contract_id,
        due_date=payment_data.due_date,
        value=payment_data.value,
        observations=payment_data.observations,
    )


def update_payment(db: Session, payment_id: int, **update_fields) -> PaymentModel:
    """
    Update a payment's due date, value or observations.

    Raises:
        NotFoundError: If the payment doesn't exist
        DomainValidationError: If due_date or value change on a paid payment
    """
    payment = get_payment(db, payment_id)
    reject_null_fields(update_fields, ("due_date", "value"))

    if payment.is_paid:
        for field in ("due_date", "value"):
            if field in update_fields and update_fields[field] != getattr(payment, field):
                raise DomainValidationError(
                    f"Cannot change {field} of a paid payment", field=field
                )

    allowed = {
        key: value
        for key, value in update_fields.items()
        if key in ("due_date", "value", "observations")
    }
    return payment_repo.update_payment(db, payment_id=payment_id, **allowed)


def mark_payment_paid(
    db: Session,
    payment_id: int,
    payment_method: str,
    receipt_number: str,
    interest_amount: int,
    late_payment_fee: int,
    payment_date: date | None = None,
) -> PaymentModel:
    """
    Settle a scheduled payment.

    The interest and late fee are stored as given; computing them is up to the
    caller (see ``quote_late_charges``). A payment is paid exactly once.

    Raises:
        NotFoundError: If the payment doesn't exist
        DomainValidationError: If the payment is already paid or an amount is negative
    """
    payment = get_payment(db, payment_id)

    if payment.is_paid:
        raise DomainValidationError(f"Payment {payment_id} is already paid")
    if interest_amount < 0:
        raise DomainValidationError(
            "interest_amount cannot be negative", field="interest_amount"
        )
    if late_payment_fee < 0:
        raise DomainValidationError(
            "late_payment_fee cannot be negative", field="late_payment_fee"
        )

    paid = payment_repo.update_payment(
        db,
        payment_id=payment_id,
        is_paid=True,
        payment_date=payment_date or date.today(),
        payment_method=payment_method,
        receipt_number=receipt_number,
        interest_amount=interest_amount,
        late_payment_fee=late_payment_fee,
    )
    logger.info(
        "Payment %s marked paid on %s (interest=%d, late fee=%d)",
        paid.id,
        paid.payment_date,
        paid.interest_amount,
        paid.late_payment_fee,
    )
    return paid


def quote_late_charges(
    db: Session,
    payment_id: int,
    paid_on: date | None = None,
    policy: LatePaymentPolicy | None = None,
) -> LateChargesQuote:
    """Late fee and interest owed if ``payment_id`` is settled on ``paid_on`` (default today)."""
    payment = get_payment(db, payment_id)
    if payment.is_paid:
        raise DomainValidationError(f"Payment {payment_id} is already paid")
    paid_on = paid_on or date.today()
    policy = policy or default_late_payment_policy()

    charges = policy.charges_for(
        value=payment.value, due_date=payment.due_date, paid_on=paid_on
    )
    return LateChargesQuote(
        payment_id=payment.id,
        due_date=payment.due_date,
        payment_date=paid_on,
        days_late=charges.days_late,
        value=payment.value,
        late_payment_fee=charges.late_payment_fee,
        interest_amount=charges.interest_amount,
        total=payment.value + charges.late_payment_fee + charges.interest_amount,
    )


def delete_payment(
    db: Session, payment_id: int, acting_user_id: int | None
) -> DeletedPaymentModel:
    """
    Move a payment into the deleted-payments archive.

    The archive copy is written and the live row removed in a single
    transaction: either both happen or neither does.

    Raises:
        NotFoundError: If the payment doesn't exist
    """
    payment = get_payment(db, payment_id)

    try:
        archived = deleted_payment_repo.add_deleted_payment(
            db, payment, deleted_by=acting_user_id
        )
        payment_repo.remove_payment(db, payment)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Archiving payment %s rolled back", payment_id)
        raise

    db.refresh(archived)
    logger.info("Payment %s archived by user %s", payment_id, acting_user_id)
    return archived


def get_deleted_payment(db: Session, deleted_payment_id: int) -> DeletedPaymentModel:
    archived = deleted_payment_repo.get_deleted_payment_by_id(db, deleted_payment_id)
    if not archived:
        raise NotFoundError("Deleted payment not found")
    return archived


def list_deleted_payments(
    db: Session,
    contract_id: int | None = None,
    deleted_by: int | None = None,
) -> list[DeletedPaymentModel]:
    return deleted_payment_repo.get_all_deleted_payments(
        db, contract_id=contract_id, deleted_by=deleted_by
    )

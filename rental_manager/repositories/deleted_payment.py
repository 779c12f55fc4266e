from sqlalchemy.orm import Session

from rental_manager.db.models.deleted_payment import DeletedPayment as DeletedPaymentModel
from rental_manager.db.models.payment import Payment as PaymentModel


def add_deleted_payment(
    db: Session, payment: PaymentModel, deleted_by: int | None
) -> DeletedPaymentModel:
    """
    Stage an archive copy of ``payment``. Does not commit.

    The archive is append-only: this module offers no update or delete.
    """
    archived = DeletedPaymentModel(
        original_id=payment.id,
        contract_id=payment.contract_id,
        due_date=payment.due_date,
        value=payment.value,
        is_paid=payment.is_paid,
        payment_date=payment.payment_date,
        interest_amount=payment.interest_amount,
        late_payment_fee=payment.late_payment_fee,
        payment_method=payment.payment_method,
        receipt_number=payment.receipt_number,
        observations=payment.observations,
        deleted_by=deleted_by,
        original_created_at=payment.created_at,
    )
    db.add(archived)
    db.flush()
    return archived


def get_deleted_payment_by_id(
    db: Session, deleted_payment_id: int
) -> DeletedPaymentModel | None:
    return (
        db.query(DeletedPaymentModel)
        .filter(DeletedPaymentModel.id == deleted_payment_id)
        .first()
    )


def get_all_deleted_payments(
    db: Session,
    contract_id: int | None = None,
    deleted_by: int | None = None,
) -> list[DeletedPaymentModel]:
    """Get archived payments, most recently deleted first."""
    query = db.query(DeletedPaymentModel)
    if contract_id is not None:
        query = query.filter(DeletedPaymentModel.contract_id == contract_id)
    if deleted_by is not None:
        query = query.filter(DeletedPaymentModel.deleted_by == deleted_by)
    return query.order_by(
        DeletedPaymentModel.deleted_at.desc(), DeletedPaymentModel.id.desc()
    ).all()


def contract_has_deleted_payments(db: Session, contract_id: int) -> bool:
    return (
        db.query(DeletedPaymentModel.id)
        .filter(DeletedPaymentModel.contract_id == contract_id)
        .first()
        is not None
    )


def user_has_deleted_payments(db: Session, user_id: int) -> bool:
    return (
        db.query(DeletedPaymentModel.id)
        .filter(DeletedPaymentModel.deleted_by == user_id)
        .first()
        is not None
    )

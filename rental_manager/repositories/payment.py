from datetime import date

from sqlalchemy.orm import Session

from rental_manager.db.models.payment import Payment as PaymentModel
from rental_manager.errors import NotFoundError


def get_payment_by_id(db: Session, payment_id: int) -> PaymentModel | None:
    """Get a payment by ID."""
    return db.query(PaymentModel).filter(PaymentModel.id == payment_id).first()


def get_payments_by_contract_id(db: Session, contract_id: int) -> list[PaymentModel]:
    """Get all payments of a contract ordered by due date."""
    return (
        db.query(PaymentModel)
        .filter(PaymentModel.contract_id == contract_id)
        .order_by(PaymentModel.due_date, PaymentModel.id)
        .all()
    )


def get_all_payments(
    db: Session,
    contract_id: int | None = None,
    is_paid: bool | None = None,
    due_from: date | None = None,
    due_to: date | None = None,
) -> list[PaymentModel]:
    """Get payments ordered by due date, optionally filtered by contract, paid flag and due range."""
    query = db.query(PaymentModel)

    if contract_id is not None:
        query = query.filter(PaymentModel.contract_id == contract_id)
    if is_paid is not None:
        query = query.filter(PaymentModel.is_paid == is_paid)
    if due_from is not None:
        query = query.filter(PaymentModel.due_date >= due_from)
    if due_to is not None:
        query = query.filter(PaymentModel.due_date <= due_to)

    return query.order_by(PaymentModel.due_date, PaymentModel.id).all()


def contract_has_payments(db: Session, contract_id: int) -> bool:
    return (
        db.query(PaymentModel.id)
        .filter(PaymentModel.contract_id == contract_id)
        .first()
        is not None
    )


def add_payment(
    db: Session,
    contract_id: int,
    due_date: date,
    value: int,
    observations: str | None = None,
) -> PaymentModel:
    """
    Stage a new scheduled (unpaid) payment.

    Does not commit: the caller owns the transaction.
    """
    db_payment = PaymentModel(
        contract_id=contract_id,
        due_date=due_date,
        value=value,
        is_paid=False,
        payment_date=None,
        interest_amount=0,
        late_payment_fee=0,
        payment_method=None,
        receipt_number=None,
        observations=observations,
    )
    db.add(db_payment)
    return db_payment


def create_payment(
    db: Session,
    contract_id: int,
    due_date: date,
    value: int,
    observations: str | None = None,
) -> PaymentModel:
    """Create a new scheduled payment in the database. Pure data access - no business logic."""
    db_payment = add_payment(
        db,
        contract_id=contract_id,
        due_date=due_date,
        value=value,
        observations=observations,
    )
    db.commit()
    db.refresh(db_payment)
    return db_payment


def update_payment(db: Session, payment_id: int, **kwargs) -> PaymentModel:
    """
    Update a payment. Only updates fields that are explicitly provided.
    """
    payment = get_payment_by_id(db, payment_id)
    if not payment:
        raise NotFoundError("Payment not found")

    for field in (
        "due_date",
        "value",
        "observations",
        "is_paid",
        "payment_date",
        "payment_method",
        "receipt_number",
        "interest_amount",
        "late_payment_fee",
    ):
        if field in kwargs:
            setattr(payment, field, kwargs[field])

    db.commit()
    db.refresh(payment)
    return payment


def remove_payment(db: Session, payment: PaymentModel) -> None:
    """Stage the removal of a payment row. Does not commit."""
    db.delete(payment)
    db.flush()


def count_unpaid_payments_due_after(db: Session, as_of: date) -> int:
    return (
        db.query(PaymentModel)
        .filter(PaymentModel.is_paid.is_(False), PaymentModel.due_date > as_of)
        .count()
    )


def count_unpaid_payments_due_on_or_before(db: Session, as_of: date) -> int:
    return (
        db.query(PaymentModel)
        .filter(PaymentModel.is_paid.is_(False), PaymentModel.due_date <= as_of)
        .count()
    )

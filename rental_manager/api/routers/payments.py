from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.schemas.document import ReceiptData
from rental_manager.schemas.payment import (
    DeletedPayment,
    LateChargesQuote,
    Payment,
    PaymentCreate,
    PaymentSettle,
    PaymentUpdate,
)
from rental_manager.services import documents as document_service
from rental_manager.services import payment as payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("", response_model=Payment, status_code=status.HTTP_201_CREATED)
def create_new_payment(
    payment_data: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Add an extra scheduled payment to a contract."""
    payment = payment_service.create_payment(db, payment_data)
    return Payment.model_validate(payment)


@router.get("", response_model=list[Payment])
def get_all_payments(
    contract_id: int | None = Query(None, description="Filter by contract ID"),
    is_paid: bool | None = Query(None, description="Filter by paid flag"),
    due_from: date | None = Query(None, description="Due on or after this date"),
    due_to: date | None = Query(None, description="Due on or before this date"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    payments = payment_service.list_payments(
        db,
        contract_id=contract_id,
        is_paid=is_paid,
        due_from=due_from,
        due_to=due_to,
    )
    return [Payment.model_validate(payment) for payment in payments]


@router.get("/{payment_id}", response_model=Payment)
def get_payment_by_id(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return Payment.model_validate(payment_service.get_payment(db, payment_id))


@router.put("/{payment_id}", response_model=Payment)
def update_payment_by_id(
    payment_id: int,
    payment_data: PaymentUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Update due date, value or observations. Due date and value are frozen once paid."""
    payment = payment_service.update_payment(
        db, payment_id, **payment_data.model_dump(exclude_unset=True)
    )
    return Payment.model_validate(payment)


@router.get("/{payment_id}/late-charges", response_model=LateChargesQuote)
def get_late_charges(
    payment_id: int,
    payment_date: date | None = Query(None, description="Settlement date, defaults to today"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Late fee and interest owed if the payment is settled on ``payment_date``."""
    return payment_service.quote_late_charges(db, payment_id, paid_on=payment_date)


@router.post("/{payment_id}/pay", response_model=Payment)
def mark_payment_as_paid(
    payment_id: int,
    settle_data: PaymentSettle,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Mark a payment as paid.

    Interest and late fee are stored as sent. Any amount left out of the body
    is filled in from the late payment policy for the settlement date.
    """
    payment_date = settle_data.payment_date or date.today()
    interest_amount = settle_data.interest_amount
    late_payment_fee = settle_data.late_payment_fee

    if interest_amount is None or late_payment_fee is None:
        quote = payment_service.quote_late_charges(db, payment_id, paid_on=payment_date)
        if interest_amount is None:
            interest_amount = quote.interest_amount
        if late_payment_fee is None:
            late_payment_fee = quote.late_payment_fee

    payment = payment_service.mark_payment_paid(
        db,
        payment_id,
        payment_method=settle_data.payment_method,
        receipt_number=settle_data.receipt_number,
        interest_amount=interest_amount,
        late_payment_fee=late_payment_fee,
        payment_date=payment_date,
    )
    return Payment.model_validate(payment)


@router.get("/{payment_id}/receipt-data", response_model=ReceiptData)
def get_receipt_data(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Payment, contract and parties needed to render a receipt. The payment must be paid."""
    return document_service.get_receipt_data(db, payment_id)


@router.delete("/{payment_id}", response_model=DeletedPayment)
def delete_payment_by_id(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Remove a payment, keeping a copy in the deleted-payments archive."""
    archived = payment_service.delete_payment(db, payment_id, current_user.id)
    return DeletedPayment.model_validate(archived)

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.schemas.payment import DeletedPayment
from rental_manager.services import payment as payment_service

router = APIRouter(prefix="/deleted-payments", tags=["deleted-payments"])


@router.get("", response_model=list[DeletedPayment])
def get_all_deleted_payments(
    contract_id: int | None = Query(None, description="Filter by contract ID"),
    deleted_by: int | None = Query(None, description="Filter by the user who deleted"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Archived payments, most recently deleted first. The archive is read-only."""
    archived = payment_service.list_deleted_payments(
        db, contract_id=contract_id, deleted_by=deleted_by
    )
    return [DeletedPayment.model_validate(row) for row in archived]


@router.get("/{deleted_payment_id}", response_model=DeletedPayment)
def get_deleted_payment_by_id(
    deleted_payment_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    archived = payment_service.get_deleted_payment(db, deleted_payment_id)
    return DeletedPayment.model_validate(archived)

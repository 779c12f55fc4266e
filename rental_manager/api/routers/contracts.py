from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import ContractStatus
from rental_manager.schemas.contract import Contract, ContractCreate, ContractUpdate
from rental_manager.schemas.document import ContractDocumentData
from rental_manager.schemas.payment import DeletedPayment, Payment
from rental_manager.services import contract as contract_service
from rental_manager.services import documents as document_service
from rental_manager.services import payment as payment_service

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.post("", response_model=Contract, status_code=status.HTTP_201_CREATED)
def create_new_contract(
    contract_data: ContractCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Create a contract and its monthly installments in one transaction.

    When end_date is omitted it is derived from start_date and duration.
    """
    contract = contract_service.create_contract(db, contract_data)
    return Contract.model_validate(contract)


@router.get("", response_model=list[Contract])
def get_all_contracts(
    owner_id: int | None = Query(None, description="Filter by owner ID"),
    tenant_id: int | None = Query(None, description="Filter by tenant ID"),
    property_id: int | None = Query(None, description="Filter by property ID"),
    contract_status: ContractStatus | None = Query(
        None, alias="status", description="Filter by contract status"
    ),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    contracts = contract_service.list_contracts(
        db,
        owner_id=owner_id,
        tenant_id=tenant_id,
        property_id=property_id,
        status=contract_status,
    )
    return [Contract.model_validate(contract) for contract in contracts]


@router.get("/{contract_id}", response_model=Contract)
def get_contract_by_id(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return Contract.model_validate(contract_service.get_contract(db, contract_id))


@router.put("/{contract_id}", response_model=Contract)
def update_contract_by_id(
    contract_id: int,
    contract_data: ContractUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Update end date, payment day, status or observations. Installments are not regenerated."""
    contract = contract_service.update_contract(
        db, contract_id, **contract_data.model_dump(exclude_unset=True)
    )
    return Contract.model_validate(contract)


@router.get("/{contract_id}/payments", response_model=list[Payment])
def get_contract_payments(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Payments of the contract ordered by due date."""
    payments = payment_service.list_payments_by_contract(db, contract_id)
    return [Payment.model_validate(payment) for payment in payments]


@router.get("/{contract_id}/deleted-payments", response_model=list[DeletedPayment])
def get_contract_deleted_payments(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    contract_service.get_contract(db, contract_id)
    archived = payment_service.list_deleted_payments(db, contract_id=contract_id)
    return [DeletedPayment.model_validate(row) for row in archived]


@router.get("/{contract_id}/document-data", response_model=ContractDocumentData)
def get_contract_document_data(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Contract, owner, tenant and property needed to render the contract document."""
    return document_service.get_contract_document_data(db, contract_id)


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contract_by_id(
    contract_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Delete a contract by ID. Refused while the contract has payments, live or archived."""
    contract_service.delete_contract(db, contract_id)

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.schemas.contract import Contract
from rental_manager.schemas.owner import Owner, OwnerCreate, OwnerUpdate, StatusUpdate
from rental_manager.schemas.property import Property
from rental_manager.services import contract as contract_service
from rental_manager.services import owner as owner_service
from rental_manager.services import property as property_service

router = APIRouter(prefix="/owners", tags=["owners"])


@router.post("", response_model=Owner, status_code=status.HTTP_201_CREATED)
def create_new_owner(
    owner_data: OwnerCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Create a new owner. The document (CPF/CNPJ) must be unique."""
    owner = owner_service.create_owner(db, owner_data)
    return Owner.model_validate(owner)


@router.get("", response_model=list[Owner])
def get_all_owners(
    show_inactive: bool = Query(False, description="Include inactive owners"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    owners = owner_service.list_owners(db, show_inactive=show_inactive)
    return [Owner.model_validate(owner) for owner in owners]


@router.get("/{owner_id}", response_model=Owner)
def get_owner_by_id(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return Owner.model_validate(owner_service.get_owner(db, owner_id))


@router.put("/{owner_id}", response_model=Owner)
def update_owner_by_id(
    owner_id: int,
    owner_data: OwnerUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Update an owner. Only fields present in the body are changed."""
    owner = owner_service.update_owner(
        db, owner_id, **owner_data.model_dump(exclude_unset=True)
    )
    return Owner.model_validate(owner)


@router.patch("/{owner_id}/status", response_model=Owner)
def set_owner_status(
    owner_id: int,
    status_data: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    owner = owner_service.set_owner_status(db, owner_id, status_data.status)
    return Owner.model_validate(owner)


@router.post("/{owner_id}/activate", response_model=Owner)
def activate_owner(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    owner = owner_service.set_owner_status(db, owner_id, RecordStatus.ACTIVE)
    return Owner.model_validate(owner)


@router.post("/{owner_id}/deactivate", response_model=Owner)
def deactivate_owner(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    owner = owner_service.set_owner_status(db, owner_id, RecordStatus.INACTIVE)
    return Owner.model_validate(owner)


@router.post("/{owner_id}/toggle-status", response_model=Owner)
def toggle_owner_status(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    owner = owner_service.toggle_owner_status(db, owner_id)
    return Owner.model_validate(owner)


@router.get("/{owner_id}/properties", response_model=list[Property])
def get_owner_properties(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """All properties of the owner, active or not."""
    properties = property_service.list_properties_by_owner(db, owner_id)
    return [Property.model_validate(prop) for prop in properties]


@router.get("/{owner_id}/contracts", response_model=list[Contract])
def get_owner_contracts(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    owner_service.get_owner(db, owner_id)
    contracts = contract_service.list_contracts(db, owner_id=owner_id)
    return [Contract.model_validate(contract) for contract in contracts]


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner_by_id(
    owner_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Delete an owner by ID.

    An owner can only be deleted if no property or contract references it;
    deactivate it otherwise.
    """
    owner_service.delete_owner(db, owner_id)

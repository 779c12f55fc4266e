from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.schemas.contract import Contract
from rental_manager.schemas.owner import StatusUpdate
from rental_manager.schemas.property import Property, PropertyCreate, PropertyUpdate
from rental_manager.services import contract as contract_service
from rental_manager.services import property as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("", response_model=Property, status_code=status.HTTP_201_CREATED)
def create_new_property(
    property_data: PropertyCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    prop = property_service.create_property(db, property_data)
    return Property.model_validate(prop)


@router.get("", response_model=list[Property])
def get_all_properties(
    show_inactive: bool = Query(False, description="Include inactive properties"),
    owner_id: int | None = Query(None, description="Filter by owner ID"),
    available_for_rent: bool | None = Query(
        None, description="Filter by rent availability"
    ),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    properties = property_service.list_properties(
        db,
        show_inactive=show_inactive,
        owner_id=owner_id,
        available_for_rent=available_for_rent,
    )
    return [Property.model_validate(prop) for prop in properties]


@router.get("/{property_id}", response_model=Property)
def get_property_by_id(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return Property.model_validate(property_service.get_property(db, property_id))


@router.put("/{property_id}", response_model=Property)
def update_property_by_id(
    property_id: int,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    prop = property_service.update_property(
        db, property_id, **property_data.model_dump(exclude_unset=True)
    )
    return Property.model_validate(prop)


@router.patch("/{property_id}/status", response_model=Property)
def set_property_status(
    property_id: int,
    status_data: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    prop = property_service.set_property_status(db, property_id, status_data.status)
    return Property.model_validate(prop)


@router.post("/{property_id}/activate", response_model=Property)
def activate_property(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    prop = property_service.set_property_status(db, property_id, RecordStatus.ACTIVE)
    return Property.model_validate(prop)


@router.post("/{property_id}/deactivate", response_model=Property)
def deactivate_property(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    prop = property_service.set_property_status(
        db, property_id, RecordStatus.INACTIVE
    )
    return Property.model_validate(prop)


@router.post("/{property_id}/toggle-status", response_model=Property)
def toggle_property_status(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    prop = property_service.toggle_property_status(db, property_id)
    return Property.model_validate(prop)


@router.post("/{property_id}/toggle-availability", response_model=Property)
def toggle_property_availability(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Flip whether the property is offered for rent."""
    prop = property_service.toggle_property_availability(db, property_id)
    return Property.model_validate(prop)


@router.get("/{property_id}/contracts", response_model=list[Contract])
def get_property_contracts(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    property_service.get_property(db, property_id)
    contracts = contract_service.list_contracts(db, property_id=property_id)
    return [Contract.model_validate(contract) for contract in contracts]


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property_by_id(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Delete a property by ID. Refused while any contract references it."""
    property_service.delete_property(db, property_id)

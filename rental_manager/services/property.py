from sqlalchemy.orm import Session

import rental_manager.repositories.owner as owner_repo
import rental_manager.repositories.property as property_repo
from rental_manager.db.models.property import Property as PropertyModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.errors import DomainValidationError, NotFoundError
from rental_manager.schemas.address import dump_address
from rental_manager.schemas.property import PropertyCreate
from rental_manager.services.common import reject_null_fields

REQUIRED_FIELDS = (
    "owner_id",
    "type",
    "address",
    "rent_value",
    "available_for_rent",
)


def get_property(db: Session, property_id: int) -> PropertyModel:
    prop = property_repo.get_property_by_id(db, property_id)
    if not prop:
        raise NotFoundError("Property not found")
    return prop


def list_properties(
    db: Session,
    show_inactive: bool = False,
    owner_id: int | None = None,
    available_for_rent: bool | None = None,
) -> list[PropertyModel]:
    return property_repo.get_all_properties(
        db,
        show_inactive=show_inactive,
        owner_id=owner_id,
        available_for_rent=available_for_rent,
    )


def list_properties_by_owner(db: Session, owner_id: int) -> list[PropertyModel]:
    if not owner_repo.get_owner_by_id(db, owner_id):
        raise NotFoundError(f"Owner with id {owner_id} not found")
    return property_repo.get_properties_by_owner_id(db, owner_id)


def create_property(db: Session, property_data: PropertyCreate) -> PropertyModel:
    """
    Create a new property with business logic validation.

    - Validates owner exists
    """
    if not owner_repo.get_owner_by_id(db, property_data.owner_id):
        raise NotFoundError(f"Owner with id {property_data.owner_id} not found")

    optional_fields = property_data.model_dump(
        include={
            "bedrooms",
            "bathrooms",
            "area",
            "description",
            "water_company",
            "water_account_number",
            "electricity_company",
            "electricity_account_number",
        }
    )
    return property_repo.create_property(
        db,
        owner_id=property_data.owner_id,
        type=property_data.type,
        address=dump_address(property_data.address),
        rent_value=property_data.rent_value,
        available_for_rent=property_data.available_for_rent,
        **optional_fields,
    )


def update_property(db: Session, property_id: int, **update_fields) -> PropertyModel:
    """
    Update a property. Only fields explicitly provided are changed.

    Raises:
        NotFoundError: If the property or the new owner doesn't exist
        DomainValidationError: If a required field is cleared, or the owner
            changes while contracts reference the property
    """
    prop = get_property(db, property_id)
    reject_null_fields(update_fields, REQUIRED_FIELDS)

    owner_id = update_fields.get("owner_id")
    if owner_id is not None and owner_id != prop.owner_id:
        if not owner_repo.get_owner_by_id(db, owner_id):
            raise NotFoundError(f"Owner with id {owner_id} not found")
        if property_repo.property_has_contracts(db, property_id):
            raise DomainValidationError(
                "Cannot change the owner of a property with contracts",
                field="owner_id",
            )

    return property_repo.update_property(db, property_id=property_id, **update_fields)


def set_property_status(
    db: Session, property_id: int, status: RecordStatus
) -> PropertyModel:
    get_property(db, property_id)
    return property_repo.update_property(db, property_id=property_id, status=status)


def toggle_property_status(db: Session, property_id: int) -> PropertyModel:
    prop = get_property(db, property_id)
    new_status = (
        RecordStatus.INACTIVE
        if prop.status == RecordStatus.ACTIVE
        else RecordStatus.ACTIVE
    )
    return property_repo.update_property(db, property_id=property_id, status=new_status)


def toggle_property_availability(db: Session, property_id: int) -> PropertyModel:
    prop = get_property(db, property_id)
    return property_repo.update_property(
        db, property_id=property_id, available_for_rent=not prop.available_for_rent
    )


def delete_property(db: Session, property_id: int) -> None:
    """
    Hard-delete a property.

    Raises:
        NotFoundError: If the property doesn't exist
        DomainValidationError: If contracts still reference the property
    """
    get_property(db, property_id)

    if property_repo.property_has_contracts(db, property_id):
        raise DomainValidationError(
            "Cannot delete property: property has associated contracts"
        )

    property_repo.delete_property(db, property_id)

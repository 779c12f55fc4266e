from sqlalchemy.orm import Session

from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.db.models.property import Property as PropertyModel
from rental_manager.domain.enums import PropertyType, RecordStatus
from rental_manager.errors import NotFoundError

UPDATABLE_FIELDS = (
    "owner_id",
    "type",
    "address",
    "rent_value",
    "bedrooms",
    "bathrooms",
    "area",
    "description",
    "water_company",
    "water_account_number",
    "electricity_company",
    "electricity_account_number",
    "available_for_rent",
    "status",
)


def get_property_by_id(db: Session, property_id: int) -> PropertyModel | None:
    """Get a property by ID."""
    return db.query(PropertyModel).filter(PropertyModel.id == property_id).first()


def get_all_properties(
    db: Session,
    show_inactive: bool = False,
    owner_id: int | None = None,
    available_for_rent: bool | None = None,
) -> list[PropertyModel]:
    """Get properties, optionally filtered by owner and rent availability."""
    query = db.query(PropertyModel)
    if not show_inactive:
        query = query.filter(PropertyModel.status == RecordStatus.ACTIVE)
    if owner_id is not None:
        query = query.filter(PropertyModel.owner_id == owner_id)
    if available_for_rent is not None:
        query = query.filter(PropertyModel.available_for_rent == available_for_rent)
    return query.order_by(PropertyModel.id).all()


def get_properties_by_owner_id(db: Session, owner_id: int) -> list[PropertyModel]:
    """Get all properties of an owner, active or not."""
    return (
        db.query(PropertyModel)
        .filter(PropertyModel.owner_id == owner_id)
        .order_by(PropertyModel.id)
        .all()
    )


def create_property(
    db: Session,
    owner_id: int,
    type: PropertyType,
    address: dict,
    rent_value: int,
    available_for_rent: bool = True,
    **optional_fields,
) -> PropertyModel:
    """Create a new property in the database. Pure data access - no business logic."""
    db_property = PropertyModel(
        owner_id=owner_id,
        type=type,
        address=address,
        rent_value=rent_value,
        available_for_rent=available_for_rent,
        status=RecordStatus.ACTIVE,
        **optional_fields,
    )
    db.add(db_property)
    db.commit()
    db.refresh(db_property)
    return db_property


def update_property(db: Session, property_id: int, **kwargs) -> PropertyModel:
    """
    Update a property. Only updates fields that are explicitly provided.

    To clear a nullable field, explicitly pass it with None value.
    """
    prop = get_property_by_id(db, property_id)
    if not prop:
        raise NotFoundError("Property not found")

    for field in UPDATABLE_FIELDS:
        if field in kwargs:
            setattr(prop, field, kwargs[field])

    db.commit()
    db.refresh(prop)
    return prop


def property_has_contracts(db: Session, property_id: int) -> bool:
    return (
        db.query(ContractModel.id)
        .filter(ContractModel.property_id == property_id)
        .first()
        is not None
    )


def delete_property(db: Session, property_id: int) -> None:
    """Delete a property from the database. Pure data access - no business logic."""
    prop = get_property_by_id(db, property_id)
    if not prop:
        raise NotFoundError("Property not found")

    db.delete(prop)
    db.commit()

from sqlalchemy.orm import Session

from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.db.models.owner import Owner as OwnerModel
from rental_manager.db.models.property import Property as PropertyModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.errors import NotFoundError


def get_owner_by_id(db: Session, owner_id: int) -> OwnerModel | None:
    """Get an owner by ID."""
    return db.query(OwnerModel).filter(OwnerModel.id == owner_id).first()


def get_owner_by_document(
    db: Session, document: str, exclude_id: int | None = None
) -> OwnerModel | None:
    """Get an owner by CPF/CNPJ, active or not. Used to check for duplicates."""
    query = db.query(OwnerModel).filter(OwnerModel.document == document)
    if exclude_id is not None:
        query = query.filter(OwnerModel.id != exclude_id)
    return query.first()


def get_all_owners(db: Session, show_inactive: bool = False) -> list[OwnerModel]:
    """Get owners ordered by name. Only active ones unless ``show_inactive``."""
    query = db.query(OwnerModel)
    if not show_inactive:
        query = query.filter(OwnerModel.status == RecordStatus.ACTIVE)
    return query.order_by(OwnerModel.name).all()


def create_owner(
    db: Session,
    name: str,
    document: str,
    email: str,
    phone: str,
    address: dict,
) -> OwnerModel:
    """Create a new owner in the database. Pure data access - no business logic."""
    db_owner = OwnerModel(
        name=name,
        document=document,
        email=email,
        phone=phone,
        address=address,
        status=RecordStatus.ACTIVE,
    )
    db.add(db_owner)
    db.commit()
    db.refresh(db_owner)
    return db_owner


def update_owner(db: Session, owner_id: int, **kwargs) -> OwnerModel:
    """
    Update an owner. Only updates fields that are explicitly provided.
    """
    owner = get_owner_by_id(db, owner_id)
    if not owner:
        raise NotFoundError("Owner not found")

    for field in ("name", "document", "email", "phone", "address", "status"):
        if field in kwargs:
            setattr(owner, field, kwargs[field])

    db.commit()
    db.refresh(owner)
    return owner


def owner_has_references(db: Session, owner_id: int) -> bool:
    """Whether any property or contract still points at the owner."""
    has_property = (
        db.query(PropertyModel.id).filter(PropertyModel.owner_id == owner_id).first()
    )
    if has_property:
        return True
    has_contract = (
        db.query(ContractModel.id).filter(ContractModel.owner_id == owner_id).first()
    )
    return has_contract is not None


def delete_owner(db: Session, owner_id: int) -> None:
    """Delete an owner from the database. Pure data access - no business logic."""
    owner = get_owner_by_id(db, owner_id)
    if not owner:
        raise NotFoundError("Owner not found")

    db.delete(owner)
    db.commit()

import logging

from sqlalchemy.orm import Session

import rental_manager.repositories.owner as owner_repo
from rental_manager.db.models.owner import Owner as OwnerModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.errors import (
    DomainValidationError,
    DuplicateResourceError,
    NotFoundError,
)
from rental_manager.schemas.address import dump_address
from rental_manager.schemas.owner import OwnerCreate
from rental_manager.services.common import reject_null_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "document", "email", "phone", "address")


def get_owner(db: Session, owner_id: int) -> OwnerModel:
    owner = owner_repo.get_owner_by_id(db, owner_id)
    if not owner:
        raise NotFoundError("Owner not found")
    return owner


def list_owners(db: Session, show_inactive: bool = False) -> list[OwnerModel]:
    return owner_repo.get_all_owners(db, show_inactive=show_inactive)


def _ensure_document_available(
    db: Session, document: str, exclude_id: int | None = None
) -> None:
    if owner_repo.get_owner_by_document(db, document, exclude_id=exclude_id):
        logger.info("Rejected duplicate owner document %s", document)
        raise DuplicateResourceError(
            f"An owner with document {document} already exists", field="document"
        )


def create_owner(db: Session, owner_data: OwnerCreate) -> OwnerModel:
    """
    Create a new owner with business logic validation.

    - Validates the document (CPF/CNPJ) is not used by any owner, active or inactive
    """
    _ensure_document_available(db, owner_data.document)

    return owner_repo.create_owner(
        db,
        name=owner_data.name,
        document=owner_data.document,
        email=owner_data.email,
        phone=owner_data.phone,
        address=dump_address(owner_data.address),
    )


def update_owner(db: Session, owner_id: int, **update_fields) -> OwnerModel:
    """
    Update an owner. Only fields explicitly provided are changed.

    Raises:
        NotFoundError: If the owner doesn't exist
        DuplicateResourceError: If the new document belongs to another owner
        DomainValidationError: If a required field is cleared
    """
    owner = get_owner(db, owner_id)
    reject_null_fields(update_fields, REQUIRED_FIELDS)

    document = update_fields.get("document")
    if document is not None and document != owner.document:
        _ensure_document_available(db, document, exclude_id=owner_id)

    return owner_repo.update_owner(db, owner_id=owner_id, **update_fields)


def set_owner_status(db: Session, owner_id: int, status: RecordStatus) -> OwnerModel:
    get_owner(db, owner_id)
    return owner_repo.update_owner(db, owner_id=owner_id, status=status)


def toggle_owner_status(db: Session, owner_id: int) -> OwnerModel:
    owner = get_owner(db, owner_id)
    new_status = (
        RecordStatus.INACTIVE
        if owner.status == RecordStatus.ACTIVE
        else RecordStatus.ACTIVE
    )
    return owner_repo.update_owner(db, owner_id=owner_id, status=new_status)


def delete_owner(db: Session, owner_id: int) -> None:
    """
    Hard-delete an owner.

    Raises:
        NotFoundError: If the owner doesn't exist
        DomainValidationError: If properties or contracts still reference the owner
    """
    get_owner(db, owner_id)

    if owner_repo.owner_has_references(db, owner_id):
        raise DomainValidationError(
            "Cannot delete owner: owner has associated properties or contracts"
        )

    owner_repo.delete_owner(db, owner_id)

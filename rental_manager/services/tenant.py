import logging

from sqlalchemy.orm import Session

import rental_manager.repositories.tenant as tenant_repo
from rental_manager.db.models.tenant import Tenant as TenantModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.errors import (
    DomainValidationError,
    DuplicateResourceError,
    NotFoundError,
)
from rental_manager.schemas.address import dump_address, dump_guarantor
from rental_manager.schemas.tenant import TenantCreate
from rental_manager.services.common import reject_null_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "document", "email", "phone", "address")


def get_tenant(db: Session, tenant_id: int) -> TenantModel:
    tenant = tenant_repo.get_tenant_by_id(db, tenant_id)
    if not tenant:
        raise NotFoundError("Tenant not found")
    return tenant


def list_tenants(db: Session, show_inactive: bool = False) -> list[TenantModel]:
    return tenant_repo.get_all_tenants(db, show_inactive=show_inactive)


def _ensure_document_available(
    db: Session, document: str, exclude_id: int | None = None
) -> None:
    if tenant_repo.get_tenant_by_document(db, document, exclude_id=exclude_id):
        logger.info("Rejected duplicate tenant document %s", document)
        raise DuplicateResourceError(
            f"A tenant with document {document} already exists", field="document"
        )


def create_tenant(db: Session, tenant_data: TenantCreate) -> TenantModel:
    """
    Create a new tenant with business logic validation.

    - Validates the document (CPF/CNPJ) is not used by any tenant, active or inactive
    """
    _ensure_document_available(db, tenant_data.document)

    return tenant_repo.create_tenant(
        db,
        name=tenant_data.name,
        document=tenant_data.document,
        rg=tenant_data.rg,
        email=tenant_data.email,
        phone=tenant_data.phone,
        address=dump_address(tenant_data.address),
        guarantor=dump_guarantor(tenant_data.guarantor),
    )


def update_tenant(db: Session, tenant_id: int, **update_fields) -> TenantModel:
    """
    Update a tenant. Only fields explicitly provided are changed; ``rg`` and
    ``guarantor`` may be cleared with None.
    """
    tenant = get_tenant(db, tenant_id)
    reject_null_fields(update_fields, REQUIRED_FIELDS)

    document = update_fields.get("document")
    if document is not None and document != tenant.document:
        _ensure_document_available(db, document, exclude_id=tenant_id)

    return tenant_repo.update_tenant(db, tenant_id=tenant_id, **update_fields)


def set_tenant_status(
    db: Session, tenant_id: int, status: RecordStatus
) -> TenantModel:
    get_tenant(db, tenant_id)
    return tenant_repo.update_tenant(db, tenant_id=tenant_id, status=status)


def toggle_tenant_status(db: Session, tenant_id: int) -> TenantModel:
    tenant = get_tenant(db, tenant_id)
    new_status = (
        RecordStatus.INACTIVE
        if tenant.status == RecordStatus.ACTIVE
        else RecordStatus.ACTIVE
    )
    return tenant_repo.update_tenant(db, tenant_id=tenant_id, status=new_status)


def delete_tenant(db: Session, tenant_id: int) -> None:
    """
    Hard-delete a tenant.

    Raises:
        NotFoundError: If the tenant doesn't exist
        DomainValidationError: If contracts still reference the tenant
    """
    get_tenant(db, tenant_id)

    if tenant_repo.tenant_has_contracts(db, tenant_id):
        raise DomainValidationError(
            "Cannot delete tenant: tenant has associated contracts"
        )

    tenant_repo.delete_tenant(db, tenant_id)

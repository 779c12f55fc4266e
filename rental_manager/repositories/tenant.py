from sqlalchemy.orm import Session

from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.db.models.tenant import Tenant as TenantModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.errors import NotFoundError


def get_tenant_by_id(db: Session, tenant_id: int) -> TenantModel | None:
    """Get a tenant by ID."""
    return db.query(TenantModel).filter(TenantModel.id == tenant_id).first()


def get_tenant_by_document(
    db: Session, document: str, exclude_id: int | None = None
) -> TenantModel | None:
    """Get a tenant by CPF/CNPJ, active or not. Used to check for duplicates."""
    query = db.query(TenantModel).filter(TenantModel.document == document)
    if exclude_id is not None:
        query = query.filter(TenantModel.id != exclude_id)
    return query.first()


def get_all_tenants(db: Session, show_inactive: bool = False) -> list[TenantModel]:
    """Get tenants ordered by name. Only active ones unless ``show_inactive``."""
    query = db.query(TenantModel)
    if not show_inactive:
        query = query.filter(TenantModel.status == RecordStatus.ACTIVE)
    return query.order_by(TenantModel.name).all()


def create_tenant(
    db: Session,
    name: str,
    document: str,
    email: str,
    phone: str,
    address: dict,
    rg: str | None = None,
    guarantor: dict | None = None,
) -> TenantModel:
    """Create a new tenant in the database. Pure data access - no business logic."""
    db_tenant = TenantModel(
        name=name,
        document=document,
        rg=rg,
        email=email,
        phone=phone,
        address=address,
        guarantor=guarantor,
        status=RecordStatus.ACTIVE,
    )
    db.add(db_tenant)
    db.commit()
    db.refresh(db_tenant)
    return db_tenant


def update_tenant(db: Session, tenant_id: int, **kwargs) -> TenantModel:
    """
    Update a tenant. Only updates fields that are explicitly provided.

    To clear a nullable field (rg, guarantor), explicitly pass it with None value.
    """
    tenant = get_tenant_by_id(db, tenant_id)
    if not tenant:
        raise NotFoundError("Tenant not found")

    for field in (
        "name",
        "document",
        "rg",
        "email",
        "phone",
        "address",
        "guarantor",
        "status",
    ):
        if field in kwargs:
            setattr(tenant, field, kwargs[field])

    db.commit()
    db.refresh(tenant)
    return tenant


def tenant_has_contracts(db: Session, tenant_id: int) -> bool:
    return (
        db.query(ContractModel.id).filter(ContractModel.tenant_id == tenant_id).first()
        is not None
    )


def delete_tenant(db: Session, tenant_id: int) -> None:
    """Delete a tenant from the database. Pure data access - no business logic."""
    tenant = get_tenant_by_id(db, tenant_id)
    if not tenant:
        raise NotFoundError("Tenant not found")

    db.delete(tenant)
    db.commit()

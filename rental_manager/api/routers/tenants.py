from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import RecordStatus
from rental_manager.schemas.contract import Contract
from rental_manager.schemas.owner import StatusUpdate
from rental_manager.schemas.tenant import Tenant, TenantCreate, TenantUpdate
from rental_manager.services import contract as contract_service
from rental_manager.services import tenant as tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("", response_model=Tenant, status_code=status.HTTP_201_CREATED)
def create_new_tenant(
    tenant_data: TenantCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Create a new tenant. The document (CPF/CNPJ) must be unique."""
    tenant = tenant_service.create_tenant(db, tenant_data)
    return Tenant.model_validate(tenant)


@router.get("", response_model=list[Tenant])
def get_all_tenants(
    show_inactive: bool = Query(False, description="Include inactive tenants"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    tenants = tenant_service.list_tenants(db, show_inactive=show_inactive)
    return [Tenant.model_validate(tenant) for tenant in tenants]


@router.get("/{tenant_id}", response_model=Tenant)
def get_tenant_by_id(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return Tenant.model_validate(tenant_service.get_tenant(db, tenant_id))


@router.put("/{tenant_id}", response_model=Tenant)
def update_tenant_by_id(
    tenant_id: int,
    tenant_data: TenantUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Update a tenant. Send ``"guarantor": null`` to remove the guarantor."""
    tenant = tenant_service.update_tenant(
        db, tenant_id, **tenant_data.model_dump(exclude_unset=True)
    )
    return Tenant.model_validate(tenant)


@router.patch("/{tenant_id}/status", response_model=Tenant)
def set_tenant_status(
    tenant_id: int,
    status_data: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    tenant = tenant_service.set_tenant_status(db, tenant_id, status_data.status)
    return Tenant.model_validate(tenant)


@router.post("/{tenant_id}/activate", response_model=Tenant)
def activate_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    tenant = tenant_service.set_tenant_status(db, tenant_id, RecordStatus.ACTIVE)
    return Tenant.model_validate(tenant)


@router.post("/{tenant_id}/deactivate", response_model=Tenant)
def deactivate_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    tenant = tenant_service.set_tenant_status(db, tenant_id, RecordStatus.INACTIVE)
    return Tenant.model_validate(tenant)


@router.post("/{tenant_id}/toggle-status", response_model=Tenant)
def toggle_tenant_status(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    tenant = tenant_service.toggle_tenant_status(db, tenant_id)
    return Tenant.model_validate(tenant)


@router.get("/{tenant_id}/contracts", response_model=list[Contract])
def get_tenant_contracts(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    tenant_service.get_tenant(db, tenant_id)
    contracts = contract_service.list_contracts(db, tenant_id=tenant_id)
    return [Contract.model_validate(contract) for contract in contracts]


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tenant_by_id(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Delete a tenant by ID. Refused while any contract references it."""
    tenant_service.delete_tenant(db, tenant_id)

from datetime import date

from sqlalchemy.orm import Session

from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.domain.contract_expiry import ContractExpiryPolicy
from rental_manager.domain.enums import ContractStatus
from rental_manager.errors import NotFoundError


def get_contract_by_id(db: Session, contract_id: int) -> ContractModel | None:
    """Get a contract by ID."""
    return db.query(ContractModel).filter(ContractModel.id == contract_id).first()


def get_contracts_by_owner_id(db: Session, owner_id: int) -> list[ContractModel]:
    """Get all contracts for a specific owner."""
    return db.query(ContractModel).filter(ContractModel.owner_id == owner_id).all()


def get_contracts_by_tenant_id(db: Session, tenant_id: int) -> list[ContractModel]:
    """Get all contracts for a specific tenant."""
    return db.query(ContractModel).filter(ContractModel.tenant_id == tenant_id).all()


def get_contracts_by_property_id(db: Session, property_id: int) -> list[ContractModel]:
    """Get all contracts for a specific property."""
    return (
        db.query(ContractModel).filter(ContractModel.property_id == property_id).all()
    )


def get_all_contracts(
    db: Session,
    owner_id: int | None = None,
    tenant_id: int | None = None,
    property_id: int | None = None,
    status: ContractStatus | None = None,
) -> list[ContractModel]:
    """Get contracts, newest start date first, with optional filters."""
    query = db.query(ContractModel)

    if owner_id is not None:
        query = query.filter(ContractModel.owner_id == owner_id)
    if tenant_id is not None:
        query = query.filter(ContractModel.tenant_id == tenant_id)
    if property_id is not None:
        query = query.filter(ContractModel.property_id == property_id)
    if status is not None:
        query = query.filter(ContractModel.status == status)

    return query.order_by(ContractModel.start_date.desc(), ContractModel.id.desc()).all()


def add_contract(
    db: Session,
    owner_id: int,
    tenant_id: int,
    property_id: int,
    start_date: date,
    end_date: date,
    duration: int,
    rent_value: int,
    payment_day: int,
    status: ContractStatus = ContractStatus.ACTIVE,
    observations: str | None = None,
) -> ContractModel:
    """
    Stage a new contract and flush it to obtain its id.

    Does not commit: the caller owns the transaction so the contract and its
    installments land together.
    """
    db_contract = ContractModel(
        owner_id=owner_id,
        tenant_id=tenant_id,
        property_id=property_id,
        start_date=start_date,
        end_date=end_date,
        duration=duration,
        rent_value=rent_value,
        payment_day=payment_day,
        status=status,
        observations=observations,
    )
    db.add(db_contract)
    db.flush()
    return db_contract


def update_contract(db: Session, contract_id: int, **kwargs) -> ContractModel:
    """
    Update a contract. Only updates fields that are explicitly provided.
    """
    contract = get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")

    for field in ("end_date", "payment_day", "status", "observations"):
        if field in kwargs:
            setattr(contract, field, kwargs[field])

    db.commit()
    db.refresh(contract)
    return contract


def count_expired_contracts(db: Session, policy: ContractExpiryPolicy) -> int:
    return (
        db.query(ContractModel)
        .filter(
            policy.sqlalchemy_expired_predicate(
                status_col=ContractModel.status,
                end_col=ContractModel.end_date,
            )
        )
        .count()
    )


def count_expiring_contracts(db: Session, policy: ContractExpiryPolicy) -> int:
    return (
        db.query(ContractModel)
        .filter(
            policy.sqlalchemy_expiring_predicate(
                status_col=ContractModel.status,
                end_col=ContractModel.end_date,
            )
        )
        .count()
    )


def count_contracts_by_status(db: Session, status: ContractStatus) -> int:
    return db.query(ContractModel).filter(ContractModel.status == status).count()


def delete_contract(db: Session, contract_id: int) -> None:
    """Delete a contract from the database. Pure data access - no business logic."""
    contract = get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")

    db.delete(contract)
    db.commit()

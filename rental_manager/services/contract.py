import logging

from sqlalchemy.orm import Session

import rental_manager.repositories.contract as contract_repo
import rental_manager.repositories.deleted_payment as deleted_payment_repo
import rental_manager.repositories.owner as owner_repo
import rental_manager.repositories.payment as payment_repo
import rental_manager.repositories.property as property_repo
import rental_manager.repositories.tenant as tenant_repo
from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.domain.enums import ContractStatus
from rental_manager.domain.installments import contract_end_date
from rental_manager.errors import DomainValidationError, NotFoundError
from rental_manager.schemas.contract import ContractCreate
from rental_manager.services.common import reject_null_fields
from rental_manager.services.installment import generate_installments

logger = logging.getLogger(__name__)


def get_contract(db: Session, contract_id: int) -> ContractModel:
    contract = contract_repo.get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")
    return contract


def list_contracts(
    db: Session,
    owner_id: int | None = None,
    tenant_id: int | None = None,
    property_id: int | None = None,
    status: ContractStatus | None = None,
) -> list[ContractModel]:
    return contract_repo.get_all_contracts(
        db,
        owner_id=owner_id,
        tenant_id=tenant_id,
        property_id=property_id,
        status=status,
    )


def create_contract(db: Session, contract_data: ContractCreate) -> ContractModel:
    """
    Create a contract together with its monthly installments.

    - Validates owner, tenant and property exist
    - Validates the property belongs to the owner
    - Derives end_date from start_date + duration when not given
    - Inserts the contract and its ``duration`` scheduled payments in a single
      transaction: either all rows are committed or none are
    """
    if not owner_repo.get_owner_by_id(db, contract_data.owner_id):
        raise NotFoundError(f"Owner with id {contract_data.owner_id} not found")

    if not tenant_repo.get_tenant_by_id(db, contract_data.tenant_id):
        raise NotFoundError(f"Tenant with id {contract_data.tenant_id} not found")

    prop = property_repo.get_property_by_id(db, contract_data.property_id)
    if not prop:
        raise NotFoundError(f"Property with id {contract_data.property_id} not found")

    if prop.owner_id != contract_data.owner_id:
        raise DomainValidationError(
            f"Property {prop.id} does not belong to owner {contract_data.owner_id}",
            field="property_id",
        )

    end_date = contract_data.end_date or contract_end_date(
        contract_data.start_date, contract_data.duration
    )

    try:
        contract = contract_repo.add_contract(
            db,
            owner_id=contract_data.owner_id,
            tenant_id=contract_data.tenant_id,
            property_id=contract_data.property_id,
            start_date=contract_data.start_date,
            end_date=end_date,
            duration=contract_data.duration,
            rent_value=contract_data.rent_value,
            payment_day=contract_data.payment_day,
            status=contract_data.status,
            observations=contract_data.observations,
        )
        installments = generate_installments(db, contract)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Contract creation rolled back")
        raise

    db.refresh(contract)
    logger.info(
        "Created contract %s with %d installments", contract.id, len(installments)
    )
    return contract


def update_contract(db: Session, contract_id: int, **update_fields) -> ContractModel:
    """
    Update a contract's end date, payment day, status or observations.

    Already generated installments are left untouched.

    Raises:
        NotFoundError: If the contract doesn't exist
        DomainValidationError: If end_date would precede start_date or a
                              required field is cleared
    """
    contract = get_contract(db, contract_id)
    reject_null_fields(update_fields, ("end_date", "payment_day", "status"))

    end_date = update_fields.get("end_date")
    if end_date is not None and end_date < contract.start_date:
        raise DomainValidationError(
            f"End date ({end_date}) cannot precede start date ({contract.start_date})",
            field="end_date",
        )

    return contract_repo.update_contract(db, contract_id=contract_id, **update_fields)


def delete_contract(db: Session, contract_id: int) -> None:
    """
    Delete a contract.

    Raises:
        NotFoundError: If the contract doesn't exist
        DomainValidationError: If the contract still has payments, live or archived
    """
    get_contract(db, contract_id)

    if payment_repo.contract_has_payments(
        db, contract_id
    ) or deleted_payment_repo.contract_has_deleted_payments(db, contract_id):
        raise DomainValidationError(
            "Cannot delete contract: contract has associated payments"
        )

    contract_repo.delete_contract(db, contract_id)

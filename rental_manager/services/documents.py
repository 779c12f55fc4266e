"""Resolve the data a contract or receipt document is rendered from."""

from sqlalchemy.orm import Session

import rental_manager.repositories.contract as contract_repo
import rental_manager.repositories.owner as owner_repo
import rental_manager.repositories.payment as payment_repo
import rental_manager.repositories.property as property_repo
import rental_manager.repositories.tenant as tenant_repo
from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.errors import DomainValidationError, NotFoundError
from rental_manager.schemas.contract import Contract
from rental_manager.schemas.document import ContractDocumentData, ReceiptData
from rental_manager.schemas.owner import Owner
from rental_manager.schemas.payment import Payment
from rental_manager.schemas.property import Property
from rental_manager.schemas.tenant import Tenant


def _resolve_parties(db: Session, contract: ContractModel) -> tuple:
    owner = owner_repo.get_owner_by_id(db, contract.owner_id)
    if not owner:
        raise NotFoundError(f"Owner with id {contract.owner_id} not found")

    tenant = tenant_repo.get_tenant_by_id(db, contract.tenant_id)
    if not tenant:
        raise NotFoundError(f"Tenant with id {contract.tenant_id} not found")

    prop = property_repo.get_property_by_id(db, contract.property_id)
    if not prop:
        raise NotFoundError(f"Property with id {contract.property_id} not found")

    return owner, tenant, prop


def get_contract_document_data(db: Session, contract_id: int) -> ContractDocumentData:
    contract = contract_repo.get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")

    owner, tenant, prop = _resolve_parties(db, contract)
    return ContractDocumentData(
        contract=Contract.model_validate(contract),
        owner=Owner.model_validate(owner),
        tenant=Tenant.model_validate(tenant),
        property=Property.model_validate(prop),
    )


def get_receipt_data(db: Session, payment_id: int) -> ReceiptData:
    """
    Raises:
        NotFoundError: If the payment or any related record is missing
        DomainValidationError: If the payment has not been paid yet
    """
    payment = payment_repo.get_payment_by_id(db, payment_id)
    if not payment:
        raise NotFoundError("Payment not found")
    if not payment.is_paid:
        raise DomainValidationError("Cannot issue a receipt for an unpaid payment")

    contract = contract_repo.get_contract_by_id(db, payment.contract_id)
    if not contract:
        raise NotFoundError(f"Contract with id {payment.contract_id} not found")

    owner, tenant, prop = _resolve_parties(db, contract)
    return ReceiptData(
        payment=Payment.model_validate(payment),
        contract=Contract.model_validate(contract),
        owner=Owner.model_validate(owner),
        tenant=Tenant.model_validate(tenant),
        property=Property.model_validate(prop),
    )

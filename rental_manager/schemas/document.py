from pydantic import BaseModel

from rental_manager.schemas.contract import Contract
from rental_manager.schemas.owner import Owner
from rental_manager.schemas.payment import Payment
from rental_manager.schemas.property import Property
from rental_manager.schemas.tenant import Tenant


class ContractDocumentData(BaseModel):
    """Everything a contract PDF needs, resolved in one call."""

    contract: Contract
    owner: Owner
    tenant: Tenant
    property: Property


class ReceiptData(BaseModel):
    """Everything a payment receipt PDF needs, resolved in one call."""

    payment: Payment
    contract: Contract
    owner: Owner
    tenant: Tenant
    property: Property

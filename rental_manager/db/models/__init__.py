from rental_manager.db.models.user import User
from rental_manager.db.models.owner import Owner
from rental_manager.db.models.tenant import Tenant
from rental_manager.db.models.property import Property
from rental_manager.db.models.contract import Contract
from rental_manager.db.models.payment import Payment
from rental_manager.db.models.deleted_payment import DeletedPayment

__all__ = [
    "User",
    "Owner",
    "Tenant",
    "Property",
    "Contract",
    "Payment",
    "DeletedPayment",
]

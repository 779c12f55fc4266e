from fastapi import APIRouter

from rental_manager.api.routers import (
    admin_users,
    auth,
    contracts,
    dashboard,
    deleted_payments,
    owners,
    payments,
    properties,
    tenants,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(admin_users.router)
api_router.include_router(owners.router)
api_router.include_router(tenants.router)
api_router.include_router(properties.router)
api_router.include_router(contracts.router)
api_router.include_router(payments.router)
api_router.include_router(deleted_payments.router)
api_router.include_router(dashboard.router)

from pydantic import BaseModel


class DashboardStats(BaseModel):
    expired_contracts: int
    expiring_contracts: int
    total_contracts: int
    pending_payments: int
    overdue_payments: int

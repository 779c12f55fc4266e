from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.schemas.dashboard import DashboardStats
from rental_manager.services.dashboard import get_dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    as_of: date | None = Query(None, description="Reference date, defaults to today"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Contract and payment counts, recomputed on every request."""
    return get_dashboard_stats(db, as_of=as_of)

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_db, require_roles
from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import UserRole
from rental_manager.schemas.pagination import PaginatedResponse
from rental_manager.schemas.user import User, UserCreate, UserUpdate
from rental_manager.services.user import (
    create_user,
    delete_user,
    get_all_users,
    get_user,
    update_user,
)

router = APIRouter(prefix="/admin/users", tags=["admin"])


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_new_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(UserRole.ADMIN)),
):
    """Create a new user. Only admin users can create users."""
    user = create_user(db, user_data)
    return User.model_validate(user)


@router.get("", response_model=PaginatedResponse[User])
def get_all_users_paginated(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(100, ge=1, le=1000, description="Number of items per page"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(UserRole.ADMIN)),
):
    """Get all users with pagination. Only admin users can access this endpoint."""
    users, total = get_all_users(db, page=page, page_size=page_size)
    return PaginatedResponse(
        items=[User.model_validate(user) for user in users],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{user_id}", response_model=User)
def get_user_by_id(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(UserRole.ADMIN)),
):
    return User.model_validate(get_user(db, user_id))


@router.put("/{user_id}", response_model=User)
def update_user_by_id(
    user_id: int,
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(UserRole.ADMIN)),
):
    """
    Update a user by ID. A new password is hashed before storing.

    Admins cannot change their own role or deactivate themselves.
    """
    user = update_user(db, user_id, user_data, current_user)
    return User.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_by_id(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(UserRole.ADMIN)),
):
    """Delete a user by ID. Admins cannot delete themselves."""
    delete_user(db, user_id, current_user)

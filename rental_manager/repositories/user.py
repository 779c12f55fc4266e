from datetime import datetime

from sqlalchemy.orm import Session

from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import UserRole
from rental_manager.errors import NotFoundError


def get_user_by_username(db: Session, username: str) -> UserModel | None:
    """Get a user by username."""
    return db.query(UserModel).filter(UserModel.username == username).first()


def get_user_by_id(db: Session, user_id: int) -> UserModel | None:
    """Get a user by ID."""
    return db.query(UserModel).filter(UserModel.id == user_id).first()


def create_user(
    db: Session,
    username: str,
    name: str,
    email: str,
    password_hash: str,
    role: UserRole = UserRole.USER,
) -> UserModel:
    """Create a new user in the database. Pure data access - no business logic."""
    db_user = UserModel(
        username=username,
        name=name,
        email=email,
        password_hash=password_hash,
        role=role,
        is_active=True,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, user_id: int, **kwargs) -> UserModel:
    """Update user fields. Only explicitly provided fields are updated."""
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    for field in ("name", "email", "role", "is_active", "password_hash"):
        if field in kwargs:
            setattr(user, field, kwargs[field])

    db.commit()
    db.refresh(user)
    return user


def update_user_password(db: Session, user_id: int, password_hash: str) -> UserModel:
    """Update a user's password."""
    return update_user(db, user_id, password_hash=password_hash)


def update_user_last_login(db: Session, user_id: int, when: datetime) -> UserModel:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    user.last_login = when
    db.commit()
    db.refresh(user)
    return user


def get_all_users_paginated(
    db: Session, page: int = 1, page_size: int = 100
) -> tuple[list[UserModel], int]:
    """
    Get all users with pagination, sorted by username for stable pagination.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page

    Returns:
        Tuple of (list of users, total count)
    """
    query = db.query(UserModel)
    total = query.count()
    skip = (page - 1) * page_size
    users = query.order_by(UserModel.username).offset(skip).limit(page_size).all()
    return users, total


def delete_user(db: Session, user_id: int) -> None:
    """Delete a user from the database. Pure data access - no business logic."""
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    db.delete(user)
    db.commit()

from sqlalchemy.orm import Session

import rental_manager.repositories.deleted_payment as deleted_payment_repo
import rental_manager.repositories.user as user_repo
from rental_manager.core.security import get_password_hash, validate_password
from rental_manager.db.models.user import User as UserModel
from rental_manager.errors import DomainValidationError, DuplicateResourceError, NotFoundError
from rental_manager.schemas.user import UserCreate, UserUpdate


def create_user(db: Session, user_data: UserCreate) -> UserModel:
    """
    Create a new user with business logic validation.

    - Validates username uniqueness
    - Validates password requirements
    """
    if user_repo.get_user_by_username(db, user_data.username):
        raise DuplicateResourceError("Username already registered", field="username")

    is_valid, error_message = validate_password(user_data.password)
    if not is_valid:
        raise DomainValidationError(error_message, field="password")

    return user_repo.create_user(
        db,
        username=user_data.username,
        name=user_data.name,
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
        role=user_data.role,
    )


def get_user(db: Session, user_id: int) -> UserModel:
    user = user_repo.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def update_user(
    db: Session,
    user_id: int,
    user_data: UserUpdate,
    current_user: UserModel,
) -> UserModel:
    """
    Update a user. Admin-only.

    - Re-hashes the password when a new one is given
    - No user can change their own role or deactivate themselves

    Raises:
        NotFoundError: If user doesn't exist
        DomainValidationError: If the password is invalid or an admin edits
                              their own role or active flag
    """
    user = get_user(db, user_id)
    fields = user_data.model_dump(exclude_unset=True)

    if current_user.id == user_id:
        if "role" in fields and fields["role"] != user.role:
            raise DomainValidationError("You cannot change your own role", field="role")
        if fields.get("is_active") is False:
            raise DomainValidationError(
                "You cannot deactivate yourself", field="is_active"
            )

    for field in ("name", "email", "role", "is_active"):
        if field in fields and fields[field] is None:
            raise DomainValidationError(f"{field} cannot be null", field=field)

    password = fields.pop("password", None)
    if password is not None:
        is_valid, error_message = validate_password(password)
        if not is_valid:
            raise DomainValidationError(error_message, field="password")
        fields["password_hash"] = get_password_hash(password)

    return user_repo.update_user(db, user_id=user_id, **fields)


def get_all_users(
    db: Session, page: int = 1, page_size: int = 100
) -> tuple[list[UserModel], int]:
    """
    Get all users with pagination.

    Authorization is handled at the controller level.
    """
    return user_repo.get_all_users_paginated(db, page=page, page_size=page_size)


def delete_user(db: Session, user_id: int, current_user: UserModel) -> None:
    """
    Delete a user with business logic validation.

    Raises:
        NotFoundError: If user doesn't exist
        DomainValidationError: If the user deletes themselves or is recorded
                              as the author of archived payments
    """
    get_user(db, user_id)

    if current_user.id == user_id:
        raise DomainValidationError("You cannot delete yourself")

    if deleted_payment_repo.user_has_deleted_payments(db, user_id):
        raise DomainValidationError(
            "Cannot delete user: user has archived payments; deactivate instead"
        )

    user_repo.delete_user(db, user_id)

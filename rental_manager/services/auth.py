"""Auth service: login and password change."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from rental_manager.core.security import (
    create_access_token,
    get_password_hash,
    validate_password,
    verify_password,
)
from rental_manager.db.models.user import User as UserModel
from rental_manager.errors import DomainValidationError, UnauthorizedError
from rental_manager.repositories.user import (
    get_user_by_username,
    update_user_last_login,
    update_user_password,
)
from rental_manager.schemas.user import Token, User

logger = logging.getLogger(__name__)


def login(db: Session, username: str, password: str) -> Token:
    """
    Authenticate user by username and password, return JWT access token.

    Raises:
        UnauthorizedError: If username not found, password incorrect or the
                           account is inactive.
    """
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.password_hash):
        raise UnauthorizedError("Incorrect username or password")

    if not user.is_active:
        logger.info("Login refused for inactive user %s", username)
        raise UnauthorizedError("User account is inactive")

    user = update_user_last_login(db, user.id, datetime.now(timezone.utc))

    access_token = create_access_token(user.id)
    return Token(
        access_token=access_token,
        token_type="bearer",
        user=User.model_validate(user),
    )


def change_password(
    db: Session, user: UserModel, current_password: str, new_password: str
) -> dict[str, str]:
    """
    Change the password of ``user`` after checking the current one.

    Raises:
        DomainValidationError: If the current password is wrong or the new one is invalid.
    """
    if not verify_password(current_password, user.password_hash):
        raise DomainValidationError(
            "Current password is incorrect", field="current_password"
        )

    is_valid, error_message = validate_password(new_password)
    if not is_valid:
        raise DomainValidationError(error_message, field="new_password")

    update_user_password(db, user.id, get_password_hash(new_password))
    return {"message": "Password updated successfully"}

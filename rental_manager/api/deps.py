from collections.abc import Iterator

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from rental_manager.core.security import decode_token
from rental_manager.db.models.user import User
from rental_manager.domain.enums import UserRole
from rental_manager.errors import ForbiddenError, UnauthorizedError

# A missing token is reported by get_current_user
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


def get_db(request: Request) -> Iterator[Session]:
    """Yield a session from the factory built at application startup."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def _credentials_exception(
    detail: str = "Could not validate credentials",
) -> UnauthorizedError:
    return UnauthorizedError(detail)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Get the current authenticated, active user from the JWT token."""
    if not token:
        raise _credentials_exception("Not authenticated")

    payload = decode_token(token)
    if payload is None:
        raise _credentials_exception()

    if payload.get("type") != "access":
        raise _credentials_exception()

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise _credentials_exception()

    user = db.query(User).filter(User.id == int(subject)).first()
    if user is None:
        raise _credentials_exception("User not found")

    if not user.is_active:
        raise _credentials_exception("User account is inactive")

    return user


def require_roles(*roles: UserRole):
    """
    Create a dependency that requires the current user to have one of the specified roles.

    Example:
        Depends(require_roles(UserRole.ADMIN))
    """

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise ForbiddenError("Not enough permissions")
        return current_user

    return role_checker

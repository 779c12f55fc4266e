from fastapi import APIRouter, Depends, Form
from sqlalchemy.orm import Session

from rental_manager.api.deps import get_current_user, get_db
from rental_manager.db.models.user import User as UserModel
from rental_manager.schemas.user import PasswordChange, Token, User
from rental_manager.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
def login(
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    """
    Login endpoint - returns JWT token.
    Uses form data for OAuth2 compatibility (Swagger UI authorization).
    """
    return auth_service.login(db, username, password)


@router.get("/me", response_model=User)
def get_current_user_info(current_user: UserModel = Depends(get_current_user)):
    """Get current authenticated user information."""
    return User.model_validate(current_user)


@router.put("/password")
def change_password(
    password_data: PasswordChange,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """Change the current user's password. Requires the current password."""
    return auth_service.change_password(
        db,
        current_user,
        password_data.current_password,
        password_data.new_password,
    )

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from rental_manager.domain.enums import UserRole


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
    email: str
    role: UserRole
    is_active: bool
    created_at: datetime
    last_login: datetime | None = None


class UserCreate(BaseModel):
    username: str = Field(..., min_length=4, max_length=64)
    password: str = Field(..., min_length=8)
    name: str = Field(..., min_length=3, max_length=255)
    email: EmailStr
    role: UserRole = UserRole.USER


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=255)
    email: EmailStr | None = None
    role: UserRole | None = None
    is_active: bool | None = None
    password: str | None = Field(None, min_length=8)


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from rental_manager.db.base import Base
from rental_manager.db.models._types import enum_column_type, utcnow
from rental_manager.domain.enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    role = Column(enum_column_type(UserRole), nullable=False, default=UserRole.USER)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_login = Column(DateTime(timezone=True), nullable=True)

from sqlalchemy import JSON, Column, DateTime, Integer, String

from rental_manager.db.base import Base
from rental_manager.db.models._types import enum_column_type, utcnow
from rental_manager.domain.enums import RecordStatus


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    document = Column(String(32), unique=True, nullable=False, index=True)
    rg = Column(String(32), nullable=True)
    email = Column(String(320), nullable=False)
    phone = Column(String(32), nullable=False)
    address = Column(JSON, nullable=False)
    guarantor = Column(JSON, nullable=True)
    status = Column(
        enum_column_type(RecordStatus), nullable=False, default=RecordStatus.ACTIVE
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

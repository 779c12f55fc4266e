from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from rental_manager.db.base import Base
from rental_manager.db.models._types import enum_column_type, utcnow
from rental_manager.domain.enums import PropertyType, RecordStatus


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("owners.id"), nullable=False, index=True)
    type = Column(enum_column_type(PropertyType), nullable=False)
    address = Column(JSON, nullable=False)
    rent_value = Column(Integer, nullable=False)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    area = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    water_company = Column(String(255), nullable=True)
    water_account_number = Column(String(64), nullable=True)
    electricity_company = Column(String(255), nullable=True)
    electricity_account_number = Column(String(64), nullable=True)
    available_for_rent = Column(Boolean, nullable=False, default=True)
    status = Column(
        enum_column_type(RecordStatus), nullable=False, default=RecordStatus.ACTIVE
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    owner = relationship("Owner", backref="properties")

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from rental_manager.db.base import Base
from rental_manager.db.models._types import enum_column_type, utcnow
from rental_manager.domain.enums import ContractStatus


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("owners.id"), nullable=False, index=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    duration = Column(Integer, nullable=False)
    rent_value = Column(Integer, nullable=False)
    payment_day = Column(Integer, nullable=False)
    status = Column(
        enum_column_type(ContractStatus), nullable=False, default=ContractStatus.ACTIVE
    )
    observations = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    owner = relationship("Owner", backref="contracts")
    tenant = relationship("Tenant", backref="contracts")
    property = relationship("Property", backref="contracts")

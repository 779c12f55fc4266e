from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from rental_manager.db.base import Base
from rental_manager.db.models._types import utcnow


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    contract_id = Column(Integer, ForeignKey("contracts.id"), nullable=False, index=True)
    due_date = Column(Date, nullable=False, index=True)
    value = Column(Integer, nullable=False)
    is_paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(Date, nullable=True)
    interest_amount = Column(Integer, nullable=False, default=0)
    late_payment_fee = Column(Integer, nullable=False, default=0)
    payment_method = Column(String(64), nullable=True)
    receipt_number = Column(String(64), nullable=True)
    observations = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    contract = relationship("Contract", backref="payments")

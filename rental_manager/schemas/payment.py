from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class Payment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    contract_id: int
    due_date: date
    value: int
    is_paid: bool
    payment_date: date | None = None
    interest_amount: int
    late_payment_fee: int
    payment_method: str | None = None
    receipt_number: str | None = None
    observations: str | None = None
    created_at: datetime


class PaymentCreate(BaseModel):
    contract_id: int
    due_date: date
    value: int = Field(..., gt=0, description="Amount in cents")
    observations: str | None = None


class PaymentUpdate(BaseModel):
    due_date: date | None = None
    value: int | None = Field(None, gt=0, description="Amount in cents")
    observations: str | None = None


class PaymentSettle(BaseModel):
    payment_method: str = Field(..., min_length=1, max_length=64)
    receipt_number: str = Field(..., min_length=1, max_length=64)
    payment_date: date | None = Field(None, description="Defaults to today")
    interest_amount: int | None = Field(
        None, ge=0, description="Cents. Computed by the late payment policy when omitted"
    )
    late_payment_fee: int | None = Field(
        None, ge=0, description="Cents. Computed by the late payment policy when omitted"
    )


class LateChargesQuote(BaseModel):
    payment_id: int
    due_date: date
    payment_date: date
    days_late: int
    value: int
    late_payment_fee: int
    interest_amount: int
    total: int


class DeletedPayment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    original_id: int
    contract_id: int
    due_date: date
    value: int
    is_paid: bool
    payment_date: date | None = None
    interest_amount: int
    late_payment_fee: int
    payment_method: str | None = None
    receipt_number: str | None = None
    observations: str | None = None
    deleted_by: int | None = None
    deleted_at: datetime
    original_created_at: datetime | None = None

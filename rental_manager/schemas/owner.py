from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from rental_manager.domain.enums import RecordStatus
from rental_manager.schemas.address import Address

# CPF (123.456.789-00) or CNPJ (12.345.678/0001-90)
DOCUMENT_PATTERN = r"^(\d{3}\.\d{3}\.\d{3}-\d{2}|\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2})$"
# (11) 98765-4321 or (11) 3456-7890
PHONE_PATTERN = r"^\(\d{2}\) \d{4,5}-\d{4}$"


class Owner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    document: str
    email: str
    phone: str
    address: Address
    status: RecordStatus
    created_at: datetime


class OwnerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    document: str = Field(..., pattern=DOCUMENT_PATTERN, description="CPF or CNPJ")
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN)
    address: Address


class OwnerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    document: str | None = Field(None, pattern=DOCUMENT_PATTERN)
    email: EmailStr | None = None
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    address: Address | None = None


class StatusUpdate(BaseModel):
    status: RecordStatus

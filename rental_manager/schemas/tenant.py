from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from rental_manager.domain.enums import RecordStatus
from rental_manager.schemas.address import Address, Guarantor
from rental_manager.schemas.owner import DOCUMENT_PATTERN, PHONE_PATTERN


class Tenant(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    document: str
    rg: str | None = None
    email: str
    phone: str
    address: Address
    guarantor: Guarantor | None = None
    status: RecordStatus
    created_at: datetime


class TenantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    document: str = Field(..., pattern=DOCUMENT_PATTERN, description="CPF or CNPJ")
    rg: str | None = Field(None, max_length=32)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN)
    address: Address
    guarantor: Guarantor | None = None


class TenantUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    document: str | None = Field(None, pattern=DOCUMENT_PATTERN)
    rg: str | None = Field(None, max_length=32)
    email: EmailStr | None = None
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    address: Address | None = None
    guarantor: Guarantor | None = None

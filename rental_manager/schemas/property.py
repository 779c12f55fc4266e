from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rental_manager.domain.enums import PropertyType, RecordStatus
from rental_manager.schemas.address import Address


class Property(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    type: PropertyType
    address: Address
    rent_value: int
    bedrooms: int | None = None
    bathrooms: int | None = None
    area: int | None = None
    description: str | None = None
    water_company: str | None = None
    water_account_number: str | None = None
    electricity_company: str | None = None
    electricity_account_number: str | None = None
    available_for_rent: bool
    status: RecordStatus
    created_at: datetime


class PropertyCreate(BaseModel):
    owner_id: int
    type: PropertyType
    address: Address
    rent_value: int = Field(..., gt=0, description="Monthly rent in cents")
    bedrooms: int | None = Field(None, ge=0)
    bathrooms: int | None = Field(None, ge=0)
    area: int | None = Field(None, gt=0, description="Area in square meters")
    description: str | None = None
    water_company: str | None = Field(None, max_length=255)
    water_account_number: str | None = Field(None, max_length=64)
    electricity_company: str | None = Field(None, max_length=255)
    electricity_account_number: str | None = Field(None, max_length=64)
    available_for_rent: bool = True


class PropertyUpdate(BaseModel):
    owner_id: int | None = None
    type: PropertyType | None = None
    address: Address | None = None
    rent_value: int | None = Field(None, gt=0, description="Monthly rent in cents")
    bedrooms: int | None = Field(None, ge=0)
    bathrooms: int | None = Field(None, ge=0)
    area: int | None = Field(None, gt=0)
    description: str | None = None
    water_company: str | None = Field(None, max_length=255)
    water_account_number: str | None = Field(None, max_length=64)
    electricity_company: str | None = Field(None, max_length=255)
    electricity_account_number: str | None = Field(None, max_length=64)
    available_for_rent: bool | None = None

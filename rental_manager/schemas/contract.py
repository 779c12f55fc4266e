from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rental_manager.domain.enums import ContractStatus


class Contract(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    tenant_id: int
    property_id: int
    start_date: date
    end_date: date
    duration: int
    rent_value: int
    payment_day: int
    status: ContractStatus
    observations: str | None = None
    created_at: datetime


class ContractCreate(BaseModel):
    owner_id: int
    tenant_id: int
    property_id: int
    start_date: date
    end_date: date | None = Field(
        None, description="Defaults to start_date plus duration months"
    )
    duration: int = Field(..., ge=1, le=600, description="Duration in months")
    rent_value: int = Field(..., gt=0, description="Monthly rent in cents")
    payment_day: int = Field(..., ge=1, le=31, description="Day of month (1-31)")
    status: ContractStatus = ContractStatus.ACTIVE
    observations: str | None = None

    @model_validator(mode="after")
    def validate_end_date_after_start_date(self):
        """Ensure end_date doesn't precede start_date."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError(
                f"end_date ({self.end_date}) cannot precede start_date ({self.start_date})"
            )
        return self


class ContractUpdate(BaseModel):
    end_date: date | None = None
    payment_day: int | None = Field(None, ge=1, le=31)
    status: ContractStatus | None = None
    observations: str | None = None

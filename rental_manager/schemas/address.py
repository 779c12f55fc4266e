from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Address(BaseModel):
    """Structured postal address, stored as a JSON document."""

    model_config = ConfigDict(extra="forbid")

    zip_code: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    number: str = Field(..., min_length=1)
    complement: str | None = None
    neighborhood: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)


class Guarantor(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    document: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: EmailStr
    address: Address | None = None


def dump_address(address: Address | None) -> dict | None:
    """Convert an address to the dict stored in the JSON column."""
    if address is None:
        return None
    return address.model_dump(mode="json")


def dump_guarantor(guarantor: Guarantor | None) -> dict | None:
    if guarantor is None:
        return None
    return guarantor.model_dump(mode="json")

import enum


class RecordStatus(str, enum.Enum):
    """Soft-delete state of owners, tenants and properties."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class PropertyType(str, enum.Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    COMMERCIAL = "commercial"
    LAND = "land"


class ContractStatus(str, enum.Enum):
    ACTIVE = "active"
    PENDING = "pending"
    CLOSED = "closed"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"

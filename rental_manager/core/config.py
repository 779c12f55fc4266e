from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage backend: "database" uses DATABASE_URL, "memory" an in-process SQLite
    storage_backend: Literal["database", "memory"] = Field(
        default="database", alias="STORAGE_BACKEND"
    )
    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    # JWT Configuration
    secret_key: str = Field(alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24, alias="ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    # First Admin User
    first_admin_username: str = Field(default="admin", alias="FIRST_ADMIN_USERNAME")
    first_admin_password: str = Field(alias="FIRST_ADMIN_PASSWORD")
    first_admin_email: str = Field(
        default="admin@example.com", alias="FIRST_ADMIN_EMAIL"
    )
    first_admin_name: str = Field(default="Administrator", alias="FIRST_ADMIN_NAME")

    # Frontend URL for CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Late payment policy
    late_payment_fee_rate: Decimal = Field(
        default=Decimal("0.02"), alias="LATE_PAYMENT_FEE_RATE"
    )
    monthly_interest_rate: Decimal = Field(
        default=Decimal("0.01"), alias="MONTHLY_INTEREST_RATE"
    )
    expiring_contract_window_days: int = Field(
        default=30, ge=0, alias="EXPIRING_CONTRACT_WINDOW_DAYS"
    )

    @field_validator("database_url", "frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @model_validator(mode="after")
    def require_database_url(self):
        if self.storage_backend == "database" and not self.database_url:
            raise ValueError("DATABASE_URL is required when STORAGE_BACKEND=database")
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()

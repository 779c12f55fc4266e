from datetime import datetime, timezone

from sqlalchemy import Enum


def enum_column_type(enum_cls) -> Enum:
    """Store an enum by its value in a plain VARCHAR column."""
    return Enum(
        enum_cls,
        native_enum=False,
        length=20,
        values_callable=lambda members: [member.value for member in members],
    )


def utcnow() -> datetime:
    return datetime.now(timezone.utc)

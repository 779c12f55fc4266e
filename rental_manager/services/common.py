from rental_manager.errors import DomainValidationError


def reject_null_fields(update_fields: dict, required: tuple[str, ...]) -> None:
    """Refuse an explicit ``None`` for a field that cannot be cleared."""
    for field in required:
        if field in update_fields and update_fields[field] is None:
            raise DomainValidationError(f"{field} cannot be null", field=field)

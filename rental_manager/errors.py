"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. invalid dates, referenced rows).

    ``field`` names the offending input field when the failure is tied to one.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DuplicateResourceError(DomainValidationError):
    """Raised when creating or updating a resource would violate a uniqueness constraint."""

    pass


class UnauthorizedError(DomainError):
    """Raised when credentials are missing or invalid."""

    pass


class ForbiddenError(DomainError):
    """Raised when the caller is authenticated but not allowed to perform the operation."""

    pass

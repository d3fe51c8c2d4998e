class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an id (or id/type pair) is unknown."""


class CapacityError(DomainError):
    """Raised when a member already sits on the maximum number of subcommittees."""


class DuplicateError(DomainError):
    """Raised when a membership (or other unique record) already exists."""


class DuplicateAttendanceError(DuplicateError):
    """Raised when attendance was already marked for the same day."""


class ConflictError(DomainError):
    """Raised when the convener seat cannot be granted under the reject policy."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an admin action targets a record that does not exist."""


class DuplicateAttendanceError(DomainError):
    """Raised by a repository when a person already has an event for the day."""

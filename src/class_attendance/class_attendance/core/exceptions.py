class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingInputError(ValidationError):
    """Raised when a required form or query field is absent."""


class NotFoundError(DomainError):
    """Raised when a student, subject or attendance index does not exist."""


class StoreNotFoundError(NotFoundError):
    """Raised when the backing file is absent and the store requires it."""


class MalformedDataError(DomainError):
    """Raised when the backing file does not match the student data model."""

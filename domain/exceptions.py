"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class InvalidMediaTypeError(ValidationError):
    """Raised when a declared content type is missing, malformed, or not allowed."""


class MalformedUploadError(ValidationError):
    """Raised when an upload cannot be parsed or exceeds the memory budget."""


class AggregateNotFoundError(DomainError):
    """Raised when an aggregate is not found in the repository."""


class BlobNotFoundError(DomainError):
    """Raised when a referenced blob no longer exists in storage."""


class CorruptReferenceError(DomainError):
    """Raised when a stored thumbnail reference cannot be classified."""


class AuthenticationError(DomainError):
    """Raised when a bearer credential is missing, malformed, or invalid."""


class OwnershipError(DomainError):
    """Raised when an authenticated user mutates a record they do not own."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (DB, network, etc.)."""


class StorageUnavailableError(InfrastructureError):
    """Raised when blob bytes cannot be written or read."""

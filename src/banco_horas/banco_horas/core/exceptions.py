class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class JobNotFoundError(NotFoundError):
    """Raised when polling a sync job id the manager never issued."""


class AuthorizationError(DomainError):
    """Raised when a request lacks a valid API token."""


class PunchSourceError(DomainError):
    """A single fetch from the punch source failed (counted per day)."""


class PunchSourceUnavailableError(PunchSourceError):
    """The punch source cannot be reached at all; aborts a sync job."""

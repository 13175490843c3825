class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationMissing(DomainError):
    """Raised when there is no active viewer; the view must go to sign-in."""


class RetrievalFailure(DomainError):
    """Raised when a record store call is rejected or fails."""

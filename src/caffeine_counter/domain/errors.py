"""Domain errors mapped to HTTP responses by the API layer."""


class DomainError(Exception):
    """Base class for errors that carry a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailed(DomainError):
    """Raised when request data is missing or invalid."""


class NotFound(DomainError):
    """Raised when a requested record does not exist."""


class Unauthorized(DomainError):
    """Raised when a request has no valid session."""


class Forbidden(DomainError):
    """Raised when a user acts on a record they do not own."""


class InvalidToken(DomainError):
    """Raised when the identity provider rejects a login token."""


class DuplicateName(ValidationFailed):
    """Raised when a unique name is already taken."""

"""
Domain error taxonomy.

Every error the API reports on purpose is a PokedexError subclass carrying
its HTTP status and a stable machine-readable code. The exception handlers
in pokedex.main turn them into `{"detail": ..., "error": ...}` responses.
"""
from typing import Optional

from fastapi import status


class PokedexError(Exception):
    """Base class for errors mapped to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"detail": self.message, "error": self.error_code}


class ValidationError(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"
    default_message = "Request validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class DuplicateIdentity(PokedexError):
    """Username or email already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "DUPLICATE_IDENTITY"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field.capitalize()} already exists")

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["field"] = self.field
        return body


class InvalidCredentials(PokedexError):
    # Same message for unknown email and wrong password
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class DuplicateEntry(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "DUPLICATE_ENTRY"
    default_message = "Pokemon already in list"


class TeamFull(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "TEAM_FULL"
    default_message = "Team is full (maximum 6 Pokemon)"


class NotFound(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"
    default_message = "Pokemon not found in list"


class Unauthenticated(PokedexError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHENTICATED"
    default_message = "Could not validate credentials"


class InvalidToken(PokedexError):
    """Raised by token verification; the auth gate reports it as Unauthenticated."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "INVALID_TOKEN"
    default_message = "Invalid or expired token"


class DatabaseUnavailable(PokedexError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "DATABASE_UNAVAILABLE"
    default_message = "Database not available. Please try again later or contact support."


class DatabaseTimeout(PokedexError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "DATABASE_TIMEOUT"
    default_message = "Database connection timeout. Please try again later."


class RateLimited(PokedexError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    error_code = "RATE_LIMITED"
    default_message = "Too many requests. Please try again later."


class CatalogNotFound(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "CATALOG_NOT_FOUND"
    default_message = "Resource not found in the Pokemon catalog"


class CatalogUnavailable(PokedexError):
    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "CATALOG_UNAVAILABLE"
    default_message = "Pokemon catalog is unavailable"


class InternalError(PokedexError):
    pass

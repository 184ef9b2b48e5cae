"""
FoodHub Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for each error scenario.
How:   Each exception carries a user-safe message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by services and dependencies; caught by global handlers.

Exception Hierarchy:
    FoodHubError (base)
    ├── ValidationError           → 400 Bad Request
    ├── DuplicateKeyError         → 400 Bad Request
    ├── InvalidCredentialsError   → 400 Bad Request (login only)
    ├── AuthenticationError       → 401 Unauthorized
    ├── NotFoundError             → 404 Not Found
    ├── FileStorageError          → 500 Internal Server Error
    └── DatabaseError             → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class FoodHubError(Exception):
    """
    Base exception for all FoodHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional info; returned as `details` on 400 responses,
                  only logged for 500s
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FoodHubError):
    """
    Raised when client input fails a business rule.

    When:    Missing required food fields, empty update payload, unknown or
             malformed category id, bad upload type or size.
    HTTP:    400 Bad Request

    Schema-level failures (wrong types, pattern mismatch) are raised by
    FastAPI as RequestValidationError and remapped to the same 400 shape.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateKeyError(FoodHubError):
    """
    Raised when a write would violate a unique constraint.

    When:    Registering an existing username/email, creating an existing
             category, or an IntegrityError from a concurrent insert.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "A record with these values already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(FoodHubError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None
    into this exception so the handler can answer 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class AuthenticationError(FoodHubError):
    """
    Raised when a protected route receives no usable bearer token.

    When:    Missing Authorization header, wrong scheme, bad signature,
             malformed payload, or expired token.
    HTTP:    401 Unauthorized (with WWW-Authenticate: Bearer)
    """

    def __init__(
        self,
        message: str = "Not authenticated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialsError(FoodHubError):
    """
    Raised by login for an unknown email AND for a wrong password.

    The message is identical in both cases so callers cannot tell which
    part was wrong.
    HTTP:    400 Bad Request
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid Credentials", context=context)


class FileStorageError(FoodHubError):
    """
    Raised when file system operations fail.

    When:    Disk full, permission denied, upload directory not writable.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(FoodHubError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic. Details such as
    the SQL error class are kept in `context` and only logged.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

"""
ContosoPets API — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error outcomes of the API.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by the service and the store; caught by the global handlers.

Exception Hierarchy:
    ContosoPetsError (base)
    ├── BadRequestError   → 400 Bad Request (path/body id mismatch)
    ├── NotFoundError     → 404 Not Found
    ├── ConflictError     → 409 Conflict (id already stored)
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ContosoPetsError(Exception):
    """
    Base exception for all ContosoPets application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (returned only where the handler says so)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(ContosoPetsError):
    """
    Raised when the request is well-formed but inconsistent.

    When:    PUT /products/{id} where the path id differs from the body id.
    HTTP:    400 Bad Request

    Malformed bodies never reach this point: FastAPI rejects them with 422.
    """

    def __init__(
        self,
        message: str = "Bad request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ContosoPetsError):
    """
    Raised when a requested resource does not exist.

    When:    GET, PUT or DELETE /products/{id} with an id that is not stored.
    HTTP:    404 Not Found

    The store returns None for a missing row; the service converts that
    into NotFoundError so the routes never deal with None checks.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(ContosoPetsError):
    """
    Raised when a create would duplicate an existing primary key.

    When:    POST /products with an id that is already stored.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"A {resource} with this ID already exists"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' already exists"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(ContosoPetsError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation other than the
             primary key, driver errors.
    HTTP:    500 Internal Server Error

    The client always gets a generic message; `context` (original error type,
    operation) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

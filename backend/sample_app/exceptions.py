"""
Sample App Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for the two failure modes.
Why:   Handlers raise meaningful exceptions; global exception handlers
       (registered in main.py) turn them into JSON error bodies with the
       correct HTTP status code.
How:   Each exception class carries a message and optional context dict.
       Only the message reaches the client, as `{"error": <message>}`.

Exception Hierarchy:
    SampleAppError (base)
    ├── ValidationError  → 400 Bad Request (client can fix)
    └── NotFoundError    → 404 Not Found (no route for method + path)
"""

from typing import Any, Dict, Optional


class SampleAppError(Exception):
    """
    Base exception for all Sample App errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SampleAppError):
    """
    Raised when client input fails validation.

    When:    POST /api/data without a `text` string, or with a body that is
             not a JSON object.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Field 'text' is required"}
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


class NotFoundError(SampleAppError):
    """
    Raised when no route matches the request's method and path.

    HTTP:    404 Not Found

    A path served under a different method is still "not found": dispatch is
    by exact method + path, so a wrong method never produces a 405.
    """

    def __init__(
        self,
        method: str,
        path: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["method"] = method
        ctx["path"] = path
        super().__init__(message=f"Route {method} {path} not found", context=ctx)
        self.method = method
        self.path = path

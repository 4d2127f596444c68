"""
Sample App Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for every route.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and serializes
       handler return values through `response_model`.
"""

from pydantic import BaseModel, Field, StrictStr


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class DataRequest(BaseModel):
    """
    Body of POST /api/data.

    Why StrictStr: `text` must already be a JSON string. Numbers, booleans,
    arrays and null are rejected instead of being coerced, so the client gets
    a 400 rather than a surprising transform of str(value).
    """
    text: StrictStr = Field(description="Text to transform to uppercase")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class WelcomeResponse(BaseModel):
    """Returned by GET /."""
    message: str = Field(description="Welcome text")
    status: str = Field(default="OK", description="Always 'OK'")


class HelloResponse(BaseModel):
    """Returned by GET /api/hello."""
    message: str = Field(description="Greeting, e.g. 'Hello, World!'")


class StatusResponse(BaseModel):
    """Returned by GET /api/status."""
    status: str = Field(default="healthy", description="Always 'healthy'")
    uptime: float = Field(description="Seconds since service started")


class DataResponse(BaseModel):
    """Returned by POST /api/data."""
    uppercase: str = Field(description="Uppercased input text")
    length: int = Field(description="Character count of the input text")


class HealthResponse(BaseModel):
    """Returned by GET /health, the liveness probe."""
    status: str = Field(default="OK", description="Always 'OK'")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Model — Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body for every non-2xx response.

    Example:
        {"error": "Route GET /unknown-route not found"}
    """
    error: str = Field(description="Human-readable error description")

"""
Sample App Backend — API Route Handlers
=========================================

What:  Handles the /api namespace:
           GET  /api/hello   (greeting, optional ?name=)
           GET  /api/status  (health status with uptime)
           POST /api/data    (uppercase transform)
How:   Extracts query parameters / body, delegates to text_service, returns
       a Pydantic response model.

Validation:
    POST /api/data declares a DataRequest body. FastAPI validates it before the
    handler runs; a missing or non-string `text` raises RequestValidationError,
    which the global handler in main.py turns into a 400 `{"error": ...}`.
    The transform never executes on invalid input.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from sample_app.schemas.api import (
    DataRequest,
    DataResponse,
    ErrorResponse,
    HelloResponse,
    StatusResponse,
)
from sample_app.services import text_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["API"])


def get_uptime(request: Request) -> float:
    """
    Dependency: seconds since the application was created.

    Reads the read-only start timestamp stored on app.state by create_app().
    """
    return text_service.uptime_seconds(request.app.state.started_at)


@router.get(
    "/hello",
    response_model=HelloResponse,
    summary="Greet a caller by name",
)
async def hello(
    name: Optional[str] = Query(
        default=None,
        description="Name to greet. Omitted or empty greets 'World'.",
    ),
) -> HelloResponse:
    return HelloResponse(message=text_service.build_greeting(name))


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Service status with uptime",
)
async def status(uptime: float = Depends(get_uptime)) -> StatusResponse:
    return StatusResponse(status="healthy", uptime=uptime)


@router.post(
    "/data",
    response_model=DataResponse,
    responses={
        200: {"description": "Text transformed", "model": DataResponse},
        400: {"description": "Missing or non-string `text`", "model": ErrorResponse},
    },
    summary="Uppercase a string",
    description=(
        "Accepts a JSON object with a string field `text` and returns the "
        "uppercased text together with the length of the original input."
    ),
)
async def transform_data(payload: DataRequest) -> DataResponse:
    """
    Uppercase `payload.text`.

    Returns:
        DataResponse (HTTP 200)

    Error responses (handled by global exception handlers):
        HTTP 400: `text` absent, not a string, or body not a JSON object
    """
    logger.debug("Transforming text of length %d", len(payload.text))
    return text_service.transform_text(payload.text)

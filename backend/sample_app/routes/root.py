"""
Sample App Backend — Root Route
=================================

What:  Handles GET / with a welcome message.
Who:   Anyone hitting the service's base URL (browsers, smoke tests).
"""

from fastapi import APIRouter

from sample_app.config import settings
from sample_app.schemas.api import WelcomeResponse

router = APIRouter(tags=["Root"])


@router.get(
    "/",
    response_model=WelcomeResponse,
    summary="Welcome message",
)
async def welcome() -> WelcomeResponse:
    return WelcomeResponse(message=settings.welcome_message, status="OK")

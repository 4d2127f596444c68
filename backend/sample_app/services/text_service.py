"""
Sample App Backend — Text Service
===================================

What:  The pure logic behind the API routes: greeting, uppercase transform
       and uptime arithmetic.
Why:   Keeps route handlers thin (HTTP concerns only) and lets the logic be
       unit-tested without an HTTP client.
How:   Plain functions with no hidden state. The start timestamp for uptime
       is passed in by the caller.
"""

import time
from typing import Optional

from sample_app.schemas.api import DataResponse

DEFAULT_GREETING_NAME = "World"


def build_greeting(name: Optional[str] = None) -> str:
    """
    Build the greeting for GET /api/hello.

    An absent or empty name falls back to "World".
    """
    return f"Hello, {name or DEFAULT_GREETING_NAME}!"


def transform_text(text: str) -> DataResponse:
    """
    Uppercase `text` and report its length.

    What:    Backs POST /api/data.
    How:     str.upper() applies full Unicode case mapping, so the result may
             be longer than the input (e.g. "ß" → "SS"). `length` is always
             the length of the ORIGINAL text, counted in code points.
    """
    return DataResponse(uppercase=text.upper(), length=len(text))


def uptime_seconds(started_at: float, now: Optional[float] = None) -> float:
    """
    Seconds elapsed since `started_at`, rounded to 2 decimals.

    Both values come from time.monotonic(); clamped at zero.
    """
    if now is None:
        now = time.monotonic()
    return round(max(now - started_at, 0.0), 2)

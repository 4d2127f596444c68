"""
Sample App Backend — Application Package Initializer
=====================================================

What: Marks the `sample_app` directory as a Python package.
Why:  Enables module imports like `from sample_app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service is a thin routing layer over pure functions:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Pure Logic)        │  ← greeting, text transform, uptime
    ├─────────────────────────────────────┤
    │          Schemas (Contracts)        │  ← Pydantic request/response models
    └─────────────────────────────────────┘

    There is no persistence layer. The only process-wide value is the start
    timestamp used for uptime, captured once in create_app().
"""

__version__ = "1.0.0"

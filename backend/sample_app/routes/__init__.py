# Routes package init
"""
Sample App Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - root.py:    GET  /              (welcome message)
    - api.py:     GET  /api/hello     (greeting)
                  GET  /api/status    (status with uptime)
                  POST /api/data      (uppercase transform)
    - health.py:  GET  /health        (liveness probe)

Anything else (including a known path under the wrong method) is a 404,
produced by the exception handlers in main.py.

Design Principle:
    Routes are THIN: they extract input, call a text_service function and
    return a schema. Logic belongs in services.
"""

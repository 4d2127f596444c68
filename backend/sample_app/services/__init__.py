# Services package init
"""
Sample App Backend — Services Layer
=====================================

What:  Pure logic sitting behind the routes.

Service Inventory:
    - text_service: greeting construction, uppercase transform, uptime arithmetic

Why services are separate from routes:
    1. Testability: functions can be unit-tested without an HTTP client
    2. Single responsibility: routes handle HTTP; services handle logic
"""

"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: request-level dependencies (the ``user`` header)
- errors.py: the single ChatError → HTTP status translation
"""

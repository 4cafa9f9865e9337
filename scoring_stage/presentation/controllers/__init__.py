"""
Controllers Package - Presentation Layer

FastAPI routers of the request adapter. Controllers validate input,
map record errors to HTTP responses and delegate to the use cases.
"""

from .scoring_controller import router as scoring_router
from .system_controller import router as system_router

__all__ = ["scoring_router", "system_router"]

"""API router exports"""

from .health import router as health_router
from .quiz import router as tests_router

__all__ = ["health_router", "tests_router"]

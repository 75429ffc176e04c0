"""Test System package exports."""

from .config import Settings, settings
from .domain import Test
from .service import TestAccessService

__all__ = [
    "Settings",
    "Test",
    "TestAccessService",
    "settings",
]

"""
Domain models and value objects.

Contains the flat rendering UI state record.
"""

from src.core.domain.app_state import AppState

__all__ = [
    "AppState",
]

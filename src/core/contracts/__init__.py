"""
Contract Validation Module

Модуль для валидации JSON контрактов tetration-core.
"""

from .validators import (
    SCHEMA_DIR,
    app_state_validator,
    load_schema,
    validate_app_state,
)

__all__ = [
    "SCHEMA_DIR",
    "app_state_validator",
    "load_schema",
    "validate_app_state",
]

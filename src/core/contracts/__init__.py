"""
Contract Validation Module

Модуль для валидации JSON контрактов значений ячеек VM.
"""

from .snapshot import IntegerKind, IntegerSnapshot
from .validators import (
    IntegerValueValidator,
    load_schema,
    validate_integer_value,
    validate_snapshot,
)

__all__ = [
    # Models
    "IntegerKind",
    "IntegerSnapshot",
    # Classes
    "IntegerValueValidator",
    # Functions
    "load_schema",
    "validate_integer_value",
    "validate_snapshot",
]

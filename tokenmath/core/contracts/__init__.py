"""
Contract Validation Module

Валидация сериализованных представлений Fraction/Percent по JSON Schema.
"""

from .validators import (
    FRACTION_VALIDATOR,
    PERCENT_VALIDATOR,
    SchemaLoader,
    validate_fraction_object,
    validate_percent_object,
)

__all__ = [
    # Classes
    "SchemaLoader",
    # Validators
    "FRACTION_VALIDATOR",
    "PERCENT_VALIDATOR",
    # Functions
    "validate_fraction_object",
    "validate_percent_object",
]

# -*- coding: utf-8 -*-
"""
CRM Forms Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ValidationFactory",
    "StepSchema",
    "StepValidationResult",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ValidationFactory":
        from .validation.validation_factory import ValidationFactory
        return ValidationFactory
    elif name == "StepSchema":
        from .validation.step_schema import StepSchema
        return StepSchema
    elif name == "StepValidationResult":
        from .validation.step_schema import StepValidationResult
        return StepValidationResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

# -*- coding: utf-8 -*-
"""Validation services package."""

from .step_schema import StepSchema, StepValidationResult
from .schema_adapter import PydanticSchemaAdapter, SchemaIssue
from .validation_factory import ValidationFactory

__all__ = [
    'StepSchema',
    'StepValidationResult',
    'PydanticSchemaAdapter',
    'SchemaIssue',
    'ValidationFactory',
]

# -*- coding: utf-8 -*-
"""Custom exceptions for the form validation engine."""


class ConfigurationError(Exception):
    """Raised when a step schema or wizard definition is malformed.

    Detected when the schema or controller is built, never while the user
    is typing.
    """

    def __init__(self, message: str, field: str = None,
                 step_index: int = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.step_index = step_index
        self.context = context

    def __str__(self):
        if self.step_index is not None:
            return f"[step {self.step_index}] {self.message}"
        return self.message


class CollaboratorFailure(Exception):
    """Raised when an external schema validator fails unexpectedly."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context

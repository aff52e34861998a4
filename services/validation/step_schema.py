# -*- coding: utf-8 -*-
"""
Step Schema - declarative validation rules for one wizard step.

A step schema lists the fields a step owns, the validator of each field,
which fields are required, optional cross-field rules and an optional
declarative-schema delegate (see schema_adapter). Validation never stops
at the first failure: every field is checked so the UI can show all
messages at once.
"""

import inspect
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from app.config import Config
from services.exceptions import ConfigurationError
from services.validation.field_validators import FieldValidator, is_empty
from services.validation.schema_adapter import normalize_issues
from utils.logger import get_logger

logger = get_logger(__name__)

CrossFieldRule = Callable[[Mapping[str, Any]], Optional[Dict[str, str]]]
FieldSpec = Union[Sequence[Tuple[str, Optional[FieldValidator]]], Mapping[str, Optional[FieldValidator]]]


@dataclass(frozen=True)
class StepValidationResult:
    """Result of validating one step. Replaced wholesale on re-validation."""
    step_index: int
    is_valid: bool
    errors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only so a stored result cannot drift from is_valid
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))
        if self.is_valid == bool(self.errors):
            raise ValueError("is_valid must be True exactly when there are no errors")

    @classmethod
    def from_errors(cls, step_index: int, errors: Mapping[str, str]) -> 'StepValidationResult':
        return cls(step_index=step_index, is_valid=not errors, errors=dict(errors))

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def error_for(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    @property
    def first_error(self) -> Optional[str]:
        return next(iter(self.errors.values()), None)


def _is_coroutine_callable(func: Any) -> bool:
    if func is None:
        return False
    return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    )


class StepSchema:
    """
    Validation rules for a single step.

    Args:
        step_index: 1-based position of the step in its wizard
        fields: ordered (field_name, validator) pairs; validator may be None
        required: names of fields that must be present and non-empty
        labels: human-readable names used in messages
        rules: cross-field checks returning {field: message}
        delegate: declarative schema validator (see schema_adapter)
        title: step title shown by the UI
    """

    def __init__(
        self,
        step_index: int,
        fields: FieldSpec = (),
        required: Iterable[str] = (),
        labels: Optional[Mapping[str, str]] = None,
        rules: Iterable[CrossFieldRule] = (),
        delegate: Any = None,
        title: str = "",
        description: str = ""
    ):
        if not isinstance(step_index, int) or step_index < 1:
            raise ConfigurationError(f"Step index must be an integer >= 1, got {step_index!r}")

        self.step_index = step_index
        self.title = title
        self.description = description
        self.labels: Dict[str, str] = dict(labels or {})
        self.rules: Tuple[CrossFieldRule, ...] = tuple(rules)
        self.delegate = delegate

        pairs = list(fields.items()) if isinstance(fields, Mapping) else list(fields)
        self._validators: Dict[str, Optional[FieldValidator]] = {}
        for name, validator in pairs:
            if not name or not isinstance(name, str):
                raise ConfigurationError(f"Invalid field name {name!r}", step_index=step_index)
            if name in self._validators:
                raise ConfigurationError(
                    f"Duplicate field '{name}'", field=name, step_index=step_index
                )
            if validator is not None and not callable(validator):
                raise ConfigurationError(
                    f"Validator for '{name}' is not callable", field=name, step_index=step_index
                )
            self._validators[name] = validator

        required_names: List[str] = []
        for name in required:
            if not name or not isinstance(name, str):
                raise ConfigurationError(f"Invalid required field {name!r}", step_index=step_index)
            if name in required_names:
                raise ConfigurationError(
                    f"Field '{name}' is listed as required twice", field=name, step_index=step_index
                )
            required_names.append(name)
        self.required: Tuple[str, ...] = tuple(required_names)

        self.field_names: Tuple[str, ...] = tuple(self._validators) + tuple(
            name for name in self.required if name not in self._validators
        )

        if delegate is not None:
            known = set(getattr(delegate, "field_names", ()))
            unknown = [name for name in self.field_names if name not in known]
            if unknown:
                raise ConfigurationError(
                    f"Fields not defined by the schema delegate: {', '.join(unknown)}",
                    field=unknown[0],
                    step_index=step_index
                )

        self.is_async = (
            any(_is_coroutine_callable(v) for v in self._validators.values())
            or any(_is_coroutine_callable(rule) for rule in self.rules)
            or _is_coroutine_callable(getattr(delegate, "validate", None))
        )

    def __repr__(self):
        return f"StepSchema(step_index={self.step_index}, fields={list(self.field_names)})"

    # =========================================================================
    # Data helpers
    # =========================================================================

    def extract(self, form_data: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the subset of form data this step owns."""
        return {name: form_data[name] for name in self.field_names if name in form_data}

    def progress(self, form_data: Mapping[str, Any]) -> int:
        """Percentage of this step's fields holding a non-empty value."""
        if not self.field_names:
            return 100
        filled = sum(1 for name in self.field_names if not is_empty(form_data.get(name)))
        return round(filled * 100 / len(self.field_names))

    def label_for(self, field_name: str) -> str:
        return self.labels.get(field_name, field_name)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, step_data: Mapping[str, Any]) -> StepValidationResult:
        """
        Validate step data synchronously.

        Raises:
            ConfigurationError: the schema has asynchronous validators
        """
        if self.is_async:
            raise ConfigurationError(
                "Step has asynchronous validators; use validate_async()",
                step_index=self.step_index
            )

        errors = self._required_errors(step_data)

        for name, value in self._values_to_check(step_data):
            self._record(errors, name, self._sync_call(self._validators[name], value))

        if self.delegate is not None:
            try:
                issues = self._sync_call(self.delegate.validate, self._present_values(step_data))
            except ConfigurationError:
                raise
            except Exception as exc:
                self._record_collaborator_failure(errors, exc)
            else:
                self._merge_issues(errors, issues)

        for rule in self.rules:
            self._merge_rule_errors(errors, self._sync_call(rule, step_data))

        return StepValidationResult.from_errors(self.step_index, errors)

    async def validate_async(self, step_data: Mapping[str, Any]) -> StepValidationResult:
        """Validate step data, awaiting asynchronous validators."""
        errors = self._required_errors(step_data)

        for name, value in self._values_to_check(step_data):
            self._record(errors, name, await self._maybe_await(self._validators[name](value)))

        if self.delegate is not None:
            try:
                issues = await self._maybe_await(
                    self.delegate.validate(self._present_values(step_data))
                )
            except ConfigurationError:
                raise
            except Exception as exc:
                self._record_collaborator_failure(errors, exc)
            else:
                self._merge_issues(errors, issues)

        for rule in self.rules:
            self._merge_rule_errors(errors, await self._maybe_await(rule(step_data)))

        return StepValidationResult.from_errors(self.step_index, errors)

    # =========================================================================
    # Internals
    # =========================================================================

    def _required_errors(self, step_data: Mapping[str, Any]) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for name in self.required:
            if is_empty(step_data.get(name)):
                errors[name] = Config.REQUIRED_MESSAGE.format(label=self.label_for(name))
        return errors

    def _values_to_check(self, step_data: Mapping[str, Any]):
        # Format rules only apply to values the user actually provided
        for name, validator in self._validators.items():
            if validator is None:
                continue
            value = step_data.get(name)
            if is_empty(value):
                continue
            yield name, value

    def _present_values(self, step_data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            name: value for name, value in step_data.items()
            if name in self.field_names and not is_empty(value)
        }

    def _sync_call(self, func: Callable, *args):
        result = func(*args)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise ConfigurationError(
                f"{getattr(func, '__name__', func)!s} returned an awaitable; use validate_async()",
                step_index=self.step_index
            )
        return result

    @staticmethod
    async def _maybe_await(result):
        if inspect.isawaitable(result):
            return await result
        return result

    @staticmethod
    def _record(errors: Dict[str, str], name: str, message: Optional[str]):
        if message:
            errors.setdefault(name, message)

    def _merge_issues(self, errors: Dict[str, str], issues):
        normalized = normalize_issues(issues or (), self.field_names, Config.GENERAL_ERROR_KEY)
        for name, message in normalized.items():
            self._record(errors, name, message)

    def _merge_rule_errors(self, errors: Dict[str, str], rule_errors: Optional[Mapping[str, str]]):
        for name, message in (rule_errors or {}).items():
            key = name if name in self.field_names else Config.GENERAL_ERROR_KEY
            self._record(errors, key, message)

    def _record_collaborator_failure(self, errors: Dict[str, str], error: Exception):
        logger.error(
            f"Schema delegate failed for step {self.step_index}: {error}",
            exc_info=True
        )
        errors.setdefault(Config.GENERAL_ERROR_KEY, Config.GENERIC_VALIDATION_MESSAGE)

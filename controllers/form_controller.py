# -*- coding: utf-8 -*-
"""
Multi-Step Form Controller
==========================
Owns the aggregate form data of a wizard session and the validation
result of every step.

Field updates and step validation are separate entry points: updating a
field never validates, the caller (usually the bound step widget)
decides when to validate. Submit readiness is computed on demand from the
stored step results.
"""

import itertools
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from controllers.change_notifier import ChangeNotifier, FormEvents
from services.exceptions import ConfigurationError
from services.validation.step_schema import StepSchema, StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)

_MISSING = object()


class StepState(Enum):
    """Validation state of a single step."""
    UNTOUCHED = "untouched"
    VALIDATING = "validating"
    VALID = "valid"
    INVALID = "invalid"


class MultiStepFormController(ChangeNotifier):
    """
    Controller for a stepped form.

    Provides:
    - Immutable form data updates (every update yields a new mapping)
    - Per-step validation, sync or async
    - Latest-call-wins commits for overlapping async validations
    - Submit readiness across all steps
    - Synchronous change notifications (see FormEvents)
    """

    def __init__(
        self,
        schemas: Iterable[StepSchema],
        initial_data: Optional[Mapping[str, Any]] = None,
        name: str = "form"
    ):
        """
        Initialize the controller.

        Args:
            schemas: One schema per step; step indices must be unique
            initial_data: Values to pre-seed the form with (edit mode)
            name: Name used in log messages
        """
        super().__init__()
        self.name = name

        self._schemas: Dict[int, StepSchema] = {}
        for schema in sorted(schemas, key=lambda s: s.step_index):
            if schema.step_index in self._schemas:
                raise ConfigurationError(
                    f"Duplicate schema for step {schema.step_index}",
                    step_index=schema.step_index,
                    context=name
                )
            self._schemas[schema.step_index] = schema
        if not self._schemas:
            raise ConfigurationError("A form needs at least one step", context=name)

        self._form_data: Mapping[str, Any] = MappingProxyType(dict(initial_data or {}))
        self._results: Dict[int, StepValidationResult] = {}
        self._states: Dict[int, StepState] = {i: StepState.UNTOUCHED for i in self._schemas}

        # Token of the most recent validation started per step
        self._sequence = itertools.count(1)
        self._latest: Dict[int, int] = {}

        self._published_readiness = False

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def form_data(self) -> Mapping[str, Any]:
        """Current form data (read-only, replaced on every update)."""
        return self._form_data

    @property
    def step_indices(self) -> Tuple[int, ...]:
        return tuple(self._schemas)

    @property
    def step_count(self) -> int:
        return len(self._schemas)

    @property
    def step_results(self) -> Dict[int, StepValidationResult]:
        return dict(self._results)

    @property
    def first_error(self) -> Optional[str]:
        """First error message of the earliest invalid step."""
        for index in self._schemas:
            result = self._results.get(index)
            if result is not None and not result.is_valid:
                return result.first_error
        return None

    def get_schema(self, step_index: int) -> StepSchema:
        try:
            return self._schemas[step_index]
        except KeyError:
            raise ConfigurationError(
                f"No step schema registered for step {step_index}",
                step_index=step_index,
                context=self.name
            ) from None

    def get_step_data(self, step_index: int) -> Dict[str, Any]:
        return self.get_schema(step_index).extract(self._form_data)

    def get_step_result(self, step_index: int) -> Optional[StepValidationResult]:
        self.get_schema(step_index)
        return self._results.get(step_index)

    def get_step_state(self, step_index: int) -> StepState:
        self.get_schema(step_index)
        return self._states[step_index]

    def get_step_progress(self, step_index: int) -> int:
        """Percentage of the step's fields that hold a value."""
        return self.get_schema(step_index).progress(self._form_data)

    def is_submit_ready(self) -> bool:
        """True when every step has been validated and all are valid."""
        return all(
            index in self._results and self._results[index].is_valid
            for index in self._schemas
        )

    # =========================================================================
    # Form data updates
    # =========================================================================

    def update_field(self, field: str, value: Any) -> Mapping[str, Any]:
        """
        Merge a single field value into the form data.

        The previous mapping is left untouched; observers receive both the
        new and the previous mapping. No validation happens here.

        Returns:
            The current form data
        """
        return self.update_fields({field: value})

    def update_fields(self, values: Mapping[str, Any]) -> Mapping[str, Any]:
        """Merge several field values at once (one notification)."""
        previous = self._form_data
        changed = {
            field: value for field, value in values.items()
            if not self._same_value(previous.get(field, _MISSING), value)
        }
        if not changed:
            return previous

        merged = dict(previous)
        merged.update(changed)
        self._form_data = MappingProxyType(merged)
        logger.debug(f"{self.name}: updated {', '.join(changed)}")

        self._trigger_callbacks(FormEvents.FORM_DATA_CHANGED, self._form_data, previous)
        return self._form_data

    @staticmethod
    def _same_value(old: Any, new: Any) -> bool:
        if old is _MISSING:
            return False
        return type(old) is type(new) and old == new

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_step(self, step_index: int) -> StepValidationResult:
        """
        Validate a step against the current form data and store the result.

        Raises:
            ConfigurationError: unknown step, or the step has async validators
        """
        schema = self.get_schema(step_index)
        if schema.is_async:
            raise ConfigurationError(
                f"Step {step_index} has asynchronous validators; use validate_step_async()",
                step_index=step_index,
                context=self.name
            )

        token = self._begin_validation(step_index)
        try:
            result = schema.validate(schema.extract(self._form_data))
        except Exception:
            self._abandon_validation(step_index, token)
            raise

        self._commit(step_index, token, result)
        return result

    async def validate_step_async(self, step_index: int) -> StepValidationResult:
        """
        Validate a step, awaiting asynchronous validators.

        If another validation of the same step starts before this one
        finishes, this result is returned to the caller but never stored.
        """
        schema = self.get_schema(step_index)
        token = self._begin_validation(step_index)
        snapshot = schema.extract(self._form_data)
        try:
            result = await schema.validate_async(snapshot)
        except BaseException:
            self._abandon_validation(step_index, token)
            raise

        self._commit(step_index, token, result)
        return result

    def validate_all(self) -> List[StepValidationResult]:
        """Validate every step in order."""
        return [self.validate_step(index) for index in self._schemas]

    async def validate_all_async(self) -> List[StepValidationResult]:
        results = []
        for index in self._schemas:
            results.append(await self.validate_step_async(index))
        return results

    def _begin_validation(self, step_index: int) -> int:
        token = next(self._sequence)
        if step_index in self._latest:
            logger.debug(f"{self.name}: step {step_index} validation superseded by #{token}")
        self._latest[step_index] = token
        self._set_state(step_index, StepState.VALIDATING)
        return token

    def _commit(self, step_index: int, token: int, result: StepValidationResult) -> bool:
        if self._latest.get(step_index) != token:
            logger.debug(f"{self.name}: discarding stale result #{token} for step {step_index}")
            return False
        del self._latest[step_index]

        self._results[step_index] = result
        self._set_state(step_index, StepState.VALID if result.is_valid else StepState.INVALID)
        if result.is_valid:
            logger.debug(f"{self.name}: step {step_index} valid")
        else:
            logger.debug(f"{self.name}: step {step_index} invalid: {sorted(result.errors)}")

        self._trigger_callbacks(FormEvents.STEP_VALIDATED, result)
        self._publish_readiness()
        return True

    def _abandon_validation(self, step_index: int, token: int):
        if self._latest.get(step_index) != token:
            return
        del self._latest[step_index]
        self._set_state(step_index, self._state_from_result(step_index))

    def _state_from_result(self, step_index: int) -> StepState:
        result = self._results.get(step_index)
        if result is None:
            return StepState.UNTOUCHED
        return StepState.VALID if result.is_valid else StepState.INVALID

    def _set_state(self, step_index: int, state: StepState):
        if self._states[step_index] is state and state is not StepState.VALIDATING:
            return
        self._states[step_index] = state
        self._trigger_callbacks(FormEvents.STEP_STATE_CHANGED, step_index, state)

    def _publish_readiness(self):
        ready = self.is_submit_ready()
        if ready != self._published_readiness:
            self._published_readiness = ready
            logger.info(f"{self.name}: submit readiness changed to {ready}")
            self._trigger_callbacks(FormEvents.READINESS_CHANGED, ready)

    # =========================================================================
    # Session lifecycle
    # =========================================================================

    def reset(self, initial_data: Optional[Mapping[str, Any]] = None):
        """
        Clear form data and all step results.

        Validations still in flight are discarded when they finish.
        """
        previous = self._form_data
        self._form_data = MappingProxyType(dict(initial_data or {}))
        self._results.clear()
        self._latest.clear()
        logger.info(f"{self.name}: form reset")

        for index in self._schemas:
            self._set_state(index, StepState.UNTOUCHED)
        self._trigger_callbacks(FormEvents.FORM_RESET)
        self._trigger_callbacks(FormEvents.FORM_DATA_CHANGED, self._form_data, previous)
        self._publish_readiness()

# -*- coding: utf-8 -*-
"""
Change Notifier
===============
Framework-agnostic publish/subscribe registry used by controllers.

Callbacks run synchronously, in registration order, before the
triggering operation returns. A failing callback is logged and does not
prevent the remaining callbacks from running.
"""

from typing import Callable, Dict, List

from utils.logger import get_logger

logger = get_logger(__name__)


class FormEvents:
    """Event names published by the form controller."""

    # callback(new_form_data, previous_form_data)
    FORM_DATA_CHANGED = "form_data_changed"
    # callback(step_index, StepState)
    STEP_STATE_CHANGED = "step_state_changed"
    # callback(StepValidationResult)
    STEP_VALIDATED = "step_validated"
    # callback(is_ready)
    READINESS_CHANGED = "readiness_changed"
    # callback()
    FORM_RESET = "form_reset"

    ALL = (
        FORM_DATA_CHANGED,
        STEP_STATE_CHANGED,
        STEP_VALIDATED,
        READINESS_CHANGED,
        FORM_RESET,
    )


class ChangeNotifier:
    """Registry of event callbacks."""

    def __init__(self):
        self._callbacks: Dict[str, List[Callable]] = {}

    def register_callback(self, event: str, callback: Callable) -> Callable[[], None]:
        """
        Register a callback for an event.

        Returns:
            A function that unregisters the callback
        """
        if event not in self._callbacks:
            self._callbacks[event] = []
        self._callbacks[event].append(callback)
        return lambda: self.unregister_callback(event, callback)

    def unregister_callback(self, event: str, callback: Callable):
        """Unregister a callback."""
        if event in self._callbacks and callback in self._callbacks[event]:
            self._callbacks[event].remove(callback)

    def has_callbacks(self, event: str) -> bool:
        return bool(self._callbacks.get(event))

    def clear_callbacks(self):
        self._callbacks.clear()

    def _trigger_callbacks(self, event: str, *args, **kwargs):
        """Trigger callbacks for an event."""
        # Copy so callbacks may unregister themselves while being notified
        for callback in list(self._callbacks.get(event, ())):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in callback for {event}: {e}", exc_info=True)

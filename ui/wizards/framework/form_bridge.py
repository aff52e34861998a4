# -*- coding: utf-8 -*-
"""
Form Bridge - re-emits form controller notifications as Qt signals.

The controller is framework-agnostic and notifies plain callbacks; widgets
connect to the bridge's signals instead.
"""

from PyQt5.QtCore import QObject, pyqtSignal

from controllers.change_notifier import FormEvents
from controllers.form_controller import MultiStepFormController
from utils.logger import get_logger

logger = get_logger(__name__)


class FormBridge(QObject):
    """Qt signal adapter for a MultiStepFormController."""

    # Signals
    form_data_changed = pyqtSignal(object)  # new form data
    step_state_changed = pyqtSignal(int, object)  # step_index, StepState
    step_validated = pyqtSignal(object)  # StepValidationResult
    readiness_changed = pyqtSignal(bool)
    form_reset = pyqtSignal()

    def __init__(self, controller: MultiStepFormController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._unsubscribers = [
            controller.register_callback(FormEvents.FORM_DATA_CHANGED, self._on_form_data_changed),
            controller.register_callback(FormEvents.STEP_STATE_CHANGED, self.step_state_changed.emit),
            controller.register_callback(FormEvents.STEP_VALIDATED, self.step_validated.emit),
            controller.register_callback(FormEvents.READINESS_CHANGED, self.readiness_changed.emit),
            controller.register_callback(FormEvents.FORM_RESET, self.form_reset.emit),
        ]

    @property
    def is_attached(self) -> bool:
        return bool(self._unsubscribers)

    def _on_form_data_changed(self, form_data, _previous):
        self.form_data_changed.emit(form_data)

    def detach(self):
        """Stop forwarding controller notifications."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        if self._unsubscribers:
            logger.debug(f"Bridge detached from {self.controller.name}")
        self._unsubscribers = []

# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for form wizard steps.

A step renders the fields of one StepSchema and binds them to the form
controller:
- every edit is written to the controller with update_field()
- the step is validated on change (or on leaving a field, see
  Config.VALIDATE_ON_CHANGE) and when first shown if
  Config.VALIDATE_ON_MOUNT is set
- validation results published by the controller are rendered inline

Subclasses implement setup_ui() and declare their widgets with add_field().
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Dict, Optional, Set

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.form_controller import MultiStepFormController
from services.validation.step_schema import StepValidationResult
from ui.components.dismissible_warning import DismissibleWarning
from ui.components.form_field import FormField
from ui.design_system import Spacing, Typography
from ui.style_manager import StyleManager
from utils.logger import get_logger

from .form_bridge import FormBridge

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Field binding to the form controller
    - Inline error rendering
    """

    # Signals
    validation_changed = pyqtSignal(bool)

    def __init__(self, controller: MultiStepFormController, step_index: int,
                 bridge: FormBridge, parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            controller: Form controller shared by all steps of the wizard
            step_index: Index of the schema this step renders
            bridge: Qt adapter of the controller's notifications
            parent: Parent widget
        """
        super().__init__(parent)
        self.controller = controller
        self.step_index = step_index
        self.schema = controller.get_schema(step_index)
        self.bridge = bridge

        self.fields: Dict[str, FormField] = {}
        self._touched: Set[str] = set()
        self._reveal_all = False
        self._populating = False
        self._is_initialized = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        self.main_layout.setSpacing(Spacing.MD)

        self.title_label = QLabel(self.get_step_title())
        self.title_label.setFont(Typography.get_font(size=Typography.SIZE_TITLE,
                                                     weight=Typography.WEIGHT_SEMIBOLD))
        self.title_label.setStyleSheet(StyleManager.step_title())
        self.main_layout.addWidget(self.title_label)

        if self.get_step_description():
            self.description_label = QLabel(self.get_step_description())
            self.description_label.setWordWrap(True)
            self.main_layout.addWidget(self.description_label)

        self.warning = DismissibleWarning()
        self.main_layout.addWidget(self.warning)

        bridge.step_validated.connect(self._on_step_validated)
        bridge.form_reset.connect(self._on_form_reset)

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self.setup_ui()
            self.main_layout.addStretch()
            self._is_initialized = True

    def on_show(self):
        """Called when the step is shown."""
        if not self._is_initialized:
            self.initialize()
        self.populate_data()
        if Config.VALIDATE_ON_MOUNT:
            self.validate()
        else:
            self._render_result(self.controller.get_step_result(self.step_index))

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        Create the widgets and register each with add_field().
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_step_title(self) -> str:
        return self.schema.title or f"Step {self.step_index}"

    def get_step_description(self) -> str:
        return self.schema.description

    def normalize_value(self, name: str, value: Any) -> Any:
        """
        Convert a widget value before it is stored in the form data.

        Override to coerce values (e.g. numeric text to int).
        """
        return value

    # =========================================================================
    # Field binding
    # =========================================================================

    def add_field(self, name: str, widget: QWidget, label: Optional[str] = None) -> FormField:
        """
        Add a widget bound to a form field.

        Args:
            name: Form field name; must belong to this step's schema
            widget: Input widget (InputField, CategorySelect, ...)
            label: Label text, defaults to the schema label
        """
        if name not in self.schema.field_names:
            raise ValueError(f"Field '{name}' is not part of step {self.step_index}")

        form_field = FormField(
            name,
            label or self.schema.label_for(name),
            widget,
            required=name in self.schema.required
        )
        widget.value_changed.connect(lambda value, n=name: self._on_value_changed(n, value))
        widget.editing_finished.connect(lambda n=name: self._on_editing_finished(n))

        self.fields[name] = form_field
        self.main_layout.addWidget(form_field)
        return form_field

    def populate_data(self):
        """Load the controller's form data into the widgets."""
        data = self.controller.form_data
        self._populating = True
        try:
            for name, form_field in self.fields.items():
                form_field.set_value(data.get(name))
        finally:
            self._populating = False

    def collect_data(self) -> Dict[str, Any]:
        return self.controller.get_step_data(self.step_index)

    def _on_value_changed(self, name: str, value: Any):
        if self._populating:
            return
        self.controller.update_field(name, self.normalize_value(name, value))
        if Config.VALIDATE_ON_CHANGE:
            self._touched.add(name)
            self.validate()

    def _on_editing_finished(self, name: str):
        if self._populating:
            return
        self._touched.add(name)
        if not Config.VALIDATE_ON_CHANGE:
            self.validate()

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> StepValidationResult:
        """Validate this step through the controller."""
        return self.controller.validate_step(self.step_index)

    def reveal_all_errors(self):
        """Show errors for every field, touched or not."""
        self._reveal_all = True
        self._render_result(self.controller.get_step_result(self.step_index))

    def _on_step_validated(self, result: StepValidationResult):
        if result.step_index != self.step_index:
            return
        self._render_result(result)
        self.validation_changed.emit(result.is_valid)

    def _render_result(self, result: Optional[StepValidationResult]):
        errors = result.errors if result is not None else {}
        for name, form_field in self.fields.items():
            visible = self._reveal_all or name in self._touched
            form_field.set_error(errors.get(name) if visible else None)

        # Errors not tied to a rendered field go to the banner
        orphans = [message for name, message in errors.items() if name not in self.fields]
        if orphans and (self._reveal_all or self._touched):
            self.warning.show_warning(orphans[0])
        else:
            self.warning.clear_warning()

    def _on_form_reset(self):
        self._touched.clear()
        self._reveal_all = False
        if self._is_initialized:
            self.populate_data()
        self._render_result(None)

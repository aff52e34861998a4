# -*- coding: utf-8 -*-
"""
Form Wizard - Abstract base class for multi-step form wizards.

Provides unified wizard UI with:
- Header with title, step indicators and progress
- Step container
- Navigation buttons (Cancel, Previous, Next, Submit)

The Submit button is enabled exactly when the controller reports the
form as ready for submission.
"""

from abc import ABCMeta, abstractmethod
from typing import Dict, List, Optional

from PyQt5.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QProgressBar, QPushButton, QStackedWidget,
    QVBoxLayout, QWidget
)
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.form_controller import MultiStepFormController, StepState
from ui.design_system import Colors, Spacing, Typography
from ui.style_manager import StyleManager
from utils.logger import get_logger

from .base_step import BaseStep
from .form_bridge import FormBridge

logger = get_logger(__name__)

_STATE_COLORS = {
    StepState.UNTOUCHED: Colors.TEXT_SECONDARY,
    StepState.VALIDATING: Colors.WARNING,
    StepState.VALID: Colors.SUCCESS,
    StepState.INVALID: Colors.ERROR,
}


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class FormWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for form wizards.

    Subclasses must implement:
    - create_steps(): Create and return the wizard's steps
    """

    # Signals
    submitted = pyqtSignal(dict)  # Emitted with the final form data
    cancelled = pyqtSignal()

    def __init__(self, controller: MultiStepFormController, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)
        self.controller = controller
        self.bridge = FormBridge(controller, self)
        self.current_index = 0

        self.steps = self.create_steps()
        if not self.steps:
            raise ValueError("A wizard needs at least one step")

        self.bridge.readiness_changed.connect(self._update_submit_button)
        self.bridge.step_state_changed.connect(self._on_step_state_changed)
        self.bridge.form_data_changed.connect(lambda _data: self._update_progress())

        self._setup_ui()
        self.goto_step(0)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """
        Create and return list of wizard steps.

        Returns:
            List of BaseStep instances, in display order
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return Config.APP_TITLE

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return "Submit"

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Colors.BORDER_DEFAULT};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Step container
        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title, step indicators and progress."""
        header = QWidget()
        layout = QVBoxLayout(header)
        layout.setContentsMargins(Spacing.LG, Spacing.MD, Spacing.LG, Spacing.MD)
        layout.setSpacing(Spacing.SM)

        self.title_label = QLabel(self.get_wizard_title())
        self.title_label.setFont(Typography.get_font(size=Typography.SIZE_TITLE,
                                                     weight=Typography.WEIGHT_SEMIBOLD))
        layout.addWidget(self.title_label)

        indicators = QHBoxLayout()
        indicators.setSpacing(Spacing.MD)
        self.step_labels: Dict[int, QLabel] = {}
        for position, step in enumerate(self.steps, start=1):
            label = QLabel(f"{position}. {step.get_step_title()}")
            self.step_labels[step.step_index] = label
            indicators.addWidget(label)
            self._on_step_state_changed(step.step_index,
                                        self.controller.get_step_state(step.step_index))
        indicators.addStretch()
        layout.addLayout(indicators)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(Spacing.SM)

        self.progress_label = QLabel()
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        progress_layout.addWidget(self.progress_bar, 1)
        layout.addLayout(progress_layout)

        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        layout = QHBoxLayout(footer)
        layout.setContentsMargins(Spacing.LG, Spacing.MD, Spacing.LG, Spacing.MD)
        layout.setSpacing(Spacing.SM)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.setStyleSheet(StyleManager.button_secondary())
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = QPushButton("Previous")
        self.btn_previous.setStyleSheet(StyleManager.button_secondary())
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton("Next")
        self.btn_next.setStyleSheet(StyleManager.button_primary())
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        self.btn_submit = QPushButton(self.get_submit_button_text())
        self.btn_submit.setStyleSheet(StyleManager.button_primary())
        self.btn_submit.clicked.connect(self._handle_submit)
        layout.addWidget(self.btn_submit)
        self._update_submit_button(self.controller.is_submit_ready())

        return footer

    # =========================================================================
    # Navigation
    # =========================================================================

    def get_current_step(self) -> BaseStep:
        return self.steps[self.current_index]

    def goto_step(self, index: int) -> bool:
        """Show the step at ``index`` (0-based position)."""
        if not 0 <= index < len(self.steps):
            return False
        if index != self.current_index:
            self.get_current_step().on_hide()
        self.current_index = index
        self.step_container.setCurrentIndex(index)
        step = self.get_current_step()
        step.on_show()
        if index == len(self.steps) - 1 and not Config.VALIDATE_ON_MOUNT:
            # Last step has no Next button; its errors stay hidden until touched
            step.validate()
        self._update_navigation_buttons()
        self._update_progress()
        return True

    def _handle_previous(self):
        """Handle previous button click."""
        self.goto_step(self.current_index - 1)

    def _handle_next(self):
        """Validate the current step and move on when it is valid."""
        step = self.get_current_step()
        result = step.validate()
        step.reveal_all_errors()
        if not result.is_valid:
            logger.debug(f"Step {step.step_index} blocked navigation: {sorted(result.errors)}")
            return
        self.goto_step(self.current_index + 1)

    def _handle_cancel(self):
        """Handle cancel button click."""
        self.cancelled.emit()
        self.close()

    def _handle_submit(self):
        """Handle wizard submission."""
        # Stored results can predate edits that were never validated
        self.controller.validate_all()
        if not self.controller.is_submit_ready():
            logger.debug(f"{self.controller.name} submit blocked: {self.controller.first_error}")
            self.get_current_step().reveal_all_errors()
            return
        data = dict(self.controller.form_data)
        logger.info(f"{self.controller.name} submitted with {len(data)} fields")
        self.submitted.emit(data)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _update_navigation_buttons(self):
        last = self.current_index == len(self.steps) - 1
        self.btn_previous.setEnabled(self.current_index > 0)
        self.btn_next.setVisible(not last)

    def _update_submit_button(self, is_ready: bool):
        self.btn_submit.setEnabled(is_ready)

    def _update_progress(self):
        """Update progress indicator."""
        if not hasattr(self, "progress_label"):
            return
        step = self.get_current_step()
        self.progress_label.setText(f"Step {self.current_index + 1} of {len(self.steps)}")
        self.progress_bar.setValue(self.controller.get_step_progress(step.step_index))

    def _on_step_state_changed(self, step_index: int, state: StepState):
        label = self.step_labels.get(step_index)
        if label is not None:
            label.setStyleSheet(f"color: {_STATE_COLORS[state]};")

    def closeEvent(self, event):
        self.bridge.detach()
        super().closeEvent(event)

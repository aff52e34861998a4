# -*- coding: utf-8 -*-
"""
Input Field Components
Single-line and multi-line text inputs used by the wizard steps.

Both expose the form widget interface used by BaseStep:
- value() / set_value()
- value_changed(object) signal on every edit
- editing_finished() signal when the user leaves the field
"""

from PyQt5.QtWidgets import QLineEdit, QPlainTextEdit
from PyQt5.QtCore import pyqtSignal

from ..design_system import Typography
from ..style_manager import StyleManager, InputVariant


class InputField(QLineEdit):
    """
    Input field component.

    Features:
    - Configurable placeholder
    - Error/success states

    Usage:
        field = InputField(placeholder="Organization name")
        field.set_error()
        field.set_default()
    """

    value_changed = pyqtSignal(object)
    editing_finished = pyqtSignal()

    def __init__(self, placeholder: str = "", variant: str = "default", parent=None):
        """
        Initialize input field.

        Args:
            placeholder: Placeholder text
            variant: Input variant ("default", "error", "success")
            parent: Parent widget
        """
        super().__init__(parent)
        self.variant = variant
        if placeholder:
            self.setPlaceholderText(placeholder)
        self.setFont(Typography.get_font(size=Typography.SIZE_BODY))
        self._apply_variant()

        self.textChanged.connect(self.value_changed.emit)
        self.editingFinished.connect(self.editing_finished.emit)

    def value(self) -> str:
        return self.text()

    def set_value(self, value):
        text = "" if value is None else str(value)
        if text != self.text():
            self.setText(text)

    def _apply_variant(self):
        """Apply variant-specific styling."""
        if self.variant == "error":
            self.setStyleSheet(StyleManager.input_field(InputVariant.ERROR))
        elif self.variant == "success":
            self.setStyleSheet(StyleManager.input_field(InputVariant.SUCCESS))
        else:
            self.setStyleSheet(StyleManager.input_field(InputVariant.DEFAULT))

    def set_variant(self, variant: str):
        """
        Change input variant dynamically.

        Args:
            variant: New variant ("default", "error", "success")
        """
        self.variant = variant
        self._apply_variant()

    def set_error(self):
        """Set input to error state (convenience method)."""
        self.set_variant("error")

    def set_success(self):
        """Set input to success state (convenience method)."""
        self.set_variant("success")

    def set_default(self):
        """Reset input to default state (convenience method)."""
        self.set_variant("default")


class TextAreaField(QPlainTextEdit):
    """Multi-line text input (notes, descriptions)."""

    value_changed = pyqtSignal(object)
    editing_finished = pyqtSignal()

    def __init__(self, placeholder: str = "", parent=None):
        super().__init__(parent)
        self.variant = "default"
        if placeholder:
            self.setPlaceholderText(placeholder)
        self.setFont(Typography.get_font(size=Typography.SIZE_BODY))
        self.setStyleSheet(StyleManager.input_field(InputVariant.DEFAULT))
        self.setFixedHeight(96)

        self.textChanged.connect(lambda: self.value_changed.emit(self.toPlainText()))

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        self.editing_finished.emit()

    def value(self) -> str:
        return self.toPlainText()

    def set_value(self, value):
        text = "" if value is None else str(value)
        if text != self.toPlainText():
            self.setPlainText(text)

    def set_error(self):
        self.variant = "error"
        self.setStyleSheet(StyleManager.input_field(InputVariant.ERROR))

    def set_default(self):
        self.variant = "default"
        self.setStyleSheet(StyleManager.input_field(InputVariant.DEFAULT))

# -*- coding: utf-8 -*-
"""
Form field row: label, input widget and inline error message.
"""

from typing import Optional

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..design_system import Spacing, Typography
from ..style_manager import StyleManager


class FormField(QWidget):
    """
    Wraps an input widget with its label and error line.

    The wrapped widget must provide value(), set_value(), set_error(),
    set_default() and the value_changed / editing_finished signals.
    """

    def __init__(self, name: str, label: str, widget: QWidget,
                 required: bool = False, parent=None):
        super().__init__(parent)
        self.name = name
        self.widget = widget
        self.required = required
        self._error: Optional[str] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.XS)

        self.label = QLabel(f"{label} *" if required else label)
        self.label.setFont(Typography.get_font(size=Typography.SIZE_BODY,
                                               weight=Typography.WEIGHT_SEMIBOLD))
        self.label.setStyleSheet(StyleManager.field_label())
        layout.addWidget(self.label)

        layout.addWidget(widget)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(StyleManager.error_label())
        self.error_label.hide()
        layout.addWidget(self.error_label)

    @property
    def error(self) -> Optional[str]:
        return self._error

    def value(self):
        return self.widget.value()

    def set_value(self, value):
        self.widget.set_value(value)

    def set_error(self, message: Optional[str]):
        """Show an error message under the field, or clear it when None."""
        self._error = message or None
        if self._error:
            self.error_label.setText(self._error)
            self.error_label.show()
            self.widget.set_error()
        else:
            self.error_label.clear()
            self.error_label.hide()
            self.widget.set_default()

    def clear_error(self):
        self.set_error(None)

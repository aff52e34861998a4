# -*- coding: utf-8 -*-
"""
Checkbox components.

CheckboxField is a single yes/no flag; CheckboxGroup is a multi-select
list whose value is the list of checked option values.
"""

from typing import Any, Iterable, List, Tuple, Union

from PyQt5.QtWidgets import QCheckBox, QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import pyqtSignal

from ..design_system import Colors, Spacing, Typography


class CheckboxField(QCheckBox):
    """Boolean form field."""

    value_changed = pyqtSignal(object)
    editing_finished = pyqtSignal()

    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setFont(Typography.get_font(size=Typography.SIZE_BODY))
        self.toggled.connect(self._on_toggled)

    def _on_toggled(self, checked: bool):
        self.value_changed.emit(checked)
        self.editing_finished.emit()

    def value(self) -> bool:
        return self.isChecked()

    def set_value(self, value):
        self.setChecked(bool(value))

    def set_error(self):
        self.setStyleSheet(f"QCheckBox {{ color: {Colors.ERROR}; }}")

    def set_default(self):
        self.setStyleSheet("")


class CheckboxGroup(QWidget):
    """
    Multi-select list of checkboxes.

    Usage:
        group = CheckboxGroup([(contact_id, "Jane Doe"), (other_id, "John Roe")])
        group.value()   # -> [contact_id]
    """

    value_changed = pyqtSignal(object)
    editing_finished = pyqtSignal()

    def __init__(self, options: Iterable[Union[str, Tuple[Any, str]]] = (),
                 empty_text: str = "Nothing to choose from", parent=None):
        super().__init__(parent)
        self._boxes: List[Tuple[Any, QCheckBox]] = []
        self._empty_text = empty_text

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(Spacing.XS)

        self._empty_label = QLabel(empty_text)
        self._empty_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        self._layout.addWidget(self._empty_label)

        self.set_options(options)

    def set_options(self, options: Iterable[Union[str, Tuple[Any, str]]]):
        """Replace the options, keeping checked values that are still offered."""
        selected = self.value()
        for _, box in self._boxes:
            self._layout.removeWidget(box)
            box.deleteLater()
        self._boxes = []

        for option in options:
            value, label = option if isinstance(option, tuple) else (option, str(option))
            box = QCheckBox(label)
            box.setFont(Typography.get_font(size=Typography.SIZE_BODY))
            box.setChecked(value in selected)
            box.toggled.connect(self._on_toggled)
            self._layout.addWidget(box)
            self._boxes.append((value, box))

        self._empty_label.setVisible(not self._boxes)

    def options(self) -> List[Any]:
        return [value for value, _ in self._boxes]

    def value(self) -> List[Any]:
        return [value for value, box in self._boxes if box.isChecked()]

    def set_value(self, values):
        wanted = list(values or [])
        changed = False
        for value, box in self._boxes:
            checked = value in wanted
            if box.isChecked() != checked:
                box.blockSignals(True)
                box.setChecked(checked)
                box.blockSignals(False)
                changed = True
        if changed:
            self.value_changed.emit(self.value())

    def _on_toggled(self, _checked: bool):
        self.value_changed.emit(self.value())
        self.editing_finished.emit()

    def set_error(self):
        self.setStyleSheet(f"QCheckBox {{ color: {Colors.ERROR}; }}")

    def set_default(self):
        self.setStyleSheet("")

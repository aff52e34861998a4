# -*- coding: utf-8 -*-
"""Category selection combo box with an empty placeholder entry."""

from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from PyQt5.QtWidgets import QComboBox
from PyQt5.QtCore import pyqtSignal

from ..style_manager import StyleManager, InputVariant

Option = Union[str, Tuple[Any, str]]


def _normalize_options(options: Iterable[Option]) -> Sequence[Tuple[Any, str]]:
    normalized = []
    for option in options:
        if isinstance(option, tuple):
            normalized.append((option[0], option[1]))
        else:
            normalized.append((option, str(option)))
    return normalized


class CategorySelect(QComboBox):
    """
    Single-choice category selector.

    The first entry is a placeholder whose value is None, so an untouched
    select reads as "not provided".

    Usage:
        select = CategorySelect(["Fine Dining", "Fast Food"], placeholder="Select segment")
        select = CategorySelect([("A", "A - Strategic"), ("B", "B - Major")])
    """

    value_changed = pyqtSignal(object)
    editing_finished = pyqtSignal()

    def __init__(self, options: Iterable[Option] = (), placeholder: str = "Select...", parent=None):
        super().__init__(parent)
        self.variant = "default"
        self.setStyleSheet(StyleManager.input_field(InputVariant.DEFAULT))
        self._placeholder = placeholder
        self.set_options(options)
        self.currentIndexChanged.connect(self._on_index_changed)

    def set_options(self, options: Iterable[Option]):
        """Replace the available categories, keeping the selection if still offered."""
        current = self.value()
        self.blockSignals(True)
        self.clear()
        self.addItem(self._placeholder, None)
        for value, label in _normalize_options(options):
            self.addItem(label, value)
        self.blockSignals(False)
        self.set_value(current)

    def options(self) -> Sequence[Any]:
        return [self.itemData(i) for i in range(1, self.count())]

    def value(self) -> Optional[Any]:
        if self.count() == 0:
            return None
        return self.currentData()

    def set_value(self, value):
        index = self.findData(value) if value is not None else 0
        self.setCurrentIndex(index if index >= 0 else 0)

    def _on_index_changed(self, _index: int):
        self.value_changed.emit(self.value())
        # Picking an item is a finished edit
        self.editing_finished.emit()

    def set_error(self):
        self.variant = "error"
        self.setStyleSheet(StyleManager.input_field(InputVariant.ERROR))

    def set_default(self):
        self.variant = "default"
        self.setStyleSheet(StyleManager.input_field(InputVariant.DEFAULT))

# -*- coding: utf-8 -*-
"""
Dismissible warning banner.

Shows a non-blocking hint above a step (e.g. a business-rule warning).
Once the user closes a warning it stays hidden for the rest of the
session, even if the same warning is raised again.
"""

from typing import Optional, Set

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton
from PyQt5.QtCore import pyqtSignal

from ..design_system import Spacing, Typography
from ..style_manager import StyleManager


class DismissibleWarning(QFrame):
    """Warning banner with a close button."""

    dismissed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("warningBanner")
        self.setStyleSheet(StyleManager.warning_banner())
        self._key: Optional[str] = None
        self._dismissed_keys: Set[str] = set()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(Spacing.MD, Spacing.SM, Spacing.SM, Spacing.SM)
        layout.setSpacing(Spacing.SM)

        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        self.message_label.setFont(Typography.get_font(size=Typography.SIZE_CAPTION))
        layout.addWidget(self.message_label, 1)

        self.close_button = QToolButton()
        self.close_button.setText("×")
        self.close_button.setToolTip("Dismiss")
        self.close_button.clicked.connect(self.dismiss)
        layout.addWidget(self.close_button)

        self.hide()

    @property
    def current_key(self) -> Optional[str]:
        return self._key

    def is_dismissed(self, key: str) -> bool:
        return key in self._dismissed_keys

    def show_warning(self, message: str, key: Optional[str] = None) -> bool:
        """
        Show a warning unless the user already dismissed it.

        Args:
            message: Text to display
            key: Identity of the warning; defaults to the message itself

        Returns:
            True if the banner is now shown
        """
        key = key or message
        if key in self._dismissed_keys:
            self.clear_warning()
            return False
        self._key = key
        self.message_label.setText(message)
        self.show()
        return True

    def clear_warning(self):
        """Hide the banner without marking the warning as dismissed."""
        self._key = None
        self.message_label.clear()
        self.hide()

    def dismiss(self):
        if self._key is None:
            return
        key = self._key
        self._dismissed_keys.add(key)
        self.clear_warning()
        self.dismissed.emit(key)

    def reset_dismissals(self):
        self._dismissed_keys.clear()

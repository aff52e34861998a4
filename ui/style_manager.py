# -*- coding: utf-8 -*-
"""
Centralized Style Manager
Single source of truth for the form widgets' stylesheets.

Usage:
    from ui.style_manager import StyleManager, InputVariant

    field.setStyleSheet(StyleManager.input_field(InputVariant.ERROR))
    label.setStyleSheet(StyleManager.error_label())
"""

from enum import Enum

from .design_system import BorderRadius, Colors, Typography


class InputVariant(Enum):
    """Input field style variants"""
    DEFAULT = "default"
    ERROR = "error"
    SUCCESS = "success"


class StyleManager:
    """
    Centralized stylesheet generator for form widgets.
    """

    # ==================== INPUTS ====================

    @staticmethod
    def input_field(variant: InputVariant = InputVariant.DEFAULT) -> str:
        """
        Get input field stylesheet.

        Usage: QLineEdit, QPlainTextEdit, QComboBox
        """
        border_color = Colors.INPUT_BORDER
        focus_color = Colors.INPUT_BORDER_FOCUS

        if variant == InputVariant.ERROR:
            border_color = Colors.INPUT_BORDER_ERROR
            focus_color = Colors.INPUT_BORDER_ERROR
        elif variant == InputVariant.SUCCESS:
            border_color = Colors.SUCCESS
            focus_color = Colors.SUCCESS

        return f"""
            QLineEdit, QPlainTextEdit, QComboBox {{
                background-color: {Colors.INPUT_BG};
                border: 1px solid {border_color};
                border-radius: {BorderRadius.MD}px;
                padding: 8px 12px;
                color: {Colors.TEXT_PRIMARY};
            }}
            QLineEdit:focus, QPlainTextEdit:focus, QComboBox:focus {{
                border: 2px solid {focus_color};
                padding: 7px 11px;
            }}
            QLineEdit:disabled, QPlainTextEdit:disabled, QComboBox:disabled {{
                background-color: {Colors.INPUT_DISABLED_BG};
                color: {Colors.TEXT_DISABLED};
            }}
        """

    # ==================== LABELS ====================

    @staticmethod
    def field_label() -> str:
        return f"color: {Colors.TEXT_PRIMARY}; font-size: {Typography.SIZE_BODY}px;"

    @staticmethod
    def error_label() -> str:
        return f"color: {Colors.ERROR}; font-size: {Typography.SIZE_CAPTION}px;"

    @staticmethod
    def step_title() -> str:
        return f"color: {Colors.TEXT_PRIMARY}; font-size: {Typography.SIZE_TITLE}px; font-weight: 600;"

    # ==================== BANNERS ====================

    @staticmethod
    def warning_banner() -> str:
        return f"""
            QFrame#warningBanner {{
                background-color: {Colors.WARNING_BG};
                border: 1px solid {Colors.WARNING_BORDER};
                border-radius: {BorderRadius.MD}px;
            }}
            QLabel {{
                color: {Colors.WARNING};
                background: transparent;
            }}
            QToolButton {{
                border: none;
                color: {Colors.WARNING};
                background: transparent;
            }}
        """

    # ==================== BUTTONS ====================

    @staticmethod
    def button_primary() -> str:
        return f"""
            QPushButton {{
                background-color: {Colors.PRIMARY};
                color: {Colors.TEXT_ON_PRIMARY};
                border: none;
                border-radius: {BorderRadius.MD}px;
                padding: 8px 20px;
            }}
            QPushButton:hover {{
                background-color: {Colors.PRIMARY_HOVER};
            }}
            QPushButton:disabled {{
                background-color: {Colors.BORDER_DEFAULT};
                color: {Colors.TEXT_DISABLED};
            }}
        """

    @staticmethod
    def button_secondary() -> str:
        return f"""
            QPushButton {{
                background-color: {Colors.SURFACE};
                color: {Colors.TEXT_PRIMARY};
                border: 1px solid {Colors.BORDER_DEFAULT};
                border-radius: {BorderRadius.MD}px;
                padding: 8px 20px;
            }}
            QPushButton:disabled {{
                color: {Colors.TEXT_DISABLED};
            }}
        """

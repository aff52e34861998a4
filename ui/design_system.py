"""
CRM Forms Design System

Design tokens (colors, typography, spacing) shared by the form widgets.
"""

from PyQt5.QtGui import QFont


class Colors:
    """
    Color palette for form widgets
    """
    PRIMARY = "#2563EB"
    PRIMARY_HOVER = "#1D4ED8"
    SURFACE = "#FFFFFF"
    BACKGROUND = "#F8FAFC"

    # Text Colors
    TEXT_PRIMARY = "#1E293B"
    TEXT_SECONDARY = "#64748B"
    TEXT_DISABLED = "#94A3B8"
    TEXT_ON_PRIMARY = "#FFFFFF"

    # Border & Divider Colors
    BORDER_DEFAULT = "#E2E8F0"
    DIVIDER = "#F1F5F9"

    # Status Colors
    SUCCESS = "#16A34A"
    WARNING = "#D97706"
    WARNING_BG = "#FFFBEB"
    WARNING_BORDER = "#FCD34D"
    ERROR = "#DC2626"

    # Input Field States
    INPUT_BG = "#FFFFFF"
    INPUT_BORDER = "#CBD5E1"
    INPUT_BORDER_FOCUS = "#2563EB"
    INPUT_BORDER_ERROR = "#DC2626"
    INPUT_DISABLED_BG = "#F1F5F9"


class Typography:
    """
    Typography for labels, inputs and messages
    """
    FONT_FAMILY = "Inter"

    SIZE_CAPTION = 12  # Error messages, hints
    SIZE_BODY = 14  # Inputs, labels
    SIZE_TITLE = 18  # Step titles

    WEIGHT_REGULAR = 400
    WEIGHT_SEMIBOLD = 600

    @staticmethod
    def get_font(size=14, weight=400):
        """
        Get a QFont with specified properties

        Args:
            size: Font size in pixels
            weight: Font weight (400 or 600)
        """
        font = QFont()
        font.setFamily(Typography.FONT_FAMILY)
        font.setStyleHint(QFont.SansSerif)
        font.setPixelSize(size)
        font.setWeight(QFont.DemiBold if weight >= 600 else QFont.Normal)
        return font


class Spacing:
    """
    Spacing system based on a 4px grid
    """
    XS = 4
    SM = 8
    MD = 16
    LG = 24


class BorderRadius:
    SM = 4
    MD = 6

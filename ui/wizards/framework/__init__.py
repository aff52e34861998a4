# -*- coding: utf-8 -*-
"""
Wizard Framework - Qt binding of the multi-step form controller.

Provides base classes for creating multi-step form wizards with
consistent navigation, inline validation and submit gating.
"""

from .form_bridge import FormBridge
from .base_step import BaseStep
from .form_wizard import FormWizard

__all__ = [
    'FormBridge',
    'BaseStep',
    'FormWizard',
]

# -*- coding: utf-8 -*-
"""
CRM Forms UI Components
"""

from .input_field import InputField, TextAreaField
from .category_select import CategorySelect
from .checkbox_group import CheckboxField, CheckboxGroup
from .dismissible_warning import DismissibleWarning
from .form_field import FormField

__all__ = [
    "InputField",
    "TextAreaField",
    "CategorySelect",
    "CheckboxField",
    "CheckboxGroup",
    "DismissibleWarning",
    "FormField",
]

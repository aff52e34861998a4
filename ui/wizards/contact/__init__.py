# -*- coding: utf-8 -*-
"""Contact creation wizard."""

from .steps import ContactStepOne, ContactStepTwo, ContactStepThree, ContactWizard

__all__ = [
    'ContactStepOne',
    'ContactStepTwo',
    'ContactStepThree',
    'ContactWizard',
]

# -*- coding: utf-8 -*-
"""Organization creation wizard."""

from .steps import OrganizationStepOne, OrganizationStepTwo, OrganizationStepThree, OrganizationWizard

__all__ = [
    'OrganizationStepOne',
    'OrganizationStepTwo',
    'OrganizationStepThree',
    'OrganizationWizard',
]

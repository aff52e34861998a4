# -*- coding: utf-8 -*-
"""Wizard schemas package."""

from .organization_schema import OrganizationForm, build_organization_steps
from .contact_schema import ContactForm, build_contact_steps

__all__ = ['OrganizationForm', 'build_organization_steps', 'ContactForm', 'build_contact_steps']

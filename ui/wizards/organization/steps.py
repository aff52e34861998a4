# -*- coding: utf-8 -*-
"""
Organization wizard steps.

Step 1 - Basic information (name, priority, segment, type, size, flags)
Step 2 - Address & notes
Step 3 - Contacts to associate with the organization
"""

from typing import Any, Iterable, List, Optional, Tuple

from PyQt5.QtWidgets import QWidget

from controllers.form_controller import MultiStepFormController
from services.wizard.organization_schema import (
    ORGANIZATION_SEGMENTS, ORGANIZATION_SIZES, ORGANIZATION_TYPES, PRIORITY_OPTIONS
)
from ui.components import CategorySelect, CheckboxField, CheckboxGroup, InputField, TextAreaField
from ui.wizards.framework import BaseStep, FormWizard


def _to_int(value: Any) -> Any:
    """Numeric text becomes an int; anything else is left for the validators."""
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            return value
    return value


class OrganizationStepOne(BaseStep):
    """Basic information."""

    def setup_ui(self):
        self.add_field("name", InputField(placeholder="e.g. Acme Restaurants"))
        self.add_field("priority", CategorySelect(
            [(letter, f"{letter} - {description}") for letter, _, description in PRIORITY_OPTIONS],
            placeholder="Select priority"
        ))
        self.add_field("segment", CategorySelect(ORGANIZATION_SEGMENTS, placeholder="Select segment"))
        self.add_field("type", CategorySelect(ORGANIZATION_TYPES, placeholder="Select business type"))
        self.add_field("size", CategorySelect(ORGANIZATION_SIZES, placeholder="Select company size"))
        self.add_field("employees_count", InputField(placeholder="Number of employees"))
        self.add_field("is_principal", CheckboxField("This organization is a principal"), label="Principal")
        self.add_field("is_distributor", CheckboxField("This organization is a distributor"), label="Distributor")

    def normalize_value(self, name: str, value: Any) -> Any:
        if name == "employees_count":
            return _to_int(value)
        return value


class OrganizationStepTwo(BaseStep):
    """Address, phone, website and notes. Every field is optional."""

    def setup_ui(self):
        self.add_field("address_line_1", InputField(placeholder="Street address"))
        self.add_field("city", InputField())
        self.add_field("state_province", InputField())
        self.add_field("postal_code", InputField())
        self.add_field("primary_phone", InputField(placeholder="+1 555 123 4567"))
        self.add_field("website", InputField(placeholder="https://"))
        self.add_field("description", TextAreaField(placeholder="Notes about this organization"))


class OrganizationStepThree(BaseStep):
    """Contacts working at the organization."""

    def __init__(self, controller, step_index, bridge, contact_options=(), parent=None):
        self.contact_options = list(contact_options)
        super().__init__(controller, step_index, bridge, parent)

    def setup_ui(self):
        self.add_field("assigned_contacts", CheckboxGroup(
            self.contact_options, empty_text="No contacts available yet"
        ))


class OrganizationWizard(FormWizard):
    """
    Wizard for creating or editing an organization.

    Args:
        controller: Controller built for the 'organization' wizard type
        contact_options: (contact_id, display name) pairs offered in step 3
    """

    def __init__(self, controller: MultiStepFormController,
                 contact_options: Iterable[Tuple[str, str]] = (),
                 parent: Optional[QWidget] = None):
        self.contact_options = list(contact_options)
        super().__init__(controller, parent)

    def create_steps(self) -> List[BaseStep]:
        return [
            OrganizationStepOne(self.controller, 1, self.bridge),
            OrganizationStepTwo(self.controller, 2, self.bridge),
            OrganizationStepThree(self.controller, 3, self.bridge,
                                  contact_options=self.contact_options),
        ]

    def get_wizard_title(self) -> str:
        return "New Organization"

    def get_submit_button_text(self) -> str:
        return "Create Organization"

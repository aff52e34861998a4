# -*- coding: utf-8 -*-
"""
Contact wizard steps.

Step 1 - Name and position
Step 2 - Organization, email and phone
Step 3 - Address, website, notes and preferred principals
"""

from typing import Iterable, List, Optional, Tuple

from PyQt5.QtWidgets import QWidget

from controllers.form_controller import MultiStepFormController
from ui.components import CategorySelect, CheckboxField, CheckboxGroup, InputField, TextAreaField
from ui.wizards.framework import BaseStep, FormWizard

Options = Iterable[Tuple[str, str]]


class ContactStepOne(BaseStep):

    def setup_ui(self):
        self.add_field("first_name", InputField())
        self.add_field("last_name", InputField())
        self.add_field("position", InputField(placeholder="e.g. Purchasing Manager"))


class ContactStepTwo(BaseStep):

    def __init__(self, controller, step_index, bridge, organization_options: Options = (), parent=None):
        self.organization_options = list(organization_options)
        super().__init__(controller, step_index, bridge, parent)

    def setup_ui(self):
        self.add_field("organization_id", CategorySelect(
            self.organization_options, placeholder="Select organization"
        ))
        self.add_field("email", InputField(placeholder="name@example.com"))
        self.add_field("phone", InputField(placeholder="+1 555 123 4567"))


class ContactStepThree(BaseStep):

    def __init__(self, controller, step_index, bridge, principal_options: Options = (), parent=None):
        self.principal_options = list(principal_options)
        super().__init__(controller, step_index, bridge, parent)

    def setup_ui(self):
        self.add_field("address", InputField())
        self.add_field("city", InputField())
        self.add_field("state", InputField())
        self.add_field("zip_code", InputField())
        self.add_field("website", InputField(placeholder="https://"))
        self.add_field("account_manager", InputField())
        self.add_field("notes", TextAreaField())
        self.add_field("is_primary", CheckboxField("Primary contact for the organization"))
        self.add_field("preferred_principals", CheckboxGroup(
            self.principal_options, empty_text="No principals available yet"
        ))


class ContactWizard(FormWizard):
    """
    Wizard for creating or editing a contact.

    Args:
        controller: Controller built for the 'contact' wizard type
        organization_options: (organization_id, name) pairs for step 2
        principal_options: (organization_id, name) pairs of principals for step 3
    """

    def __init__(self, controller: MultiStepFormController,
                 organization_options: Options = (),
                 principal_options: Options = (),
                 parent: Optional[QWidget] = None):
        self.organization_options = list(organization_options)
        self.principal_options = list(principal_options)
        super().__init__(controller, parent)

    def create_steps(self) -> List[BaseStep]:
        return [
            ContactStepOne(self.controller, 1, self.bridge),
            ContactStepTwo(self.controller, 2, self.bridge,
                           organization_options=self.organization_options),
            ContactStepThree(self.controller, 3, self.bridge,
                             principal_options=self.principal_options),
        ]

    def get_wizard_title(self) -> str:
        return "New Contact"

    def get_submit_button_text(self) -> str:
        return "Create Contact"

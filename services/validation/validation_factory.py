# -*- coding: utf-8 -*-
"""
Validation Factory - Creates step schemas and form controllers per wizard type.

Provides a central point for registering wizard definitions and building
controllers for them.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from services.exceptions import ConfigurationError
from services.validation.step_schema import StepSchema
from utils.logger import get_logger

logger = get_logger(__name__)

StepBuilder = Callable[[], List[StepSchema]]


class ValidationFactory:
    """
    Registry of wizard definitions.

    Each wizard type maps to a builder returning its step schemas. Schemas
    are built when registered so configuration mistakes surface at startup.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._builders: Dict[str, StepBuilder] = {}
        self._register_default_wizards()

    def _register_default_wizards(self):
        """Register the built-in CRM wizards."""
        from services.wizard.contact_schema import build_contact_steps
        from services.wizard.organization_schema import build_organization_steps

        self.register_wizard('organization', build_organization_steps)
        self.register_wizard('contact', build_contact_steps)

    def register_wizard(self, wizard_type: str, builder: StepBuilder):
        """
        Register a wizard definition.

        Args:
            wizard_type: Type identifier (e.g., 'organization', 'contact')
            builder: Callable returning the wizard's step schemas

        Raises:
            ConfigurationError: the builder produced an invalid definition
        """
        schemas = builder()
        indices = [schema.step_index for schema in schemas]
        if not schemas:
            raise ConfigurationError(f"Wizard '{wizard_type}' has no steps", context=wizard_type)
        if len(set(indices)) != len(indices):
            raise ConfigurationError(
                f"Wizard '{wizard_type}' defines a step index twice: {indices}",
                context=wizard_type
            )
        self._builders[wizard_type.lower()] = builder
        logger.debug(f"Registered wizard '{wizard_type}' with {len(schemas)} steps")

    def get_schemas(self, wizard_type: str) -> List[StepSchema]:
        """
        Build the step schemas of a registered wizard.

        Raises:
            ConfigurationError: wizard type not registered
        """
        builder = self._builders.get(wizard_type.lower())
        if builder is None:
            raise ConfigurationError(
                f"No wizard registered for type: {wizard_type}",
                context=wizard_type
            )
        return builder()

    def create_controller(self, wizard_type: str, initial_data: Optional[Mapping[str, Any]] = None):
        """
        Create a form controller for a wizard session.

        Args:
            wizard_type: Registered wizard type
            initial_data: Existing record to edit, if any

        Returns:
            MultiStepFormController instance
        """
        from controllers.form_controller import MultiStepFormController

        return MultiStepFormController(
            self.get_schemas(wizard_type),
            initial_data=initial_data,
            name=wizard_type.lower()
        )

    def get_registered_types(self) -> List[str]:
        """
        Get list of registered wizard types.

        Returns:
            List of wizard type identifiers
        """
        return list(self._builders.keys())

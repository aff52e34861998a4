# -*- coding: utf-8 -*-
"""
Tests for ValidationFactory.
"""

import pytest

from controllers.form_controller import MultiStepFormController
from services.exceptions import ConfigurationError
from services.validation.step_schema import StepSchema
from services.validation.validation_factory import ValidationFactory


@pytest.fixture
def factory():
    return ValidationFactory()


class TestValidationFactory:
    """Test wizard registration and controller creation."""

    def test_default_wizards_registered(self, factory):
        assert set(factory.get_registered_types()) == {"organization", "contact"}

    def test_get_schemas(self, factory):
        schemas = factory.get_schemas("organization")
        assert [schema.step_index for schema in schemas] == [1, 2, 3]

    def test_lookup_is_case_insensitive(self, factory):
        assert len(factory.get_schemas("Contact")) == 3

    def test_unknown_type(self, factory):
        with pytest.raises(ConfigurationError):
            factory.get_schemas("invoice")

    def test_create_controller(self, factory):
        controller = factory.create_controller("organization", initial_data={"name": "Acme"})

        assert isinstance(controller, MultiStepFormController)
        assert controller.name == "organization"
        assert controller.form_data["name"] == "Acme"
        assert controller.step_indices == (1, 2, 3)

    def test_register_custom_wizard(self, factory):
        factory.register_wizard("survey", lambda: [StepSchema(1, fields=[("answer", None)])])

        controller = factory.create_controller("survey")
        assert controller.step_count == 1

    def test_register_wizard_without_steps(self, factory):
        with pytest.raises(ConfigurationError):
            factory.register_wizard("empty", lambda: [])

    def test_register_wizard_with_duplicate_steps(self, factory):
        with pytest.raises(ConfigurationError):
            factory.register_wizard("twice", lambda: [StepSchema(1), StepSchema(1)])
        assert "twice" not in factory.get_registered_types()

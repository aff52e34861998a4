# -*- coding: utf-8 -*-
"""
Tests for FormBridge (controller notifications as Qt signals).
"""

import pytest

from controllers.form_controller import MultiStepFormController, StepState
from services.validation.step_schema import StepSchema
from ui.wizards.framework import FormBridge


@pytest.fixture
def controller():
    return MultiStepFormController([StepSchema(1, fields=[("name", None)], required=["name"])])


@pytest.fixture
def bridge(qapp, controller):
    bridge = FormBridge(controller)
    yield bridge
    bridge.detach()


class TestFormBridge:
    """Test signal forwarding."""

    def test_form_data_changed(self, controller, bridge):
        received = []
        bridge.form_data_changed.connect(received.append)

        controller.update_field("name", "Acme")

        assert received == [{"name": "Acme"}]

    def test_validation_signals(self, controller, bridge):
        states, results, readiness = [], [], []
        bridge.step_state_changed.connect(lambda index, state: states.append((index, state)))
        bridge.step_validated.connect(results.append)
        bridge.readiness_changed.connect(readiness.append)

        controller.update_field("name", "Acme")
        controller.validate_step(1)

        assert states == [(1, StepState.VALIDATING), (1, StepState.VALID)]
        assert results[0].is_valid is True
        assert readiness == [True]

    def test_form_reset(self, controller, bridge):
        resets = []
        bridge.form_reset.connect(lambda: resets.append(True))

        controller.reset()

        assert resets == [True]

    def test_detach(self, controller, bridge):
        received = []
        bridge.form_data_changed.connect(received.append)

        bridge.detach()
        controller.update_field("name", "Acme")

        assert received == []
        assert bridge.is_attached is False
        assert controller.has_callbacks("form_data_changed") is False

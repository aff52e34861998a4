# -*- coding: utf-8 -*-
"""
CRM Forms Controllers
=====================
Controller layer sitting between the form widgets and the validation
services.

Usage:
    from controllers import MultiStepFormController, FormEvents

    controller = MultiStepFormController(schemas)
    controller.register_callback(FormEvents.READINESS_CHANGED, on_ready)
    controller.update_field("name", "Acme")
    result = controller.validate_step(1)
    if controller.is_submit_ready():
        submit(dict(controller.form_data))
"""

from controllers.change_notifier import ChangeNotifier, FormEvents
from controllers.form_controller import MultiStepFormController, StepState

# All public exports
__all__ = [
    "ChangeNotifier",
    "FormEvents",
    "MultiStepFormController",
    "StepState",
]

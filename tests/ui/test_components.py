# -*- coding: utf-8 -*-
"""
Tests for form UI components.

Tests cover:
- CategorySelect
- CheckboxField / CheckboxGroup
- DismissibleWarning
- FormField
"""

import pytest

from ui.components import (
    CategorySelect, CheckboxField, CheckboxGroup, DismissibleWarning, FormField, InputField
)


class TestCategorySelect:
    """Test category selection."""

    def test_placeholder_means_no_value(self, qapp):
        select = CategorySelect(["Fine Dining", "Fast Food"])
        assert select.value() is None
        assert select.options() == ["Fine Dining", "Fast Food"]

    def test_value_and_labels(self, qapp):
        select = CategorySelect([("A", "A - Highest"), ("B", "B - High")])
        select.set_value("B")

        assert select.value() == "B"
        assert select.currentText() == "B - High"

    def test_unknown_value_resets_to_placeholder(self, qapp):
        select = CategorySelect(["x", "y"])
        select.set_value("y")
        select.set_value("z")
        assert select.value() is None

    def test_signals_on_selection(self, qapp):
        select = CategorySelect(["x", "y"])
        values, finished = [], []
        select.value_changed.connect(values.append)
        select.editing_finished.connect(lambda: finished.append(True))

        select.setCurrentIndex(2)

        assert values == ["y"]
        assert finished == [True]

    def test_set_options_keeps_selection(self, qapp):
        select = CategorySelect(["x", "y"])
        select.set_value("y")
        select.set_options(["y", "z"])
        assert select.value() == "y"


class TestCheckboxes:
    """Test checkbox components."""

    def test_checkbox_field(self, qapp):
        box = CheckboxField("Principal")
        received = []
        box.value_changed.connect(received.append)

        box.set_value(True)

        assert box.value() is True
        assert received == [True]

    def test_group_value_in_option_order(self, qapp):
        group = CheckboxGroup([("a", "A"), ("b", "B"), ("c", "C")])
        group.set_value(["c", "a"])
        assert group.value() == ["a", "c"]

    def test_group_emits_list(self, qapp):
        group = CheckboxGroup(["a", "b"])
        received = []
        group.value_changed.connect(received.append)

        group._boxes[1][1].setChecked(True)

        assert received == [["b"]]

    def test_group_set_value_emits_once(self, qapp):
        group = CheckboxGroup(["a", "b", "c"])
        received = []
        group.value_changed.connect(received.append)

        group.set_value(["a", "b"])
        group.set_value(["a", "b"])

        assert received == [["a", "b"]]

    def test_empty_group(self, qapp):
        group = CheckboxGroup([], empty_text="Nothing here")
        assert group.value() == []
        assert group.options() == []
        assert not group._empty_label.isHidden()


class TestDismissibleWarning:
    """Test the warning banner."""

    def test_hidden_by_default(self, qapp):
        banner = DismissibleWarning()
        assert banner.isHidden()

    def test_show_and_clear(self, qapp):
        banner = DismissibleWarning()

        assert banner.show_warning("Check the employee count") is True
        assert not banner.isHidden()
        assert banner.message_label.text() == "Check the employee count"

        banner.clear_warning()
        assert banner.isHidden()
        assert banner.current_key is None

    def test_dismissed_warning_stays_hidden(self, qapp):
        banner = DismissibleWarning()
        dismissed = []
        banner.dismissed.connect(dismissed.append)

        banner.show_warning("Heads up", key="size-check")
        banner.close_button.click()

        assert dismissed == ["size-check"]
        assert banner.is_dismissed("size-check")
        assert banner.show_warning("Heads up again", key="size-check") is False
        assert banner.isHidden()

    def test_other_warnings_still_shown(self, qapp):
        banner = DismissibleWarning()
        banner.show_warning("first")
        banner.dismiss()

        assert banner.show_warning("second") is True

    def test_reset_dismissals(self, qapp):
        banner = DismissibleWarning()
        banner.show_warning("first")
        banner.dismiss()
        banner.reset_dismissals()

        assert banner.show_warning("first") is True


class TestFormField:
    """Test the labelled field wrapper."""

    def test_required_marker(self, qapp):
        field = FormField("name", "Organization name", InputField(), required=True)
        assert field.label.text() == "Organization name *"

    def test_error_display(self, qapp):
        widget = InputField()
        field = FormField("name", "Name", widget)

        field.set_error("Name is required")

        assert field.error == "Name is required"
        assert field.error_label.text() == "Name is required"
        assert not field.error_label.isHidden()
        assert widget.variant == "error"

    def test_clear_error(self, qapp):
        widget = InputField()
        field = FormField("name", "Name", widget)
        field.set_error("bad")

        field.clear_error()

        assert field.error is None
        assert field.error_label.isHidden()
        assert widget.variant == "default"

    def test_value_passthrough(self, qapp):
        field = FormField("name", "Name", InputField())
        field.set_value("Acme")
        assert field.value() == "Acme"

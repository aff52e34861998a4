# -*- coding: utf-8 -*-
"""
Tests for InputField and TextAreaField UI components.
"""
import pytest

from ui.components.input_field import InputField, TextAreaField


@pytest.fixture
def input_field(qapp):
    """Create an InputField instance."""
    field = InputField(placeholder="Enter text")
    return field


def test_input_field_creation(input_field):
    """Test input field can be created."""
    assert input_field is not None
    assert input_field.placeholderText() == "Enter text"


def test_input_field_value(input_field):
    """Test getting and setting value."""
    input_field.set_value("test value")
    assert input_field.value() == "test value"
    assert input_field.text() == "test value"


def test_input_field_none_value(input_field):
    """Test None clears the field."""
    input_field.set_value("something")
    input_field.set_value(None)
    assert input_field.value() == ""


def test_input_field_non_string_value(input_field):
    """Test numbers are displayed as text."""
    input_field.set_value(42)
    assert input_field.value() == "42"


def test_value_changed_signal(input_field):
    """Test value_changed fires on every edit."""
    received = []
    input_field.value_changed.connect(received.append)

    input_field.setText("a")
    input_field.setText("ab")

    assert received == ["a", "ab"]


def test_set_value_same_text_does_not_emit(input_field):
    """Test setting the current text again is silent."""
    input_field.set_value("same")
    received = []
    input_field.value_changed.connect(received.append)

    input_field.set_value("same")

    assert received == []


def test_input_field_variants(input_field):
    """Test switching between error/success/default styles."""
    input_field.set_error()
    assert input_field.variant == "error"

    input_field.set_success()
    assert input_field.variant == "success"

    input_field.set_default()
    assert input_field.variant == "default"


def test_input_field_readonly(input_field):
    """Test readonly mode."""
    input_field.setReadOnly(True)
    assert input_field.isReadOnly()

    input_field.setReadOnly(False)
    assert not input_field.isReadOnly()


def test_text_area_value(qapp):
    """Test multi-line value and change signal."""
    area = TextAreaField(placeholder="Notes")
    received = []
    area.value_changed.connect(received.append)

    area.set_value("line 1\nline 2")

    assert area.value() == "line 1\nline 2"
    assert received[-1] == "line 1\nline 2"


def test_text_area_error_state(qapp):
    area = TextAreaField()
    area.set_error()
    assert area.variant == "error"
    area.set_default()
    assert area.variant == "default"

# -*- coding: utf-8 -*-
"""
Tests for StepSchema and StepValidationResult.

Tests cover:
- Required fields and whitespace handling
- Format validators only running on provided values
- Schema delegates and collaborator failures
- Cross-field rules
- Configuration errors
- Async validation
"""

import asyncio

import pytest

from services.exceptions import ConfigurationError
from services.validation import field_validators as fv
from services.validation.schema_adapter import SchemaIssue
from services.validation.step_schema import StepSchema, StepValidationResult

WEBSITE_MESSAGE = "Website must be a valid URL starting with http:// or https://"


@pytest.fixture
def address_step():
    """Step with one required field and one optional URL field."""
    return StepSchema(
        step_index=2,
        fields=[("city", fv.max_length(100, "City")), ("website", fv.url(WEBSITE_MESSAGE))],
        required=["city"],
    )


class TestStepValidationResult:
    """Test the result value object."""

    def test_valid_result_has_no_errors(self):
        result = StepValidationResult.from_errors(1, {})
        assert result.is_valid is True
        assert result.errors == {}
        assert result.first_error is None

    def test_invalid_result(self):
        result = StepValidationResult.from_errors(1, {"name": "Name is required"})
        assert result.is_valid is False
        assert result.has_errors()
        assert result.error_for("name") == "Name is required"
        assert result.first_error == "Name is required"

    def test_inconsistent_result_rejected(self):
        with pytest.raises(ValueError):
            StepValidationResult(step_index=1, is_valid=True, errors={"name": "bad"})
        with pytest.raises(ValueError):
            StepValidationResult(step_index=1, is_valid=False, errors={})

    def test_errors_are_copied(self):
        errors = {"name": "bad"}
        result = StepValidationResult.from_errors(1, errors)
        errors["other"] = "worse"
        assert "other" not in result.errors

    def test_errors_are_read_only(self):
        result = StepValidationResult.from_errors(1, {})
        with pytest.raises(TypeError):
            result.errors["name"] = "bad"
        assert result.is_valid is True
        assert result.errors == {}


class TestRequiredFields:
    """Test required field checks."""

    def test_whitespace_only_value_is_missing(self, address_step):
        result = address_step.validate({"city": "   "})

        assert result.is_valid is False
        assert result.errors == {"city": "city is required"}

    def test_missing_key_is_missing(self, address_step):
        result = address_step.validate({})
        assert result.errors == {"city": "city is required"}

    def test_label_used_in_message(self):
        schema = StepSchema(1, fields=[("name", None)], required=["name"],
                            labels={"name": "Organization name"})
        assert schema.validate({}).errors == {"name": "Organization name is required"}

    def test_zero_and_false_count_as_provided(self):
        schema = StepSchema(1, fields=[("count", None), ("flag", None)], required=["count", "flag"])
        assert schema.validate({"count": 0, "flag": False}).is_valid is True

    def test_required_only_field_is_part_of_step(self):
        schema = StepSchema(1, fields=[("name", None)], required=["name", "email"])
        assert schema.field_names == ("name", "email")


class TestFormatValidators:
    """Test per-field validators."""

    @pytest.mark.parametrize("website, expected", [
        ("", None),
        ("not-a-url", WEBSITE_MESSAGE),
        ("https://x.com", None),
    ])
    def test_optional_website(self, address_step, website, expected):
        result = address_step.validate({"city": "Boston", "website": website})

        assert result.error_for("website") == expected
        assert result.is_valid is (expected is None)

    def test_all_failures_reported(self, address_step):
        result = address_step.validate({"city": "x" * 101, "website": "nope"})

        assert set(result.errors) == {"city", "website"}
        assert result.errors["city"] == "City must be less than 100 characters"

    def test_step_without_fields_is_valid(self):
        schema = StepSchema(3)
        result = schema.validate({"anything": "ignored"})
        assert result.is_valid is True
        assert result.step_index == 3

    def test_all_optional_step_valid_when_empty(self):
        schema = StepSchema(2, fields=[("city", fv.max_length(100, "City")),
                                       ("website", fv.url())])
        assert schema.validate({}).is_valid is True

    def test_validation_is_idempotent(self, address_step):
        data = {"city": "", "website": "bad"}
        first = address_step.validate(data)
        second = address_step.validate(data)
        assert first == second

    def test_validation_does_not_mutate_input(self, address_step):
        data = {"city": "  Boston  ", "website": "https://x.com"}
        snapshot = dict(data)
        address_step.validate(data)
        assert data == snapshot


class _RecordingDelegate:
    """Schema delegate returning fixed issues."""

    def __init__(self, issues=(), field_names=("name", "city", "other_step_field")):
        self.issues = list(issues)
        self.field_names = field_names
        self.records = []

    def validate(self, record):
        self.records.append(record)
        return self.issues


class _BrokenDelegate:
    field_names = ("name",)

    def validate(self, record):
        raise RuntimeError("schema exploded")


class TestDelegate:
    """Test declarative schema delegates."""

    def test_delegate_receives_only_present_step_values(self):
        delegate = _RecordingDelegate()
        schema = StepSchema(1, fields=[("name", None), ("city", None)], delegate=delegate)

        schema.validate({"name": "Acme", "city": "  ", "unrelated": 1})

        assert delegate.records == [{"name": "Acme"}]

    def test_delegate_issues_become_field_errors(self):
        delegate = _RecordingDelegate([SchemaIssue("name", "Name is too long")])
        schema = StepSchema(1, fields=[("name", None)], delegate=delegate)

        assert schema.validate({"name": "x"}).errors == {"name": "Name is too long"}

    def test_issues_for_other_steps_are_ignored(self):
        delegate = _RecordingDelegate([{"path": "other_step_field", "message": "bad"}])
        schema = StepSchema(1, fields=[("name", None)], delegate=delegate)

        assert schema.validate({"name": "x"}).is_valid is True

    def test_issue_without_path_is_general(self):
        delegate = _RecordingDelegate([{"path": "", "message": "Record is inconsistent"}])
        schema = StepSchema(1, fields=[("name", None)], delegate=delegate)

        assert schema.validate({"name": "x"}).errors == {"general": "Record is inconsistent"}

    def test_field_validator_message_wins_over_delegate(self):
        delegate = _RecordingDelegate([SchemaIssue("name", "delegate message")])
        schema = StepSchema(1, fields=[("name", fv.max_length(2, "Name"))], delegate=delegate)

        result = schema.validate({"name": "abc"})
        assert result.errors == {"name": "Name must be less than 2 characters"}

    def test_collaborator_failure_becomes_general_error(self, caplog):
        schema = StepSchema(1, fields=[("name", None)], required=["name"],
                            delegate=_BrokenDelegate())

        result = schema.validate({})

        assert result.is_valid is False
        assert result.errors["general"] == "Validation failed"
        assert result.errors["name"] == "name is required"
        assert "schema exploded" in caplog.text

    def test_unknown_fields_rejected_at_construction(self):
        with pytest.raises(ConfigurationError) as exc_info:
            StepSchema(1, fields=[("nickname", None)], delegate=_RecordingDelegate())
        assert exc_info.value.field == "nickname"


class TestCrossFieldRules:
    """Test rules spanning several fields."""

    def test_rule_error_on_step_field(self):
        def exclusive(data):
            if data.get("a") and data.get("b"):
                return {"b": "Cannot have both"}
            return {}

        schema = StepSchema(1, fields=[("a", None), ("b", None)], rules=[exclusive])

        assert schema.validate({"a": True, "b": True}).errors == {"b": "Cannot have both"}
        assert schema.validate({"a": True, "b": False}).is_valid is True

    def test_rule_error_outside_step_goes_to_general(self):
        schema = StepSchema(1, fields=[("a", None)], rules=[lambda data: {"zzz": "Odd state"}])
        assert schema.validate({"a": 1}).errors == {"general": "Odd state"}

    def test_rule_returning_none(self):
        schema = StepSchema(1, fields=[("a", None)], rules=[lambda data: None])
        assert schema.validate({}).is_valid is True


class TestConfigurationErrors:
    """Test malformed schema definitions."""

    @pytest.mark.parametrize("index", [0, -1, "1", 1.0])
    def test_invalid_step_index(self, index):
        with pytest.raises(ConfigurationError):
            StepSchema(index)

    def test_duplicate_field(self):
        with pytest.raises(ConfigurationError) as exc_info:
            StepSchema(1, fields=[("name", None), ("name", None)])
        assert exc_info.value.step_index == 1
        assert str(exc_info.value).startswith("[step 1]")

    def test_non_callable_validator(self):
        with pytest.raises(ConfigurationError):
            StepSchema(1, fields=[("name", "not callable")])

    def test_duplicate_required(self):
        with pytest.raises(ConfigurationError):
            StepSchema(1, fields=[("name", None)], required=["name", "name"])

    def test_empty_field_name(self):
        with pytest.raises(ConfigurationError):
            StepSchema(1, fields=[("", None)])

    def test_fields_as_mapping(self):
        schema = StepSchema(1, fields={"name": None, "city": fv.max_length(3, "City")})
        assert schema.field_names == ("name", "city")


class TestHelpers:
    """Test extract, progress and labels."""

    def test_extract_only_step_fields(self, address_step):
        data = {"city": "Boston", "name": "Acme"}
        assert address_step.extract(data) == {"city": "Boston"}

    def test_progress(self, address_step):
        assert address_step.progress({}) == 0
        assert address_step.progress({"city": "Boston"}) == 50
        assert address_step.progress({"city": "Boston", "website": "https://x.com"}) == 100

    def test_progress_of_empty_step(self):
        assert StepSchema(1).progress({}) == 100


async def _check_unique_name(value):
    await asyncio.sleep(0)
    return "Name already taken" if value == "Taken" else None


class TestAsyncValidation:
    """Test schemas with coroutine validators."""

    def test_schema_detects_async_validator(self):
        schema = StepSchema(1, fields=[("name", _check_unique_name)])
        assert schema.is_async is True

    def test_sync_validate_refuses_async_schema(self):
        schema = StepSchema(1, fields=[("name", _check_unique_name)])
        with pytest.raises(ConfigurationError):
            schema.validate({"name": "x"})

    @pytest.mark.asyncio
    async def test_validate_async(self):
        schema = StepSchema(1, fields=[("name", _check_unique_name)], required=["name"])

        taken = await schema.validate_async({"name": "Taken"})
        free = await schema.validate_async({"name": "Free"})
        missing = await schema.validate_async({})

        assert taken.errors == {"name": "Name already taken"}
        assert free.is_valid is True
        assert missing.errors == {"name": "name is required"}

    @pytest.mark.asyncio
    async def test_validate_async_accepts_sync_validators(self, address_step):
        result = await address_step.validate_async({"city": "", "website": "nope"})
        assert result == address_step.validate({"city": "", "website": "nope"})

    @pytest.mark.asyncio
    async def test_async_delegate_configuration_error_propagates(self):
        class _MisconfiguredDelegate:
            field_names = ("name",)

            async def validate(self, record):
                raise ConfigurationError("Delegate has no rules for this step")

        schema = StepSchema(1, fields=[("name", None)], delegate=_MisconfiguredDelegate())

        with pytest.raises(ConfigurationError):
            await schema.validate_async({"name": "Acme"})

    @pytest.mark.asyncio
    async def test_async_delegate_failure_becomes_general_error(self):
        schema = StepSchema(1, fields=[("name", None)], delegate=_BrokenDelegate())

        result = await schema.validate_async({"name": "Acme"})

        assert result.errors == {"general": "Validation failed"}

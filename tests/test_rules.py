"""Tests for the boolean-from-string coercion rule."""

import pytest
from pydantic import BaseModel, ValidationError

from schemaenv.rules import BooleanAsString, parse_boolean_string


class FlagEnv(BaseModel):
    """Single-flag schema used to exercise the rule inside pydantic."""

    FLAG: BooleanAsString


class EnabledByDefaultEnv(BaseModel):
    """Flag with an overriding default."""

    FLAG: BooleanAsString = True


class TestParseBooleanString:
    """Tests for parse_boolean_string."""

    def test_true_string(self) -> None:
        """Test that "true" is True."""
        assert parse_boolean_string("true") is True

    @pytest.mark.parametrize("value", ["false", "", None, False])
    def test_falsy_inputs(self, value: object) -> None:
        """Test that the other accepted inputs are all False."""
        assert parse_boolean_string(value) is False

    def test_boolean_true_passes_through(self) -> None:
        """Test that an actual boolean is returned unchanged."""
        assert parse_boolean_string(True) is True

    @pytest.mark.parametrize("value", ["foo", "1", "yes", "TRUE", " true"])
    def test_rejects_unrecognized_strings(self, value: str) -> None:
        """Test that any other string is rejected with the value named."""
        with pytest.raises(ValueError, match="expected 'true', 'false' or ''"):
            parse_boolean_string(value)

    def test_rejects_other_types(self) -> None:
        """Test that non-string, non-boolean inputs are rejected."""
        with pytest.raises(ValueError, match="got 1"):
            parse_boolean_string(1)


class TestBooleanAsString:
    """Tests for the BooleanAsString annotated type inside a schema."""

    def test_coerces_true(self) -> None:
        """Test "true" becomes True."""
        assert FlagEnv.model_validate({"FLAG": "true"}).FLAG is True

    def test_coerces_false(self) -> None:
        """Test "false" becomes False."""
        assert FlagEnv.model_validate({"FLAG": "false"}).FLAG is False

    def test_empty_string(self) -> None:
        """Test empty string becomes False."""
        assert FlagEnv.model_validate({"FLAG": ""}).FLAG is False

    def test_none(self) -> None:
        """Test explicit None becomes False."""
        assert FlagEnv.model_validate({"FLAG": None}).FLAG is False

    def test_absent(self) -> None:
        """Test a missing key becomes False."""
        assert FlagEnv.model_validate({}).FLAG is False

    def test_declared_default_overrides_absent(self) -> None:
        """Test a field-level default replaces the rule's own default."""
        assert EnabledByDefaultEnv.model_validate({}).FLAG is True
        assert EnabledByDefaultEnv.model_validate({"FLAG": "false"}).FLAG is False

    def test_foo_is_a_validation_error(self) -> None:
        """Test an unrecognized string fails schema validation."""
        with pytest.raises(ValidationError) as exc_info:
            FlagEnv.model_validate({"FLAG": "foo"})

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("FLAG",)
        assert "'foo'" in errors[0]["msg"]

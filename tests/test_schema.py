"""Unit tests for schema validation and ResourceData."""

import pytest

from gl_share import ProjectShareGroupResource, ResourceData, ValidationError
from gl_share.schema import SchemaField, SchemaType, validate_config, validate_value_func

SCHEMA = ProjectShareGroupResource.schema


def valid_config(**overrides):
    config = {"project_id": "42", "group_id": 7, "access_level": "developer"}
    config.update(overrides)
    return config


class TestValidateConfig:
    """Tests for configuration validation."""

    def test_valid(self):
        validate_config(SCHEMA, valid_config())

    @pytest.mark.parametrize("level", ["owner", "Developer", "admin", ""])
    def test_rejected_access_levels(self, level):
        with pytest.raises(ValidationError, match="access_level"):
            validate_config(SCHEMA, valid_config(access_level=level))

    @pytest.mark.parametrize("key", ["project_id", "group_id", "access_level"])
    def test_missing_required(self, key):
        config = valid_config()
        del config[key]
        with pytest.raises(ValidationError, match="required"):
            validate_config(SCHEMA, config)

    @pytest.mark.parametrize("group_id", ["7", True, 7.0])
    def test_group_id_must_be_int(self, group_id):
        with pytest.raises(ValidationError, match="group_id"):
            validate_config(SCHEMA, valid_config(group_id=group_id))

    def test_empty_project_id(self):
        with pytest.raises(ValidationError, match="project_id"):
            validate_config(SCHEMA, valid_config(project_id=""))

    def test_unknown_argument(self):
        with pytest.raises(ValidationError, match="expires_at"):
            validate_config(SCHEMA, valid_config(expires_at="2030-01-01"))

    def test_optional_field_may_be_absent(self):
        schema = {"name": SchemaField(type=SchemaType.STRING, validate=validate_value_func(["a"]))}
        validate_config(schema, {})


class TestResourceData:
    """Tests for the per-resource state handle."""

    def test_config_wins_until_set(self):
        d = ResourceData(state={"id": "42:7", "access_level": "guest"}, config={"access_level": "developer"})
        assert d.get("access_level") == "developer"

        d.set("access_level", "reporter")
        assert d.get("access_level") == "reporter"

    def test_has_change(self):
        d = ResourceData(state={"id": "42:7", "group_id": 7}, config={"group_id": 8, "access_level": "guest"})
        assert d.has_change("group_id")
        assert not d.has_change("access_level")
        assert not d.has_change("project_id")

    def test_state_empty_when_gone(self):
        d = ResourceData(state={"id": "42:7", "group_id": 7})
        assert d.state() == {"id": "42:7", "group_id": 7}

        d.set_id("")
        assert d.is_gone()
        assert d.state() == {}

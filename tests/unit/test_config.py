"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from rosetta_asserter.config import (
    CONFIG_FILE_NAME,
    AsserterConfig,
    Endpoint,
    ReportFormat,
    ValidationConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestAsserterConfig:
    """Test complete AsserterConfig model."""

    def test_defaults(self):
        config = AsserterConfig()
        assert config.validation.fail_fast is True
        assert config.output.format == ReportFormat.TABLE
        assert config.logging.level == "warn"
        assert all(config.endpoint_enabled(e.value) for e in Endpoint)

    def test_config_from_dict(self):
        config_data = {
            "validation": {
                "failFast": False,
                "endpoints": ["signatures", "submit"]
            },
            "output": {"format": "json"},
            "logging": {"level": "debug"}
        }

        config = AsserterConfig(**config_data)
        assert config.validation.fail_fast is False
        assert config.endpoint_enabled("signatures")
        assert not config.endpoint_enabled("metadata")
        assert config.output.format == "json"
        assert config.logging.level == "debug"

    def test_unknown_endpoint_rejected(self):
        with pytest.raises(ValueError):
            ValidationConfig(endpoints=["balance"])

    def test_empty_endpoints_rejected(self):
        with pytest.raises(ValueError, match="at least one endpoint"):
            ValidationConfig(endpoints=[])

    def test_config_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            AsserterConfig(invalid_field="should-fail")


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                json.dump({"validation": {"failFast": False}}, f)

            config = load_config(config_file)
            assert config.validation.fail_fast is False

    def test_load_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nonexistent.json")
            assert config.validation.fail_fast is True

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                f.write("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                json.dump({"invalid": "structure"}, f)

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_parent_dir(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / CONFIG_FILE_NAME
            config_file.touch()

            sub_dir = temp_path / "a" / "b"
            sub_dir.mkdir(parents=True)

            assert find_config_file(sub_dir) == config_file.resolve()

    def test_find_config_file_custom_name(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / CONFIG_FILE_NAME).touch()
            custom = temp_path / "ci-asserter.json"
            custom.touch()
            sub_dir = temp_path / "nested"
            sub_dir.mkdir()

            assert find_config_file(sub_dir, file_name="ci-asserter.json") == custom.resolve()

    def test_find_config_file_ignores_directories(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            (temp_path / CONFIG_FILE_NAME).mkdir()

            assert find_config_file(temp_path) is None
            assert load_config(temp_path / CONFIG_FILE_NAME) == create_default_config()

    def test_load_config_non_object(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            config_file.write_text("[1, 2]", encoding="utf-8")

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            assert find_config_file(Path(temp_dir)) is None

    def test_zero_config_operation(self):
        with patch("rosetta_asserter.config.find_config_file", return_value=None):
            config = load_config()
            assert config == create_default_config()

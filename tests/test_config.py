"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from wakelan.config.loader import (
    ConfigError,
    Host,
    hosts_from_config,
    load_config,
    validate_config,
)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Should load a valid YAML config file."""
        config_data = {"hosts": [{"name": "nas", "mac_address": "AA:BB:CC:DD:EE:FF"}]}
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(config_data))

        result = load_config(config_file)

        assert result == config_data

    def test_load_missing_file_raises(self) -> None:
        """Should raise FileNotFoundError for missing config."""
        with pytest.raises(FileNotFoundError):
            load_config(Path("/nonexistent/config.yaml"))

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Should return None for empty YAML file."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) is None

    def test_load_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Should raise error for invalid YAML syntax."""
        config_file = tmp_path / "invalid.yaml"
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(yaml.YAMLError):
            load_config(config_file)


class TestValidateConfig:
    """Tests for validate_config function."""

    def _minimal_host(self, **overrides: object) -> dict:
        base = {"name": "nas", "mac_address": "AA:BB:CC:DD:EE:FF"}
        base.update(overrides)
        return base

    def test_valid_config_no_errors(self) -> None:
        assert validate_config({"hosts": [self._minimal_host()]}) == []

    def test_root_must_be_mapping(self) -> None:
        assert validate_config(["nas"]) == ["Config root must be a YAML mapping"]  # type: ignore[arg-type]

    def test_missing_hosts_key(self) -> None:
        errors = validate_config({})
        assert any("hosts" in e for e in errors)

    def test_hosts_not_a_list(self) -> None:
        errors = validate_config({"hosts": "nas"})
        assert errors == ["'hosts' must be a list"]

    def test_host_not_a_mapping(self) -> None:
        errors = validate_config({"hosts": ["nas"]})
        assert errors == ["hosts[0]: must be a mapping"]

    def test_missing_mac(self) -> None:
        errors = validate_config({"hosts": [{"name": "nas"}]})
        assert any("mac_address" in e for e in errors)

    def test_invalid_mac_reports_reason(self) -> None:
        errors = validate_config({"hosts": [self._minimal_host(mac_address="-----abababababab")]})
        assert len(errors) == 1
        assert "expected a hyphen at position 5" in errors[0]

    def test_hyphen_mac_accepted(self) -> None:
        config = {"hosts": [self._minimal_host(mac_address="aa-bb-cc-dd-ee-ff")]}
        assert validate_config(config) == []

    @pytest.mark.parametrize("name", [["a", "b"], {"a": 1}, 42])
    def test_non_string_name_reported(self, name: object) -> None:
        """Unhashable or non-string names are reported, not raised."""
        errors = validate_config({"hosts": [self._minimal_host(name=name)]})
        assert errors == ["hosts[0]: 'name' must be a string"]

    def test_duplicate_names(self) -> None:
        config = {
            "hosts": [
                self._minimal_host(),
                self._minimal_host(mac_address="11:22:33:44:55:66"),
            ]
        }
        errors = validate_config(config)
        assert errors == ["hosts[1]: duplicate host name 'nas'"]


class TestHostsFromConfig:
    """Tests for hosts_from_config function."""

    def test_builds_hosts(self) -> None:
        config = {
            "hosts": [
                {"name": "nas", "mac_address": "AA:BB:CC:DD:EE:FF", "description": "Basement"},
                {"name": "desk", "mac_address": "11-22-33-44-55-66"},
            ]
        }
        assert hosts_from_config(config) == [
            Host(name="nas", mac_address="AA:BB:CC:DD:EE:FF", description="Basement"),
            Host(name="desk", mac_address="11-22-33-44-55-66"),
        ]

    def test_invalid_config_raises(self) -> None:
        with pytest.raises(ConfigError, match="hosts"):
            hosts_from_config({})

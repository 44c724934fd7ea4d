"""Tests for configuration layering onto Constants."""

import argparse

import pytest

from constants import Constants
from cli_config import (
    ConfigError,
    apply_cli_overrides,
    apply_config,
    apply_env_overrides,
    load_config,
    load_runtime_config,
)


def _args(**kwargs):
    defaults = {"CONFIG": None, "SUPPORTED_MAJORS": []}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestLoadConfig:
    """YAML loading."""

    def test_plain_mapping(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("supported_majors: [1, 2]\ncommand_timeout: 5\n", encoding="utf-8")
        assert load_config(str(path)) == {"supported_majors": [1, 2], "command_timeout": 5}

    def test_installed_section(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("installed:\n  versions_command: goenv versions --bare\n", encoding="utf-8")
        assert load_config(str(path)) == {"versions_command": "goenv versions --bare"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("supported_majors: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(str(tmp_path / "nope.yml"))


class TestApplyConfig:
    """Validation and application of config values."""

    def test_applies_all_keys(self):
        apply_config({
            "supported_majors": [1, 2],
            "versions_command": "my-lister --bare",
            "system_probe_command": ["which", "go"],
            "command_timeout": 2.5,
        })
        assert Constants.SUPPORTED_MAJORS == ("1", "2")
        assert Constants.VERSIONS_COMMAND == ["my-lister", "--bare"]
        assert Constants.SYSTEM_PROBE_COMMAND == ["which", "go"]
        assert Constants.COMMAND_TIMEOUT_SEC == 2.5

    def test_single_major_scalar(self):
        apply_config({"supported_majors": 1})
        assert Constants.SUPPORTED_MAJORS == ("1",)

    @pytest.mark.parametrize(
        "cfg",
        [
            {"supported_majors": []},
            {"supported_majors": ["one"]},
            {"versions_command": ""},
            {"versions_command": {"a": 1}},
            {"command_timeout": "soon"},
            {"command_timeout": 0},
        ],
    )
    def test_rejects_invalid_values(self, cfg):
        with pytest.raises(ConfigError):
            apply_config(cfg)

    def test_unknown_keys_are_ignored(self):
        before = Constants.SUPPORTED_MAJORS
        apply_config({"colour": "blue"})
        assert Constants.SUPPORTED_MAJORS == before


class TestOverrides:
    """Environment and CLI layers."""

    def test_env_overrides(self):
        apply_env_overrides({
            Constants.ENV_SUPPORTED_MAJORS: "1, 2",
            Constants.ENV_VERSIONS_COMMAND: "lister -b",
            Constants.ENV_PROBE_COMMAND: "which go",
            Constants.ENV_COMMAND_TIMEOUT: "4",
        })
        assert Constants.SUPPORTED_MAJORS == ("1", "2")
        assert Constants.VERSIONS_COMMAND == ["lister", "-b"]
        assert Constants.SYSTEM_PROBE_COMMAND == ["which", "go"]
        assert Constants.COMMAND_TIMEOUT_SEC == 4.0

    def test_invalid_env_value_is_ignored(self):
        before = Constants.COMMAND_TIMEOUT_SEC
        apply_env_overrides({Constants.ENV_COMMAND_TIMEOUT: "never"})
        assert Constants.COMMAND_TIMEOUT_SEC == before

    def test_cli_overrides(self):
        apply_cli_overrides(_args(SUPPORTED_MAJORS=["2", "1"]))
        assert Constants.SUPPORTED_MAJORS == ("2", "1")

    def test_precedence_file_env_cli(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("supported_majors: [3]\ncommand_timeout: 7\n", encoding="utf-8")
        env = {Constants.ENV_SUPPORTED_MAJORS: "4"}
        load_runtime_config(_args(CONFIG=str(path), SUPPORTED_MAJORS=["5"]), env)
        assert Constants.SUPPORTED_MAJORS == ("5",)
        assert Constants.COMMAND_TIMEOUT_SEC == 7.0

    def test_config_from_env_variable(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("supported_majors: [3]\n", encoding="utf-8")
        load_runtime_config(_args(), {Constants.ENV_CONFIG: str(path)})
        assert Constants.SUPPORTED_MAJORS == ("3",)

    def test_missing_config_from_env_variable_is_ignored(self, tmp_path):
        before = Constants.SUPPORTED_MAJORS
        load_runtime_config(_args(), {Constants.ENV_CONFIG: str(tmp_path / "nope.yml")})
        assert Constants.SUPPORTED_MAJORS == before

    def test_missing_config_from_cli_is_an_error(self, tmp_path):
        with pytest.raises(ConfigError):
            load_runtime_config(_args(CONFIG=str(tmp_path / "nope.yml")), {})

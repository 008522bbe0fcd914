"""Tests for configuration loading."""

import pytest

from gitpulse.config import (
    DEFAULT_CHANGE_COMMAND,
    Config,
    parse_bool,
)
from gitpulse.errors import ConfigError


class TestConfig:
    def test_defaults(self):
        config = Config.from_env({})

        assert config.update_interval == 30
        assert config.warning_threshold == 250
        assert config.use_builtin_diff is True
        assert config.change_command == DEFAULT_CHANGE_COMMAND

    def test_from_env(self):
        config = Config.from_env({
            "GITPULSE_UPDATE_INTERVAL": "5.5",
            "GITPULSE_WARNING_THRESHOLD": "100",
            "GITPULSE_USE_BUILTIN_DIFF": "no",
            "GITPULSE_CHANGE_COMMAND": " wc-tool --words ",
        })

        assert config.update_interval == 5.5
        assert config.warning_threshold == 100
        assert config.use_builtin_diff is False
        assert config.change_command == "wc-tool --words"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GITPULSE_WARNING_THRESHOLD", "7")
        assert Config.from_env().warning_threshold == 7

    def test_empty_values_keep_defaults(self):
        assert Config.from_env({"GITPULSE_WARNING_THRESHOLD": ""}) == Config()

    @pytest.mark.parametrize("name,value", [
        ("GITPULSE_UPDATE_INTERVAL", "soon"),
        ("GITPULSE_WARNING_THRESHOLD", "2.5"),
        ("GITPULSE_USE_BUILTIN_DIFF", "maybe"),
        ("GITPULSE_UPDATE_INTERVAL", "-1"),
        ("GITPULSE_UPDATE_INTERVAL", "nan"),
        ("GITPULSE_UPDATE_INTERVAL", "inf"),
    ])
    def test_invalid_env(self, name, value):
        with pytest.raises(ConfigError):
            Config.from_env({name: value})

    def test_external_mode_needs_command(self):
        with pytest.raises(ConfigError):
            Config(use_builtin_diff=False, change_command=" ")

    def test_overrides_skip_none(self):
        config = Config().with_overrides(warning_threshold=10, update_interval=None)

        assert config.warning_threshold == 10
        assert config.update_interval == 30

    def test_overrides_are_validated(self):
        with pytest.raises(ConfigError):
            Config().with_overrides(warning_threshold=-1)

    @pytest.mark.parametrize("interval", [float("nan"), float("inf"), float("-inf")])
    def test_interval_must_be_finite(self, interval):
        with pytest.raises(ConfigError):
            Config().with_overrides(update_interval=interval)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize("raw,expected", [
    ("1", True), ("TRUE", True), (" yes ", True), ("on", True),
    ("0", False), ("false", False), ("No", False), ("off", False),
])
def test_parse_bool(raw, expected):
    assert parse_bool("X", raw) is expected

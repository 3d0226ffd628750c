"""Tests for the runner configuration."""

import logging

import pytest

from config.runner_config import BuildConfig, DapConfig, RunnerConfig


def test_defaults(config):
    assert config.log_level == logging.WARNING
    assert config.find_target_max_iter == 10
    assert config.build.args == []
    assert config.test.args == []
    assert config.dap.type == "coreclr"
    assert config.default_target is None
    assert config.is_valid()


def test_setup_replaces_top_level_keys(config):
    updated = config.setup({"find_target_max_iter": 3, "build": {"args": ["-c", "Debug"]}})
    assert updated.find_target_max_iter == 3
    assert updated.build == BuildConfig(args=["-c", "Debug"])
    assert updated.dap == DapConfig()


def test_setup_returns_copy(config):
    config.setup({"find_target_max_iter": 3})
    assert config.find_target_max_iter == 10


def test_setup_accepts_level_names(config):
    assert config.setup({"log_level": "debug"}).log_level == logging.DEBUG


def test_setup_without_options(config):
    assert config.setup() == config
    assert config.setup(None) == config


def test_setup_rejects_unknown_options(config):
    with pytest.raises(ValueError, match="cmd_runner"):
        config.setup({"cmd_runner": print})


def test_validate():
    config = RunnerConfig(log_level="LOUD", find_target_max_iter=0, dap=DapConfig(type=""))
    errors = config.validate()
    assert len(errors) == 3
    assert not config.is_valid()

"""Tests for logger configuration from the project config."""

import json
import logging

import pytest

from spring_deployer import logger as logger_module


@pytest.fixture(autouse=True)
def restore_level():
    yield
    logger_module.DEBUG_MODE = False
    logger_module.setup_logger(debug_mode=False)


def test_debug_mode_from_config(tmp_path):
    config_path = tmp_path / "config_spring.json"
    config_path.write_text(json.dumps({"mode": "debug"}))

    logger_module.configure_logger_from_file(config_path)

    assert logger_module.get_debug_mode() is True
    assert logging.getLogger("spring_deployer").level == logging.DEBUG


def test_production_mode_from_config(tmp_path):
    config_path = tmp_path / "config_spring.json"
    config_path.write_text(json.dumps({"mode": "PRODUCTION"}))

    logger_module.configure_logger_from_file(config_path)

    assert logger_module.get_debug_mode() is False
    assert logging.getLogger("spring_deployer").level == logging.INFO


def test_unreadable_config_keeps_defaults(tmp_path):
    logger_module.configure_logger_from_file(tmp_path / "missing.json")

    assert logger_module.get_debug_mode() is False


def test_single_handler_after_reconfigure():
    logger_module.setup_logger(debug_mode=True)
    logger_module.setup_logger(debug_mode=False)

    assert len(logging.getLogger("spring_deployer").handlers) == 1

# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import logging
import logging.config
import os
import sys

# noinspection PyProtectedMember
from hsh._logging import (
    ENV_PREFIX,
    get_log_level,
    get_logging_config,
)


def test_get_logging_config() -> None:
    """Test the get_logging_config function."""
    log_level = "WARNING"
    config = get_logging_config(log_level)
    assert (
        config["formatters"]["default"]["format"]
        == "%(levelname)-9s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s"  # pylint: disable=line-too-long # noqa: E501
    )
    assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
    for name in ("", "hsh"):
        logger = config["loggers"][name]
        assert logger["level"] == log_level
        assert logger["handlers"] == ["default"]
        assert logger["propagate"] is False
    for module in ("argon2", "bcrypt"):
        module_logger = config["loggers"][module]
        assert module_logger["level"] == "WARNING"
        assert module_logger["handlers"] == ["default"]
        assert module_logger["propagate"] is False


def test_logging_config_applies() -> None:
    """Test that the dict is accepted by logging.config."""
    logging.config.dictConfig(get_logging_config("DEBUG"))
    assert logging.getLogger("hsh").level == logging.DEBUG
    assert logging.getLogger("bcrypt").level == logging.WARNING


def test_get_log_level() -> None:
    """Test get_log_level."""
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "DEBUG"
    assert get_log_level() == "DEBUG"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    assert get_log_level() == "INFO"

    sys.argv = ["hsh", "--debug"]
    assert get_log_level() == "DEBUG"

    sys.argv = ["hsh", "--log-level", "warning"]
    assert get_log_level() == "WARNING"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    sys.argv = ["hsh", "--log-level"]
    assert get_log_level() == "INFO"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    sys.argv = ["hsh", "--log-level", "INVALID"]
    assert get_log_level() == "INFO"

    sys.argv = ["hsh"]
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "INVALID"
    assert get_log_level() == "INFO"

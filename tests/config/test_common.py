# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Test hsh.config._common."""
# pylint: disable=missing-return-doc,missing-param-doc

import os
import sys

# noinspection PyProtectedMember
from hsh.config._common import ENV_PREFIX, get_default_algorithm, get_value


def test_get_value() -> None:
    """Test get_value."""
    os.environ[f"{ENV_PREFIX}TEST"] = "test"
    assert get_value("--test", "TEST", str, "default") == "test"

    os.environ[f"{ENV_PREFIX}TEST"] = "1"
    assert get_value("--test", "TEST", int, 0) == 1


def test_get_value_no_env() -> None:
    """Test get_value with no environment variable."""
    assert get_value("--test", "TEST", str, "default") == "default"
    assert get_value("--test", "TEST", int, 0) == 0

    os.environ[f"{ENV_PREFIX}TEST"] = ""
    assert get_value("--test", "TEST", str, "default") == "default"


def test_get_value_invalid_cast() -> None:
    """Test that values that cannot be cast fall back."""
    os.environ[f"{ENV_PREFIX}TEST"] = "twelve"
    assert get_value("--test", "TEST", int, 12) == 12


def test_get_value_cli() -> None:
    """Test that command line arguments win over the environment."""
    os.environ[f"{ENV_PREFIX}TEST"] = "8"
    sys.argv = ["hsh", "--test", "10"]
    assert get_value("--test", "TEST", int, 0) == 10

    sys.argv = ["hsh", "--test"]
    assert get_value("--test", "TEST", int, 0) == 8


def test_get_default_algorithm() -> None:
    """Test the default algorithm lookup."""
    assert get_default_algorithm() == "argon2i"
    os.environ[f"{ENV_PREFIX}DEFAULT_ALGORITHM"] = "SCRYPT"
    assert get_default_algorithm() == "scrypt"
    os.environ[f"{ENV_PREFIX}DEFAULT_ALGORITHM"] = "md5"
    assert get_default_algorithm() == "argon2i"
    sys.argv = ["hsh", "--algorithm", "bcrypt"]
    assert get_default_algorithm() == "bcrypt"

# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=protected-access
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator

import pytest

from hsh.config import ENV_PREFIX, Settings, SettingsManager

FAST_COSTS = {
    "argon2i_time_cost": 1,
    "argon2i_memory_cost": 1024,
    "bcrypt_cost": 4,
    "scrypt_n": 1024,
}
"""Cheap cost parameters, the defaults are too slow for a test suite."""


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Fast settings for tests."""
    return Settings(**FAST_COSTS)  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def isolated_settings(settings: Settings) -> Generator[None, None, None]:
    """Use the fast settings as the process-wide ones.

    Clears ``HSH_`` environment variables and command line arguments
    so that nothing from the host leaks into the tests.
    """
    saved_env = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }
    for key in saved_env:
        os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = [sys.argv[0]]
    SettingsManager._instance = settings
    yield
    SettingsManager.reset()
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved_env)

# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for hsh."""

from ._common import ENV_PREFIX
from .settings import AlgorithmType, Settings
from .settings_manager import SettingsManager

__all__ = [
    "AlgorithmType",
    "Settings",
    "SettingsManager",
    "ENV_PREFIX",
]

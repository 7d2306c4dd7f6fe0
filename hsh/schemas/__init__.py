# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Serialization schemas."""

from .hash import HashSchema

__all__ = ["HashSchema"]

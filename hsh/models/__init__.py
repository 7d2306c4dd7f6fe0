# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hash models."""

from .builder import BuilderState, HashBuilder
from .hash import AlgorithmLike, HashRecord
from .hash_algorithm import HashAlgorithm

__all__ = [
    "AlgorithmLike",
    "BuilderState",
    "HashAlgorithm",
    "HashBuilder",
    "HashRecord",
]

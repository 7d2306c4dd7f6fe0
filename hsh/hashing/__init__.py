# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing providers."""

from ._argon_hasher import Argon2iHasher
from ._bcrypt_hasher import BcryptHasher
from ._scrypt_hasher import ScryptHasher
from .dispatcher import get_provider
from .protocol import Provider

__all__ = [
    "Argon2iHasher",
    "BcryptHasher",
    "ScryptHasher",
    "Provider",
    "get_provider",
]

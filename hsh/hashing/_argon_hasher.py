# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2i provider (raw digests through argon2-cffi's low level API)."""

import hmac
import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from hsh.errors import VerificationError

from ._common import (
    MIN_DIGEST_LEN,
    MIN_SALT_LEN,
    check_salt_length,
    invalid_cost,
    primitive_failure,
)

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Argon2iHasher:
    """Argon2i hasher"""

    name: ClassVar[str] = "argon2i"
    min_salt_len: ClassVar[int] = MIN_SALT_LEN
    max_salt_len: ClassVar[Optional[int]] = None

    time_cost: int = 3
    memory_cost: int = 4096  # 4 MiB
    parallelism: int = 1
    hash_len: int = 32
    salt_len: int = 16

    def check_salt(self, salt: bytes) -> None:
        """Validate a salt length.

        Parameters
        ----------
        salt : bytes
            The salt
        """
        check_salt_length(self.name, salt, self.min_salt_len)

    def _check_costs(self) -> None:
        if self.time_cost < 1:
            raise invalid_cost(self.name, "time_cost must be >= 1")
        if self.parallelism < 1:
            raise invalid_cost(self.name, "parallelism must be >= 1")
        if self.memory_cost < 8 * self.parallelism:
            raise invalid_cost(
                self.name, "memory_cost must be >= 8 * parallelism"
            )
        if self.hash_len < MIN_DIGEST_LEN:
            raise invalid_cost(
                self.name, f"hash_len must be >= {MIN_DIGEST_LEN}"
            )

    def _derive(self, password: bytes, salt: bytes, hash_len: int) -> bytes:
        try:
            return hash_secret_raw(
                secret=password,
                salt=salt,
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=hash_len,
                type=Type.I,
            )
        except HashingError as error:
            raise primitive_failure(self.name, error) from error

    def derive(self, password: bytes, salt: bytes) -> bytes:
        """Derive a raw Argon2i digest.

        Parameters
        ----------
        password : bytes
            The encoded password.
        salt : bytes
            The salt.

        Returns
        -------
        bytes
            ``hash_len`` digest bytes.
        """
        self.check_salt(salt)
        self._check_costs()
        LOG.debug(
            "argon2i: deriving (t=%d, m=%d, p=%d)",
            self.time_cost,
            self.memory_cost,
            self.parallelism,
        )
        return self._derive(password, salt, self.hash_len)

    def verify(self, password: bytes, salt: bytes, digest: bytes) -> bool:
        """Verify a password against a stored Argon2i digest.

        The candidate is derived with the stored digest's length, so
        digests made with another ``hash_len`` still verify. Stored
        digests under 16 bytes are refused.

        Parameters
        ----------
        password : bytes
            The encoded candidate password.
        salt : bytes
            The stored salt.
        digest : bytes
            The stored digest.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.

        Raises
        ------
        VerificationError
            If the salt or digest has the wrong shape.
        """
        if len(salt) < self.min_salt_len:
            raise VerificationError(self.name, "salt too short")
        if len(digest) < MIN_DIGEST_LEN:
            raise VerificationError(self.name, "digest too short")
        self._check_costs()
        candidate = self._derive(password, salt, len(digest))
        return hmac.compare_digest(candidate, digest)


__all__ = ["Argon2iHasher"]

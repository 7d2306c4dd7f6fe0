# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt provider."""

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

from hsh.errors import VerificationError

from ._common import (
    MIN_DIGEST_LEN,
    MIN_SALT_LEN,
    check_salt_length,
    invalid_cost,
    primitive_failure,
)

LOG = logging.getLogger(__name__)

_MAX_MAXMEM = 2**31 - 1
_EXTRA_MEM = 1024 * 1024


@dataclass(frozen=True)
class ScryptHasher:
    """Scrypt hasher."""

    name: ClassVar[str] = "scrypt"
    min_salt_len: ClassVar[int] = MIN_SALT_LEN
    max_salt_len: ClassVar[Optional[int]] = None

    n: int = 16384  # 2^14
    r: int = 8
    p: int = 1
    dklen: int = 64
    salt_len: int = 32

    def check_salt(self, salt: bytes) -> None:
        """Validate a salt length.

        Parameters
        ----------
        salt : bytes
            The salt
        """
        check_salt_length(self.name, salt, self.min_salt_len)

    def _check_costs(self) -> None:
        if self.n < 2 or self.n & (self.n - 1):
            raise invalid_cost(self.name, "n must be a power of two > 1")
        if self.r < 1:
            raise invalid_cost(self.name, "r must be >= 1")
        if self.p < 1:
            raise invalid_cost(self.name, "p must be >= 1")
        if self.dklen < MIN_DIGEST_LEN:
            raise invalid_cost(
                self.name, f"dklen must be >= {MIN_DIGEST_LEN}"
            )

    def _derive(self, password: bytes, salt: bytes, dklen: int) -> bytes:
        maxmem = min(
            128 * self.r * (self.n + self.p + 2) + _EXTRA_MEM, _MAX_MAXMEM
        )
        try:
            return hashlib.scrypt(
                password,
                salt=salt,
                n=self.n,
                r=self.r,
                p=self.p,
                maxmem=maxmem,
                dklen=dklen,
            )
        except (ValueError, MemoryError) as error:
            raise primitive_failure(self.name, error) from error

    def derive(self, password: bytes, salt: bytes) -> bytes:
        """Derive a raw scrypt digest.

        Parameters
        ----------
        password : bytes
            The encoded password.
        salt : bytes
            The salt.

        Returns
        -------
        bytes
            ``dklen`` digest bytes.
        """
        self.check_salt(salt)
        self._check_costs()
        LOG.debug("scrypt: deriving (n=%d, r=%d, p=%d)", self.n, self.r, self.p)
        return self._derive(password, salt, self.dklen)

    def verify(self, password: bytes, salt: bytes, digest: bytes) -> bool:
        """Verify a password against a stored scrypt digest.

        The candidate is derived with the stored digest's length; stored
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
        key = self._derive(password, salt, len(digest))
        return hmac.compare_digest(key, digest)


__all__ = ["ScryptHasher"]

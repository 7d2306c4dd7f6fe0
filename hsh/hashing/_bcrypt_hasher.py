# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt provider.

The digest is the full modular crypt string (``$2b$NN$<salt><hash>``)
produced by the bcrypt library from the record's raw 16 byte salt.

Bcrypt only reads the first 72 bytes of the UTF-8 encoded password.
Longer passwords are truncated, not rejected, so two passwords sharing
their first 72 bytes produce the same digest and verify against each
other. Callers that accept long passphrases should prefer Argon2i or
scrypt.
"""

import base64
import hmac
import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Optional

import bcrypt

from hsh.errors import VerificationError

from ._common import check_salt_length, invalid_cost, primitive_failure

LOG = logging.getLogger(__name__)

BCRYPT_SALT_LEN = 16
MIN_COST = 4
MAX_COST = 31
MAX_PASSWORD_LEN = 72

_BCRYPT_RE = re.compile(rb"^(\$2[aby]\$)(\d{2})\$[./A-Za-z0-9]{53}$")
# same bit order as standard base64, different alphabet, no padding
_TO_BCRYPT64 = bytes.maketrans(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    b"./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
)


def bcrypt64(salt: bytes) -> bytes:
    """Encode a raw salt with bcrypt's base64 alphabet.

    Parameters
    ----------
    salt : bytes
        The 16 byte salt.

    Returns
    -------
    bytes
        The 22 character encoded salt.
    """
    return base64.b64encode(salt).rstrip(b"=").translate(_TO_BCRYPT64)


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt hasher."""

    name: ClassVar[str] = "bcrypt"
    min_salt_len: ClassVar[int] = BCRYPT_SALT_LEN
    max_salt_len: ClassVar[Optional[int]] = BCRYPT_SALT_LEN
    salt_len: ClassVar[int] = BCRYPT_SALT_LEN

    cost: int = 12

    def check_salt(self, salt: bytes) -> None:
        """Validate a salt length (exactly 16 bytes).

        Parameters
        ----------
        salt : bytes
            The salt
        """
        check_salt_length(
            self.name, salt, self.min_salt_len, self.max_salt_len
        )

    def _hashpw(self, password: bytes, setting: bytes) -> bytes:
        # Explicitly truncate to 72 bytes, newer bcrypt releases refuse
        # longer inputs instead of truncating them.
        return bcrypt.hashpw(password[:MAX_PASSWORD_LEN], setting)

    def derive(self, password: bytes, salt: bytes) -> bytes:
        """Derive a bcrypt digest.

        Parameters
        ----------
        password : bytes
            The encoded password.
        salt : bytes
            The 16 byte salt.

        Returns
        -------
        bytes
            The modular crypt string.

        Raises
        ------
        DerivationError
            If the salt or cost is invalid, or bcrypt fails.
        """
        self.check_salt(salt)
        if not MIN_COST <= self.cost <= MAX_COST:
            raise invalid_cost(
                self.name, f"cost must be between {MIN_COST} and {MAX_COST}"
            )
        LOG.debug("bcrypt: deriving (cost=%d)", self.cost)
        setting = b"$2b$%02d$" % self.cost + bcrypt64(salt)
        try:
            return self._hashpw(password, setting)
        except ValueError as error:
            raise primitive_failure(self.name, error) from error

    def verify(self, password: bytes, salt: bytes, digest: bytes) -> bool:
        """Verify a password against a stored bcrypt digest.

        The cost and version are read from the stored digest, the salt
        is the record's.

        Parameters
        ----------
        password : bytes
            The encoded candidate password.
        salt : bytes
            The stored salt.
        digest : bytes
            The stored modular crypt string.

        Returns
        -------
        bool
            True if verified, False if not.

        Raises
        ------
        VerificationError
            If the salt or digest has the wrong shape.
        """
        if len(salt) != BCRYPT_SALT_LEN:
            raise VerificationError(self.name, "salt must be 16 bytes")
        match = _BCRYPT_RE.match(digest)
        if not match:
            raise VerificationError(self.name, "not a bcrypt digest")
        cost = int(match.group(2))
        if not MIN_COST <= cost <= MAX_COST:
            raise VerificationError(self.name, "cost out of range")
        setting = match.group(1) + match.group(2) + b"$" + bcrypt64(salt)
        try:
            candidate = self._hashpw(password, setting)
        except ValueError:
            return False
        return hmac.compare_digest(candidate, digest)


__all__ = ["BcryptHasher", "bcrypt64"]

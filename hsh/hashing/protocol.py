# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing provider protocol."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Provider(Protocol):  # pragma: no cover
    """Protocol for the scheme providers.

    A provider only derives and verifies. It keeps no state besides its
    (immutable) cost parameters.
    """

    name: str
    salt_len: int
    min_salt_len: int
    max_salt_len: Optional[int]

    def derive(self, password: bytes, salt: bytes) -> bytes:
        """Derive a digest.

        Parameters
        ----------
        password : bytes
            The encoded password
        salt : bytes
            The salt
        """
        ...

    def verify(self, password: bytes, salt: bytes, digest: bytes) -> bool:
        """Check a password against a stored salt and digest.

        Parameters
        ----------
        password : bytes
            The encoded candidate password
        salt : bytes
            The stored salt
        digest : bytes
            The stored digest
        """
        ...

    def check_salt(self, salt: bytes) -> None:
        """Validate a salt length for this scheme.

        Parameters
        ----------
        salt : bytes
            The salt
        """
        ...


__all__ = ["Provider"]

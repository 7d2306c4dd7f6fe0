# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Checks shared by the providers."""

from typing import Optional

from hsh.errors import DerivationError, DerivationReason

MIN_SALT_LEN = 16
# raw (argon2i, scrypt) digests, both derived and stored
MIN_DIGEST_LEN = 16


def check_salt_length(
    name: str,
    salt: bytes,
    min_len: int,
    max_len: Optional[int] = None,
) -> None:
    """Check a salt length against a scheme's bounds.

    Parameters
    ----------
    name : str
        The algorithm token
    salt : bytes
        The salt
    min_len : int
        The minimum length
    max_len : Optional[int], optional
        The maximum length, if any

    Raises
    ------
    DerivationError
        If the salt is too short or too long
    """
    if len(salt) < min_len:
        raise DerivationError(
            DerivationReason.SALT_TOO_SHORT,
            name,
            f"got {len(salt)} bytes, need at least {min_len}",
        )
    if max_len is not None and len(salt) > max_len:
        raise DerivationError(
            DerivationReason.SALT_TOO_LONG,
            name,
            f"got {len(salt)} bytes, need at most {max_len}",
        )


def invalid_cost(name: str, detail: str) -> DerivationError:
    """Build an invalid cost parameter error.

    Parameters
    ----------
    name : str
        The algorithm token
    detail : str
        Which parameter and why

    Returns
    -------
    DerivationError
        The error to raise
    """
    return DerivationError(DerivationReason.INVALID_COST, name, detail)


def primitive_failure(name: str, error: Exception) -> DerivationError:
    """Build an underlying primitive failure error.

    Only the type of the original exception is kept in the message.

    Parameters
    ----------
    name : str
        The algorithm token
    error : Exception
        The library error

    Returns
    -------
    DerivationError
        The error to raise
    """
    return DerivationError(
        DerivationReason.PRIMITIVE_FAILURE, name, type(error).__name__
    )

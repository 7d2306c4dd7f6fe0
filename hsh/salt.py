# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Secure salt generation."""

import logging
import secrets

from .errors import SaltGenerationError

LOG = logging.getLogger(__name__)


def generate_salt(length: int) -> bytes:
    """Generate a random salt using the OS secure random source.

    Parameters
    ----------
    length : int
        The number of bytes.

    Returns
    -------
    bytes
        The salt.

    Raises
    ------
    ValueError
        If the length is not positive.
    SaltGenerationError
        If the random source is unavailable.
    """
    if length <= 0:
        raise ValueError(f"Invalid salt length: {length}")
    try:
        salt = secrets.token_bytes(length)
    except (OSError, NotImplementedError) as error:
        LOG.error("Secure random source failed: %s", type(error).__name__)
        raise SaltGenerationError(
            f"Could not generate a {length} byte salt"
        ) from error
    if len(salt) != length:  # pragma: no cover
        raise SaltGenerationError(f"Short read from random source ({length})")
    return salt


__all__ = ["generate_salt"]

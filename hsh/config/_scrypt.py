# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt cost parameters.

Environment variables (with prefix HSH_)
----------------------------------------
SCRYPT_N (int) # default: 16384
SCRYPT_R (int) # default: 8
SCRYPT_P (int) # default: 1
SCRYPT_DKLEN (int) # default: 64
SCRYPT_SALT_LEN (int) # default: 32

Command line arguments (no prefix)
----------------------------------
--scrypt-n (int)
--scrypt-r (int)
--scrypt-p (int)
--scrypt-dklen (int)
--scrypt-salt-len (int)
"""

from ._common import get_value


def get_scrypt_n() -> int:
    """Get the scrypt CPU/memory cost.

    Returns
    -------
    int
        The cost (a power of two)
    """
    return get_value("--scrypt-n", "SCRYPT_N", int, 16384)


def get_scrypt_r() -> int:
    """Get the scrypt block size.

    Returns
    -------
    int
        The block size
    """
    return get_value("--scrypt-r", "SCRYPT_R", int, 8)


def get_scrypt_p() -> int:
    """Get the scrypt parallelization.

    Returns
    -------
    int
        The parallelization
    """
    return get_value("--scrypt-p", "SCRYPT_P", int, 1)


def get_scrypt_dklen() -> int:
    """Get the scrypt digest length.

    Returns
    -------
    int
        The digest length in bytes
    """
    return get_value("--scrypt-dklen", "SCRYPT_DKLEN", int, 64)


def get_scrypt_salt_len() -> int:
    """Get the length of generated scrypt salts.

    Returns
    -------
    int
        The salt length in bytes
    """
    return get_value("--scrypt-salt-len", "SCRYPT_SALT_LEN", int, 32)

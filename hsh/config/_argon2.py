# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2i cost parameters.

Environment variables (with prefix HSH_)
----------------------------------------
ARGON2I_TIME_COST (int) # default: 3
ARGON2I_MEMORY_COST (int) # default: 4096 (KiB)
ARGON2I_PARALLELISM (int) # default: 1
ARGON2I_HASH_LEN (int) # default: 32
ARGON2I_SALT_LEN (int) # default: 16

Command line arguments (no prefix)
----------------------------------
--argon2i-time-cost (int)
--argon2i-memory-cost (int)
--argon2i-parallelism (int)
--argon2i-hash-len (int)
--argon2i-salt-len (int)
"""

from ._common import get_value


def get_argon2i_time_cost() -> int:
    """Get the number of Argon2i passes.

    Returns
    -------
    int
        The time cost
    """
    return get_value("--argon2i-time-cost", "ARGON2I_TIME_COST", int, 3)


def get_argon2i_memory_cost() -> int:
    """Get the Argon2i memory cost in KiB.

    Returns
    -------
    int
        The memory cost
    """
    return get_value("--argon2i-memory-cost", "ARGON2I_MEMORY_COST", int, 4096)


def get_argon2i_parallelism() -> int:
    """Get the Argon2i lanes.

    Returns
    -------
    int
        The parallelism
    """
    return get_value("--argon2i-parallelism", "ARGON2I_PARALLELISM", int, 1)


def get_argon2i_hash_len() -> int:
    """Get the Argon2i digest length.

    Returns
    -------
    int
        The digest length in bytes
    """
    return get_value("--argon2i-hash-len", "ARGON2I_HASH_LEN", int, 32)


def get_argon2i_salt_len() -> int:
    """Get the length of generated Argon2i salts.

    Returns
    -------
    int
        The salt length in bytes
    """
    return get_value("--argon2i-salt-len", "ARGON2I_SALT_LEN", int, 16)

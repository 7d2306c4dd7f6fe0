# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt cost parameters.

Environment variables (with prefix HSH_)
----------------------------------------
BCRYPT_COST (int) # default: 12

Command line arguments (no prefix)
----------------------------------
--bcrypt-cost (int)
"""

from ._common import get_value


def get_bcrypt_cost() -> int:
    """Get the bcrypt work factor (log2 rounds).

    Returns
    -------
    int
        The cost
    """
    return get_value("--bcrypt-cost", "BCRYPT_COST", int, 12)

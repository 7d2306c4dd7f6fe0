# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Allow ``python -m hsh``."""

from hsh.cli import app

if __name__ == "__main__":
    app()

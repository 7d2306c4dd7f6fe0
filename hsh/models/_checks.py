# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argument type checks shared by the record and the builder."""

from typing import Any


def check_password(password: Any) -> str:
    """Ensure the password is text.

    Parameters
    ----------
    password : Any
        The value to check.

    Returns
    -------
    str
        The password.

    Raises
    ------
    TypeError
        If the value is not a ``str``.
    """
    if not isinstance(password, str):
        raise TypeError(
            f"password must be str, not {type(password).__name__}"
        )
    return password


def check_bytes(value: Any, what: str) -> bytes:
    """Ensure the value is a bytes-like object and copy it.

    ``bytes(16)`` or ``bytes([1, 2])`` would silently build a value out
    of an int or a list, so only real buffers are accepted.

    Parameters
    ----------
    value : Any
        The value to check.
    what : str
        The argument name, for the error message.

    Returns
    -------
    bytes
        An immutable copy of the value.

    Raises
    ------
    TypeError
        If the value is not ``bytes``, ``bytearray`` or ``memoryview``.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes, not {type(value).__name__}")
    return bytes(value)

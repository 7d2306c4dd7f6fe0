# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Canonical text form of a hash record.

Format: ``<algorithm>$<base64 salt>$<base64 digest>``

Standard base64 (with padding) never contains ``$``, so the three fields
are unambiguous. The string is taken as is: leading or trailing
whitespace is rejected, not stripped. Changing this layout breaks every
stored hash: this module is the only place where it is defined.
"""

import base64
import binascii
import logging
import re
from typing import Optional

from hsh.config import Settings
from hsh.errors import (
    DerivationError,
    HashStateError,
    InvalidEncodingError,
    MalformedFieldError,
)
from hsh.models import HashAlgorithm, HashRecord

LOG = logging.getLogger(__name__)

DELIMITER = "$"
FIELDS = ("algorithm", "salt", "digest")

_BASE64_RE = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


def _b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _b64decode(value: str, field: str) -> bytes:
    if not _BASE64_RE.match(value):
        raise InvalidEncodingError(field)
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, ValueError) as error:
        raise InvalidEncodingError(field) from error


def encode(record: HashRecord) -> str:
    """Encode a record.

    Parameters
    ----------
    record : HashRecord
        The record.

    Returns
    -------
    str
        The canonical string.

    Raises
    ------
    HashStateError
        If the record's digest was invalidated.
    """
    digest = record.digest
    if digest is None:
        raise HashStateError("Cannot encode a hash without a digest")
    return DELIMITER.join(
        (
            record.algorithm.token,
            _b64encode(record.salt),
            _b64encode(digest),
        )
    )


def display(record: HashRecord) -> str:
    """Render a record for display (the canonical string).

    Parameters
    ----------
    record : HashRecord
        The record.

    Returns
    -------
    str
        The canonical string.
    """
    return encode(record)


def decode(value: str, *, settings: Optional[Settings] = None) -> HashRecord:
    """Decode a canonical string.

    Nothing is derived: the result is an unverified record.

    Parameters
    ----------
    value : str
        The canonical string.
    settings : Optional[Settings], optional
        The cost parameters used when verifying the record later.

    Returns
    -------
    HashRecord
        The record.

    Raises
    ------
    MalformedFieldError
        If the string has surrounding whitespace, the field count is
        wrong, a field is empty, or the salt length does not fit the
        algorithm.
    UnknownAlgorithmError
        If the algorithm token is unknown.
    InvalidEncodingError
        If the salt or the digest is not valid base64.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, not {type(value).__name__}")
    if value != value.strip():
        raise MalformedFieldError("fields", "surrounding whitespace")
    parts = value.split(DELIMITER)
    if len(parts) != len(FIELDS):
        raise MalformedFieldError(
            "fields", f"expected {len(FIELDS)}, got {len(parts)}"
        )
    for field, part in zip(FIELDS, parts):
        if not part:
            raise MalformedFieldError(field, "empty")
    token, salt_b64, digest_b64 = parts
    algorithm = HashAlgorithm.parse(token)
    salt = _b64decode(salt_b64, "salt")
    digest = _b64decode(digest_b64, "digest")
    if not digest:
        raise MalformedFieldError("digest", "empty")
    try:
        record = HashRecord.from_digest(
            digest, salt, algorithm, settings=settings
        )
    except DerivationError as error:
        raise MalformedFieldError("salt", error.reason.value) from error
    LOG.debug("Decoded %s hash", algorithm)
    return record


__all__ = ["encode", "decode", "display", "DELIMITER"]

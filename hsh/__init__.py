# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Password hashing records over Argon2i, bcrypt and scrypt."""

from ._version import __version__
from .codec import decode, display, encode
from .config import Settings, SettingsManager
from .errors import (
    BuilderError,
    BuilderErrorReason,
    DerivationError,
    DerivationReason,
    HashStateError,
    HshError,
    InvalidEncodingError,
    MalformedFieldError,
    MissingPasswordError,
    ParseError,
    ParseErrorKind,
    SaltGenerationError,
    UnknownAlgorithmError,
    VerificationError,
)
from .hashing import Provider, get_provider
from .models import BuilderState, HashAlgorithm, HashBuilder, HashRecord
from .salt import generate_salt
from .schemas import HashSchema

__all__ = [
    "__version__",
    "BuilderError",
    "BuilderErrorReason",
    "BuilderState",
    "DerivationError",
    "DerivationReason",
    "HashAlgorithm",
    "HashBuilder",
    "HashRecord",
    "HashSchema",
    "HashStateError",
    "HshError",
    "InvalidEncodingError",
    "MalformedFieldError",
    "MissingPasswordError",
    "ParseError",
    "ParseErrorKind",
    "Provider",
    "SaltGenerationError",
    "Settings",
    "SettingsManager",
    "UnknownAlgorithmError",
    "VerificationError",
    "decode",
    "display",
    "encode",
    "generate_salt",
    "get_provider",
]

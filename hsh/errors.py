# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Error types.

No error message ever includes a password or digest bytes.
"""

import enum
from typing import Optional


class HshError(Exception):
    """Base class for all hsh errors."""


class DerivationReason(enum.Enum):
    """Why a derivation failed."""

    SALT_TOO_SHORT = "salt_too_short"
    SALT_TOO_LONG = "salt_too_long"
    INVALID_COST = "invalid_cost"
    PRIMITIVE_FAILURE = "primitive_failure"


class DerivationError(HshError, ValueError):
    """A digest could not be derived."""

    def __init__(
        self,
        reason: DerivationReason,
        algorithm: str,
        detail: str = "",
    ) -> None:
        """Initialize the error.

        Parameters
        ----------
        reason : DerivationReason
            The failure category.
        algorithm : str
            The algorithm token.
        detail : str, optional
            Extra, non secret, information.
        """
        self.reason = reason
        self.algorithm = algorithm
        self.detail = detail
        message = f"{algorithm}: {reason.value}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class VerificationError(HshError, ValueError):
    """The stored salt or digest has the wrong shape."""

    def __init__(self, algorithm: str, detail: str = "") -> None:
        """Initialize the error.

        Parameters
        ----------
        algorithm : str
            The algorithm token.
        detail : str, optional
            Extra, non secret, information.
        """
        self.algorithm = algorithm
        self.detail = detail
        message = f"{algorithm}: malformed hash"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class BuilderErrorReason(enum.Enum):
    """Why a build failed."""

    MISSING_PASSWORD = "missing_password"
    CONSUMED = "consumed"


class BuilderError(HshError):
    """The builder could not produce a record."""

    def __init__(self, reason: BuilderErrorReason) -> None:
        """Initialize the error.

        Parameters
        ----------
        reason : BuilderErrorReason
            The failure category.
        """
        self.reason = reason
        super().__init__(f"Cannot build hash: {reason.value}")


class MissingPasswordError(BuilderError):
    """``build()`` was called before a password was set."""

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__(BuilderErrorReason.MISSING_PASSWORD)


class ParseErrorKind(enum.Enum):
    """Why an encoded hash could not be parsed."""

    MALFORMED_FIELD = "malformed_field"
    UNKNOWN_ALGORITHM = "unknown_algorithm"
    INVALID_ENCODING = "invalid_encoding"


class ParseError(HshError, ValueError):
    """An encoded hash could not be parsed."""

    def __init__(
        self,
        kind: ParseErrorKind,
        field: Optional[str] = None,
        detail: str = "",
    ) -> None:
        """Initialize the error.

        Parameters
        ----------
        kind : ParseErrorKind
            The failure category.
        field : Optional[str], optional
            The offending field, if any.
        detail : str, optional
            Extra, non secret, information.
        """
        self.kind = kind
        self.field = field
        self.detail = detail
        message = f"Cannot parse hash: {kind.value}"
        if field:
            message += f" [{field}]"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MalformedFieldError(ParseError):
    """Wrong number of fields, or an empty/invalid field."""

    def __init__(self, field: str, detail: str = "") -> None:
        """Initialize the error.

        Parameters
        ----------
        field : str
            The offending field.
        detail : str, optional
            Extra, non secret, information.
        """
        super().__init__(ParseErrorKind.MALFORMED_FIELD, field, detail)


class UnknownAlgorithmError(ParseError):
    """The algorithm token is not one of the known tags."""

    def __init__(self, token: str) -> None:
        """Initialize the error.

        Parameters
        ----------
        token : str
            The unknown token.
        """
        self.token = token
        super().__init__(
            ParseErrorKind.UNKNOWN_ALGORITHM,
            "algorithm",
            repr(token[:32]),
        )


class InvalidEncodingError(ParseError):
    """A field is not valid base64."""

    def __init__(self, field: str) -> None:
        """Initialize the error.

        Parameters
        ----------
        field : str
            The offending field.
        """
        super().__init__(ParseErrorKind.INVALID_ENCODING, field)


class SaltGenerationError(HshError):
    """The secure random source failed."""


class HashStateError(HshError, ValueError):
    """The record has no digest (it was invalidated)."""


__all__ = [
    "HshError",
    "DerivationReason",
    "DerivationError",
    "VerificationError",
    "BuilderErrorReason",
    "BuilderError",
    "MissingPasswordError",
    "ParseErrorKind",
    "ParseError",
    "MalformedFieldError",
    "UnknownAlgorithmError",
    "InvalidEncodingError",
    "SaltGenerationError",
    "HashStateError",
]

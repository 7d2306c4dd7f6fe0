# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hash algorithm selector."""

from enum import Enum
from typing import Optional

from hsh.config import Settings, SettingsManager
from hsh.errors import UnknownAlgorithmError


class HashAlgorithm(str, Enum):
    """The supported password hashing schemes."""

    ARGON2I = "argon2i"
    BCRYPT = "bcrypt"
    SCRYPT = "scrypt"

    def __str__(self) -> str:
        """Render the canonical token.

        Returns
        -------
        str
            The token
        """
        return self.value

    @property
    def token(self) -> str:
        """The canonical token used in encoded hashes."""
        return self.value

    @classmethod
    def parse(cls, token: str) -> "HashAlgorithm":
        """Get the algorithm for a canonical token.

        Parameters
        ----------
        token : str
            The token (exact match)

        Returns
        -------
        HashAlgorithm
            The algorithm

        Raises
        ------
        UnknownAlgorithmError
            If the token is not one of the known tags
        """
        for member in cls:
            if member.value == token:
                return member
        raise UnknownAlgorithmError(token)

    @classmethod
    def default(cls, settings: Optional[Settings] = None) -> "HashAlgorithm":
        """Get the configured default algorithm.

        Parameters
        ----------
        settings : Optional[Settings], optional
            The settings to use, by default the process-wide ones

        Returns
        -------
        HashAlgorithm
            The default algorithm
        """
        if settings is None:
            settings = SettingsManager.get_settings()
        return cls.parse(settings.default_algorithm)


__all__ = ["HashAlgorithm"]

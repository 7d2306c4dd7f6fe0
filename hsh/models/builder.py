# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Staged construction of hash records."""

import enum
import logging
from typing import Optional

from hsh.config import Settings, SettingsManager
from hsh.errors import BuilderError, BuilderErrorReason, MissingPasswordError

from ._checks import check_bytes, check_password
from .hash import AlgorithmLike, HashRecord, to_algorithm
from .hash_algorithm import HashAlgorithm

LOG = logging.getLogger(__name__)


class BuilderState(enum.Enum):
    """Builder state."""

    EMPTY = "EMPTY"
    PASSWORD_SET = "PASSWORD_SET"
    READY = "READY"
    CONSUMED = "CONSUMED"


class HashBuilder:
    """Collect a password (and optionally a salt), then ``build()`` once.

    Examples
    --------
    >>> record = HashBuilder(HashAlgorithm.SCRYPT).with_password("pw").build()
    """

    def __init__(
        self,
        algorithm: Optional[AlgorithmLike] = None,
        *,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        algorithm : Optional[AlgorithmLike], optional
            The algorithm, by default the configured default.
        settings : Optional[Settings], optional
            The cost parameters, by default the process-wide settings.
        """
        self._settings = (
            settings if settings is not None else SettingsManager.get_settings()
        )
        self._algorithm = (
            to_algorithm(algorithm)
            if algorithm is not None
            else HashAlgorithm.default(self._settings)
        )
        self._password: Optional[str] = None
        self._salt: Optional[bytes] = None
        self._state = BuilderState.EMPTY

    @property
    def state(self) -> BuilderState:
        """The current state."""
        return self._state

    @property
    def algorithm(self) -> HashAlgorithm:
        """The target algorithm."""
        return self._algorithm

    def _ensure_open(self) -> None:
        if self._state is BuilderState.CONSUMED:
            raise BuilderError(BuilderErrorReason.CONSUMED)

    def _update_state(self) -> None:
        if self._password is None:
            self._state = BuilderState.EMPTY
        elif self._salt is None:
            self._state = BuilderState.PASSWORD_SET
        else:
            self._state = BuilderState.READY

    def with_password(self, password: str) -> "HashBuilder":
        """Set the password.

        Parameters
        ----------
        password : str
            The plain password.

        Returns
        -------
        HashBuilder
            The builder.
        """
        self._ensure_open()
        self._password = check_password(password)
        self._update_state()
        return self

    def with_salt(self, salt: bytes) -> "HashBuilder":
        """Set the salt instead of generating one.

        Parameters
        ----------
        salt : bytes
            The salt, checked on ``build()``.

        Returns
        -------
        HashBuilder
            The builder.
        """
        self._ensure_open()
        self._salt = check_bytes(salt, "salt")
        self._update_state()
        return self

    def with_algorithm(self, algorithm: AlgorithmLike) -> "HashBuilder":
        """Change the target algorithm.

        Parameters
        ----------
        algorithm : AlgorithmLike
            The algorithm.

        Returns
        -------
        HashBuilder
            The builder.
        """
        self._ensure_open()
        self._algorithm = to_algorithm(algorithm)
        return self

    def build(self) -> HashRecord:
        """Build the record, deriving its digest.

        The builder is consumed by this call, whatever the outcome.

        Returns
        -------
        HashRecord
            The record.

        Raises
        ------
        MissingPasswordError
            If no password was set.
        BuilderError
            If the builder was already used.
        """
        self._ensure_open()
        password, salt = self._password, self._salt
        self._password = None
        self._salt = None
        try:
            if password is None:
                raise MissingPasswordError()
            if salt is None:
                salt = HashRecord.generate_salt(
                    self._algorithm, self._settings
                )
                LOG.debug(
                    "Generated a %d byte %s salt", len(salt), self._algorithm
                )
            self._state = BuilderState.READY
            return HashRecord(
                password, salt, self._algorithm, settings=self._settings
            )
        finally:
            self._state = BuilderState.CONSUMED


__all__ = ["BuilderState", "HashBuilder"]

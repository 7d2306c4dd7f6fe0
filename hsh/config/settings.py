# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing settings module."""

from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated, Self

from ._argon2 import (
    get_argon2i_hash_len,
    get_argon2i_memory_cost,
    get_argon2i_parallelism,
    get_argon2i_salt_len,
    get_argon2i_time_cost,
)
from ._bcrypt import get_bcrypt_cost
from ._common import DOT_ENV_PATH, ENV_PREFIX, get_default_algorithm
from ._scrypt import (
    get_scrypt_dklen,
    get_scrypt_n,
    get_scrypt_p,
    get_scrypt_r,
    get_scrypt_salt_len,
)

AlgorithmType = Literal["argon2i", "bcrypt", "scrypt"]
"""Possible algorithm tokens."""


class Settings(BaseSettings):
    """Default cost parameters, read-only once loaded."""

    default_algorithm: AlgorithmType = get_default_algorithm()  # type: ignore
    # Argon2i
    argon2i_time_cost: Annotated[int, Field(ge=1, le=1024)] = (
        get_argon2i_time_cost()
    )
    argon2i_memory_cost: Annotated[int, Field(ge=8, le=4194304)] = (
        get_argon2i_memory_cost()
    )
    argon2i_parallelism: Annotated[int, Field(ge=1, le=255)] = (
        get_argon2i_parallelism()
    )
    argon2i_hash_len: Annotated[int, Field(ge=16, le=1024)] = (
        get_argon2i_hash_len()
    )
    argon2i_salt_len: Annotated[int, Field(ge=16, le=1024)] = (
        get_argon2i_salt_len()
    )
    # Bcrypt
    bcrypt_cost: Annotated[int, Field(ge=4, le=31)] = get_bcrypt_cost()
    # Scrypt
    scrypt_n: Annotated[int, Field(ge=2)] = get_scrypt_n()
    scrypt_r: Annotated[int, Field(ge=1, le=1024)] = get_scrypt_r()
    scrypt_p: Annotated[int, Field(ge=1, le=1024)] = get_scrypt_p()
    scrypt_dklen: Annotated[int, Field(ge=16, le=1024)] = get_scrypt_dklen()
    scrypt_salt_len: Annotated[int, Field(ge=16, le=1024)] = (
        get_scrypt_salt_len()
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=False)
        return cls()

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, value: Any) -> Any:
        """Lower-case the algorithm token.

        Parameters
        ----------
        value : Any
            The value

        Returns
        -------
        Any
            The normalized value
        """
        if not isinstance(value, str):
            return value  # pragma: no cover
        return value.lower()

    @field_validator("scrypt_n")
    @classmethod
    def validate_scrypt_n(cls, value: int) -> int:
        """Check that the scrypt cost is a power of two.

        Parameters
        ----------
        value : int
            The value

        Returns
        -------
        int
            The value

        Raises
        ------
        ValueError
            If the value is not a power of two
        """
        if value & (value - 1):
            raise ValueError("scrypt_n must be a power of two")
        return value

    @model_validator(mode="after")
    def validate_argon2i_memory(self) -> Self:
        """Check the Argon2i memory against its lanes.

        Returns
        -------
        Settings
            The settings instance after validation

        Raises
        ------
        ValueError
            If the memory cost is too small
        """
        if self.argon2i_memory_cost < 8 * self.argon2i_parallelism:
            raise ValueError(
                "argon2i_memory_cost must be at least 8 * argon2i_parallelism"
            )
        return self

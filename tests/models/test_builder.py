# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use

"""Test hsh.models.builder.*."""

import pytest

from hsh.config import Settings
from hsh.errors import (
    BuilderError,
    BuilderErrorReason,
    DerivationError,
    MissingPasswordError,
)
from hsh.models import BuilderState, HashAlgorithm, HashBuilder, HashRecord

PASSWORD = "test_password_123"  # nosemgrep # nosec


class TestHashBuilder:
    """Test the staged record construction."""

    def test_states(self) -> None:
        """Test the state after each step."""
        builder = HashBuilder()
        assert builder.state is BuilderState.EMPTY
        assert builder.algorithm is HashAlgorithm.ARGON2I
        builder.with_password(PASSWORD)
        assert builder.state is BuilderState.PASSWORD_SET
        builder.with_salt(bytes(16))
        assert builder.state is BuilderState.READY
        builder.build()
        assert builder.state is BuilderState.CONSUMED

    def test_salt_before_password(self) -> None:
        """Test that a salt alone does not make the builder ready."""
        builder = HashBuilder().with_salt(bytes(16))
        assert builder.state is BuilderState.EMPTY
        builder.with_password(PASSWORD)
        assert builder.state is BuilderState.READY

    def test_build_with_salt(self) -> None:
        """Test that an explicit salt is used as is."""
        record = (
            HashBuilder(HashAlgorithm.BCRYPT)
            .with_password(PASSWORD)
            .with_salt(bytes(range(16)))
            .build()
        )
        assert record == HashRecord(PASSWORD, bytes(range(16)), "bcrypt")
        assert record.is_verified

    @pytest.mark.parametrize(
        "algorithm,salt_len",
        [
            (HashAlgorithm.ARGON2I, 16),
            (HashAlgorithm.BCRYPT, 16),
            (HashAlgorithm.SCRYPT, 32),
        ],
    )
    def test_generated_salts(
        self, algorithm: HashAlgorithm, salt_len: int
    ) -> None:
        """Test that each build gets a fresh salt of the right length."""
        salts = set()
        for _ in range(5):
            record = HashBuilder(algorithm).with_password(PASSWORD).build()
            assert len(record.salt) == salt_len
            assert record.verify(PASSWORD)
            salts.add(record.salt)
        assert len(salts) == 5

    def test_with_algorithm(self) -> None:
        """Test changing the algorithm before building."""
        record = (
            HashBuilder()
            .with_algorithm("scrypt")
            .with_password(PASSWORD)
            .build()
        )
        assert record.algorithm is HashAlgorithm.SCRYPT

    def test_default_algorithm_from_settings(self, settings: Settings) -> None:
        """Test that the configured default is used."""
        custom = settings.model_copy(update={"default_algorithm": "bcrypt"})
        builder = HashBuilder(settings=custom)
        assert builder.algorithm is HashAlgorithm.BCRYPT

    def test_missing_password(self) -> None:
        """Test building without a password."""
        builder = HashBuilder().with_salt(bytes(16))
        with pytest.raises(MissingPasswordError) as exc_info:
            builder.build()
        assert isinstance(exc_info.value, BuilderError)
        assert exc_info.value.reason is BuilderErrorReason.MISSING_PASSWORD

    def test_single_use(self) -> None:
        """Test that a builder cannot be used twice."""
        builder = HashBuilder().with_password(PASSWORD)
        builder.build()
        with pytest.raises(BuilderError) as exc_info:
            builder.build()
        assert exc_info.value.reason is BuilderErrorReason.CONSUMED
        with pytest.raises(BuilderError):
            builder.with_password(PASSWORD)

    def test_consumed_after_failure(self) -> None:
        """Test that a failed build still consumes the builder."""
        builder = HashBuilder().with_password(PASSWORD).with_salt(bytes(4))
        with pytest.raises(DerivationError):
            builder.build()
        assert builder.state is BuilderState.CONSUMED
        with pytest.raises(BuilderError):
            builder.build()

    def test_password_type(self) -> None:
        """Test that the password must be text."""
        with pytest.raises(TypeError):
            HashBuilder().with_password(b"bytes")  # type: ignore[arg-type]

    @pytest.mark.parametrize("salt", [16, [1, 2], "0011"])
    def test_salt_type(self, salt: object) -> None:
        """Test that the salt must be a bytes-like object."""
        builder = HashBuilder().with_password(PASSWORD)
        with pytest.raises(TypeError):
            builder.with_salt(salt)  # type: ignore[arg-type]
        assert builder.state is BuilderState.PASSWORD_SET

    def test_salt_buffer_is_copied(self) -> None:
        """Test that a mutable salt buffer is copied."""
        salt = bytearray(range(16))
        builder = HashBuilder(HashAlgorithm.SCRYPT).with_password(PASSWORD)
        builder.with_salt(salt)
        salt[0] = 0xFF
        record = builder.build()
        assert record.salt == bytes(range(16))

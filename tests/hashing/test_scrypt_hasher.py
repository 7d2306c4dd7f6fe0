# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use

"""Tests for the scrypt provider."""

import hashlib
from unittest.mock import patch

import pytest

from hsh.errors import DerivationError, DerivationReason, VerificationError
from hsh.hashing import Provider, ScryptHasher

SALT = bytes(range(32))


@pytest.fixture(name="hasher")
def hasher_fixture() -> ScryptHasher:
    """Cheap scrypt hasher."""
    return ScryptHasher(n=1024)


class TestScryptHasher:
    """Test scrypt hasher implementation."""

    def test_is_a_provider(self, hasher: ScryptHasher) -> None:
        """Test that the hasher satisfies the provider protocol."""
        assert isinstance(hasher, Provider)
        assert hasher.name == "scrypt"
        assert hasher.min_salt_len == 16
        assert hasher.salt_len == 32

    def test_defaults(self) -> None:
        """Test the default cost parameters."""
        hasher = ScryptHasher()
        assert (hasher.n, hasher.r, hasher.p, hasher.dklen) == (
            16384,
            8,
            1,
            64,
        )

    def test_matches_hashlib(self, hasher: ScryptHasher) -> None:
        """Test that the digest is the plain scrypt output."""
        password = b"test_password_123"  # nosemgrep # nosec
        expected = hashlib.scrypt(
            password, salt=SALT, n=1024, r=8, p=1, dklen=64
        )
        assert hasher.derive(password, SALT) == expected

    def test_verify(self, hasher: ScryptHasher) -> None:
        """Test verifying right and wrong passwords."""
        password = b"test_password_123"  # nosemgrep # nosec
        digest = hasher.derive(password, SALT)
        assert hasher.verify(password, SALT, digest)
        assert not hasher.verify(b"wrong_password", SALT, digest)

    def test_verify_other_dklen(self, hasher: ScryptHasher) -> None:
        """Test that digests of another length still verify."""
        password = b"test_password_123"  # nosemgrep # nosec
        digest = ScryptHasher(n=1024, dklen=32).derive(password, SALT)
        assert hasher.verify(password, SALT, digest)

    def test_sixteen_byte_salt(self, hasher: ScryptHasher) -> None:
        """Test that the minimum salt length is accepted."""
        assert len(hasher.derive(b"password", bytes(16))) == 64

    def test_short_salt(self, hasher: ScryptHasher) -> None:
        """Test that a short salt is rejected."""
        with pytest.raises(DerivationError) as exc_info:
            hasher.derive(b"password", bytes(15))
        assert exc_info.value.reason is DerivationReason.SALT_TOO_SHORT

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n": 1000},
            {"n": 1},
            {"r": 0},
            {"p": 0},
            {"dklen": 0},
            {"dklen": 15},
        ],
    )
    def test_invalid_costs(self, kwargs: dict[str, int]) -> None:
        """Test that invalid cost parameters are rejected."""
        with pytest.raises(DerivationError) as exc_info:
            ScryptHasher(**kwargs).derive(b"password", SALT)
        assert exc_info.value.reason is DerivationReason.INVALID_COST

    def test_primitive_failure(self, hasher: ScryptHasher) -> None:
        """Test that library errors are wrapped."""
        with patch(
            "hsh.hashing._scrypt_hasher.hashlib.scrypt",
            side_effect=MemoryError(),
        ):
            with pytest.raises(DerivationError) as exc_info:
                hasher.derive(b"password", SALT)
        assert exc_info.value.reason is DerivationReason.PRIMITIVE_FAILURE

    def test_verify_malformed(self, hasher: ScryptHasher) -> None:
        """Test that malformed stored values raise."""
        with pytest.raises(VerificationError):
            hasher.verify(b"password", bytes(8), bytes(64))
        with pytest.raises(VerificationError):
            hasher.verify(b"password", SALT, b"")

    @pytest.mark.parametrize("length", [1, 8, 15])
    def test_verify_truncated_digest(
        self, hasher: ScryptHasher, length: int
    ) -> None:
        """Test that digests under 16 bytes are refused."""
        digest = hasher.derive(b"password", SALT)
        with pytest.raises(VerificationError):
            hasher.verify(b"wrong_password", SALT, digest[:length])

    def test_verify_shortest_digest(self, hasher: ScryptHasher) -> None:
        """Test that a 16 byte digest still verifies."""
        digest = hasher.derive(b"password", SALT)
        assert hasher.verify(b"password", SALT, digest[:16])
        assert not hasher.verify(b"wrong_password", SALT, digest[:16])

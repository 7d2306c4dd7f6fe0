# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=import-outside-toplevel,protected-access
"""The hash record: a password, its salt, and the derived digest."""

import functools
import hmac
import logging
from typing import Optional, Tuple, Union

from hsh.config import Settings, SettingsManager
from hsh.errors import VerificationError
from hsh.hashing import Provider, get_provider
from hsh.salt import generate_salt

from ._checks import check_bytes, check_password
from .hash_algorithm import HashAlgorithm

LOG = logging.getLogger(__name__)

AlgorithmLike = Union[HashAlgorithm, str]


def to_algorithm(value: AlgorithmLike) -> HashAlgorithm:
    """Coerce a tag or a token to a ``HashAlgorithm``.

    Parameters
    ----------
    value : AlgorithmLike
        The algorithm or its token

    Returns
    -------
    HashAlgorithm
        The algorithm
    """
    if isinstance(value, HashAlgorithm):
        return value
    return HashAlgorithm.parse(value)


@functools.total_ordering
class HashRecord:
    """A password hash record.

    Holds the plain password (while known), the salt, the digest and the
    algorithm that produced it. Every change of password, salt or
    algorithm re-derives the digest, or drops it when the password is no
    longer known. A digest set from stored bytes (``from_digest``,
    ``set_digest``) is not trusted: ``is_verified`` is False for such
    records.

    Examples
    --------
    >>> record = HashRecord("correct horse battery staple", bytes(range(16)))
    >>> record.verify("correct horse battery staple")
    True
    >>> HashRecord.from_string(str(record)).digest == record.digest
    True
    """

    __hash__ = None  # type: ignore[assignment]

    _settings: Settings
    _algorithm: HashAlgorithm
    _provider: Provider
    _password: Optional[str]
    _salt: bytes
    _digest: Optional[bytes]
    _verified: bool

    def __init__(
        self,
        password: str,
        salt: bytes,
        algorithm: AlgorithmLike = HashAlgorithm.ARGON2I,
        *,
        settings: Optional[Settings] = None,
    ) -> None:
        """Create a record, deriving the digest right away.

        Parameters
        ----------
        password : str
            The plain password.
        salt : bytes
            The salt (length checked against the algorithm).
        algorithm : AlgorithmLike, optional
            The algorithm, by default Argon2i.
        settings : Optional[Settings], optional
            The cost parameters, by default the process-wide settings.

        Raises
        ------
        DerivationError
            If the salt or the cost parameters are invalid,
            or the underlying primitive fails.
        TypeError
            If the password is not text or the salt is not bytes.
        """
        self._setup(algorithm, settings)
        password = check_password(password)
        salt = check_bytes(salt, "salt")
        self._digest = self._derive(password, salt)
        self._password = password
        self._salt = salt
        self._verified = True

    def _setup(
        self, algorithm: AlgorithmLike, settings: Optional[Settings]
    ) -> None:
        self._settings = (
            settings if settings is not None else SettingsManager.get_settings()
        )
        self._algorithm = to_algorithm(algorithm)
        self._provider = get_provider(self._algorithm, self._settings)

    @classmethod
    def from_digest(
        cls,
        digest: bytes,
        salt: bytes,
        algorithm: AlgorithmLike,
        *,
        password: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> "HashRecord":
        """Rebuild a record from stored bytes, without deriving anything.

        The returned record is not verified: the digest is trusted only
        through ``verify``.

        Parameters
        ----------
        digest : bytes
            The stored digest.
        salt : bytes
            The stored salt.
        algorithm : AlgorithmLike
            The algorithm that produced the digest.
        password : Optional[str], optional
            The plain password, if known.
        settings : Optional[Settings], optional
            The cost parameters, by default the process-wide settings.

        Returns
        -------
        HashRecord
            The unverified record.

        Raises
        ------
        DerivationError
            If the salt length is invalid for the algorithm.
        """
        record = cls.__new__(cls)
        record._setup(algorithm, settings)
        salt = check_bytes(salt, "salt")
        record._provider.check_salt(salt)
        record._password = (
            check_password(password) if password is not None else None
        )
        record._salt = salt
        record._digest = check_bytes(digest, "digest")
        record._verified = False
        return record

    @classmethod
    def _new(
        cls,
        algorithm: HashAlgorithm,
        password: str,
        salt: Optional[bytes],
        settings: Optional[Settings],
    ) -> "HashRecord":
        if salt is None:
            salt = cls.generate_salt(algorithm, settings)
        return cls(password, salt, algorithm, settings=settings)

    @classmethod
    def new_argon2i(
        cls,
        password: str,
        salt: Optional[bytes] = None,
        settings: Optional[Settings] = None,
    ) -> "HashRecord":
        """Create an Argon2i record, generating the salt if needed.

        Parameters
        ----------
        password : str
            The plain password.
        salt : Optional[bytes], optional
            The salt, by default a fresh random one.
        settings : Optional[Settings], optional
            The cost parameters.

        Returns
        -------
        HashRecord
            The record.
        """
        return cls._new(HashAlgorithm.ARGON2I, password, salt, settings)

    @classmethod
    def new_bcrypt(
        cls,
        password: str,
        salt: Optional[bytes] = None,
        settings: Optional[Settings] = None,
    ) -> "HashRecord":
        """Create a bcrypt record, generating the salt if needed.

        Bcrypt truncates the UTF-8 encoded password to 72 bytes: any
        password sharing those first 72 bytes verifies against the
        record. Use Argon2i or scrypt for longer passphrases.

        Parameters
        ----------
        password : str
            The plain password, only its first 72 UTF-8 bytes count.
        salt : Optional[bytes], optional
            The 16 byte salt, by default a fresh random one.
        settings : Optional[Settings], optional
            The cost parameters.

        Returns
        -------
        HashRecord
            The record.
        """
        return cls._new(HashAlgorithm.BCRYPT, password, salt, settings)

    @classmethod
    def new_scrypt(
        cls,
        password: str,
        salt: Optional[bytes] = None,
        settings: Optional[Settings] = None,
    ) -> "HashRecord":
        """Create a scrypt record, generating the salt if needed.

        Parameters
        ----------
        password : str
            The plain password.
        salt : Optional[bytes], optional
            The salt, by default a fresh random one.
        settings : Optional[Settings], optional
            The cost parameters.

        Returns
        -------
        HashRecord
            The record.
        """
        return cls._new(HashAlgorithm.SCRYPT, password, salt, settings)

    @staticmethod
    def generate_salt(
        algorithm: AlgorithmLike,
        settings: Optional[Settings] = None,
    ) -> bytes:
        """Generate a random salt of the algorithm's length.

        Parameters
        ----------
        algorithm : AlgorithmLike
            The algorithm.
        settings : Optional[Settings], optional
            The settings holding the salt lengths.

        Returns
        -------
        bytes
            The salt.
        """
        provider = get_provider(to_algorithm(algorithm), settings)
        return generate_salt(provider.salt_len)

    def _derive(self, password: str, salt: bytes) -> bytes:
        digest = self._provider.derive(password.encode("utf-8"), salt)
        LOG.debug(
            "Derived %s digest (%d bytes)", self._algorithm, len(digest)
        )
        return digest

    # accessors

    @property
    def algorithm(self) -> HashAlgorithm:
        """The active algorithm."""
        return self._algorithm

    @property
    def password(self) -> Optional[str]:
        """The plain password, None if unknown or cleared."""
        return self._password

    @property
    def salt(self) -> bytes:
        """The salt."""
        return self._salt

    @property
    def digest(self) -> Optional[bytes]:
        """The digest, None if it was invalidated."""
        return self._digest

    @property
    def password_length(self) -> int:
        """The password length in characters (0 if unknown)."""
        return len(self._password) if self._password is not None else 0

    @property
    def digest_length(self) -> int:
        """The digest length in bytes (0 if there is none)."""
        return len(self._digest) if self._digest is not None else 0

    @property
    def is_verified(self) -> bool:
        """Whether the digest was derived here rather than loaded."""
        return self._verified

    # mutation

    def set_password(self, password: str) -> None:
        """Replace the password and re-derive the digest.

        Parameters
        ----------
        password : str
            The new plain password.
        """
        password = check_password(password)
        digest = self._derive(password, self._salt)
        self._password = password
        self._digest = digest
        self._verified = True

    def set_salt(self, salt: bytes) -> None:
        """Replace the salt and re-derive the digest.

        If the password is not known the digest is dropped instead.

        Parameters
        ----------
        salt : bytes
            The new salt.
        """
        salt = check_bytes(salt, "salt")
        self._provider.check_salt(salt)
        if self._password is None:
            LOG.debug("Salt changed without a password, dropping the digest")
            self._salt = salt
            self._digest = None
            self._verified = False
            return
        digest = self._derive(self._password, salt)
        self._salt = salt
        self._digest = digest
        self._verified = True

    def set_algorithm(self, algorithm: AlgorithmLike) -> None:
        """Switch algorithm and re-derive the digest.

        If the password is not known the digest is dropped instead.

        Parameters
        ----------
        algorithm : AlgorithmLike
            The new algorithm.
        """
        algorithm = to_algorithm(algorithm)
        if algorithm == self._algorithm:
            return
        provider = get_provider(algorithm, self._settings)
        provider.check_salt(self._salt)
        if self._password is None:
            digest = None
        else:
            digest = provider.derive(
                self._password.encode("utf-8"), self._salt
            )
        self._algorithm = algorithm
        self._provider = provider
        self._digest = digest
        self._verified = digest is not None

    def set_digest(self, digest: bytes) -> None:
        """Override the digest without checking it.

        The record becomes unverified until ``verify`` is used on it.

        Parameters
        ----------
        digest : bytes
            The raw digest.
        """
        self._digest = check_bytes(digest, "digest")
        self._verified = False

    def clear_password(self) -> None:
        """Forget the plain password, keeping salt and digest."""
        self._password = None

    # verification

    def verify(self, password: str) -> bool:
        """Check a candidate password against the stored salt and digest.

        Parameters
        ----------
        password : str
            The candidate password.

        Returns
        -------
        bool
            True if it matches.

        Raises
        ------
        VerificationError
            If there is no digest, or the salt or digest is malformed.
        """
        password = check_password(password)
        if self._digest is None:
            raise VerificationError(self._algorithm.value, "no digest")
        return self._provider.verify(
            password.encode("utf-8"), self._salt, self._digest
        )

    # conversions

    def to_string(self) -> str:
        """Encode the record in its canonical text form.

        Returns
        -------
        str
            The encoded record.
        """
        from hsh.codec import encode

        return encode(self)

    @classmethod
    def from_string(
        cls, value: str, *, settings: Optional[Settings] = None
    ) -> "HashRecord":
        """Parse a canonical text form.

        Parameters
        ----------
        value : str
            The encoded record.
        settings : Optional[Settings], optional
            The cost parameters for later verification.

        Returns
        -------
        HashRecord
            The unverified record.
        """
        from hsh.codec import decode

        return decode(value, settings=settings)

    def to_json(self, include_password: bool = False) -> str:
        """Serialize to JSON.

        Parameters
        ----------
        include_password : bool, optional
            Also dump the plain password (test fixtures only).

        Returns
        -------
        str
            The JSON document.
        """
        from hsh.schemas import HashSchema

        return HashSchema.from_record(
            self, include_password=include_password
        ).model_dump_json(exclude_none=True)

    @classmethod
    def from_json(
        cls, value: str, *, settings: Optional[Settings] = None
    ) -> "HashRecord":
        """Load a record from JSON.

        Parameters
        ----------
        value : str
            The JSON document.
        settings : Optional[Settings], optional
            The cost parameters for later verification.

        Returns
        -------
        HashRecord
            The unverified record.
        """
        from hsh.schemas import HashSchema

        return HashSchema.parse_json(value).to_record(settings=settings)

    # comparison

    def _sort_key(self) -> Tuple[str, bytes, bytes]:
        return (self._algorithm.value, self._salt, self._digest or b"")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashRecord):
            return NotImplemented
        if self._algorithm != other._algorithm or self._salt != other._salt:
            return False
        if (self._digest is None) != (other._digest is None):
            return False
        return hmac.compare_digest(self._digest or b"", other._digest or b"")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HashRecord):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        return (
            f"HashRecord(algorithm={self._algorithm.value!r}, "
            f"salt_length={len(self._salt)}, "
            f"digest_length={self.digest_length}, "
            f"verified={self._verified})"
        )

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["HashRecord", "AlgorithmLike", "to_algorithm"]

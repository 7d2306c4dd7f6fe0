# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Structured (dict/JSON) form of a hash record."""

import base64
import binascii
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    SecretStr,
    ValidationError,
    field_serializer,
    field_validator,
)

from hsh.config import Settings
from hsh.errors import (
    DerivationError,
    HashStateError,
    MalformedFieldError,
)
from hsh.models import HashAlgorithm, HashRecord


class HashSchema(BaseModel):
    """Hash record schema.

    The plain password is left out unless explicitly requested.
    """

    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    salt: bytes
    digest: bytes
    password: Optional[SecretStr] = None

    @field_validator("salt", "digest", mode="before")
    @classmethod
    def decode_base64(cls, value: Any) -> Any:
        """Accept base64 text for the byte fields.

        Parameters
        ----------
        value : Any
            The raw value.

        Returns
        -------
        Any
            Bytes for text input, the value otherwise.

        Raises
        ------
        ValueError
            If the text is not valid base64.
        """
        if isinstance(value, str):
            try:
                return base64.b64decode(value.encode("ascii"), validate=True)
            except (binascii.Error, ValueError) as error:
                raise ValueError("invalid base64") from error
        return value

    @field_serializer("salt", "digest")
    def encode_base64(self, value: bytes) -> str:
        """Dump the byte fields as base64 text.

        Parameters
        ----------
        value : bytes
            The bytes.

        Returns
        -------
        str
            The base64 text.
        """
        return base64.b64encode(value).decode("ascii")

    @field_serializer("password")
    def dump_password(self, value: Optional[SecretStr]) -> Optional[str]:
        """Dump the password in clear (only present when requested).

        Parameters
        ----------
        value : Optional[SecretStr]
            The password.

        Returns
        -------
        Optional[str]
            The plain password, if any.
        """
        return value.get_secret_value() if value is not None else None

    @classmethod
    def from_record(
        cls,
        record: HashRecord,
        include_password: bool = False,
    ) -> "HashSchema":
        """Create the schema from a record.

        Parameters
        ----------
        record : HashRecord
            The record (it must have a digest).
        include_password : bool, optional
            Whether to keep the plain password (test fixtures only).

        Returns
        -------
        HashSchema
            The schema.

        Raises
        ------
        HashStateError
            If the record has no digest.
        """
        if record.digest is None:
            raise HashStateError("Cannot serialize a hash without a digest")
        password = None
        if include_password and record.password is not None:
            password = SecretStr(record.password)
        return cls(
            algorithm=record.algorithm,
            salt=record.salt,
            digest=record.digest,
            password=password,
        )

    @classmethod
    def parse_json(cls, value: str | bytes) -> "HashSchema":
        """Validate a JSON document.

        Parameters
        ----------
        value : str | bytes
            The JSON document.

        Returns
        -------
        HashSchema
            The schema.

        Raises
        ------
        MalformedFieldError
            If the document is not a valid hash record.
        """
        try:
            return cls.model_validate_json(value)
        except ValidationError as error:
            fields = sorted(
                {str(err["loc"][0]) for err in error.errors() if err["loc"]}
            )
            raise MalformedFieldError(
                ",".join(fields) or "document", "invalid JSON record"
            ) from None

    def to_record(self, settings: Optional[Settings] = None) -> HashRecord:
        """Rebuild the (unverified) record.

        Parameters
        ----------
        settings : Optional[Settings], optional
            The cost parameters used when verifying the record later.

        Returns
        -------
        HashRecord
            The record.

        Raises
        ------
        MalformedFieldError
            If the salt length does not fit the algorithm.
        """
        password = (
            self.password.get_secret_value()
            if self.password is not None
            else None
        )
        try:
            return HashRecord.from_digest(
                self.digest,
                self.salt,
                self.algorithm,
                password=password,
                settings=settings,
            )
        except DerivationError as error:
            raise MalformedFieldError("salt", error.reason.value) from error

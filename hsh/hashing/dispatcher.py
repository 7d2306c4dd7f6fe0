# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Select the provider for an algorithm tag."""

from typing import Callable, Dict, Optional

from hsh.config import Settings, SettingsManager
from hsh.errors import UnknownAlgorithmError

from ._argon_hasher import Argon2iHasher
from ._bcrypt_hasher import BcryptHasher
from ._scrypt_hasher import ScryptHasher
from .protocol import Provider


def _argon2i(settings: Settings) -> Provider:
    return Argon2iHasher(
        time_cost=settings.argon2i_time_cost,
        memory_cost=settings.argon2i_memory_cost,
        parallelism=settings.argon2i_parallelism,
        hash_len=settings.argon2i_hash_len,
        salt_len=settings.argon2i_salt_len,
    )


def _bcrypt(settings: Settings) -> Provider:
    return BcryptHasher(cost=settings.bcrypt_cost)


def _scrypt(settings: Settings) -> Provider:
    return ScryptHasher(
        n=settings.scrypt_n,
        r=settings.scrypt_r,
        p=settings.scrypt_p,
        dklen=settings.scrypt_dklen,
        salt_len=settings.scrypt_salt_len,
    )


_FACTORIES: Dict[str, Callable[[Settings], Provider]] = {
    "argon2i": _argon2i,
    "bcrypt": _bcrypt,
    "scrypt": _scrypt,
}


def get_provider(
    algorithm: str,
    settings: Optional[Settings] = None,
) -> Provider:
    """Build the provider for an algorithm.

    Providers are cheap immutable values, a new one is returned per call.

    Parameters
    ----------
    algorithm : str
        The algorithm token (a ``HashAlgorithm`` works too).
    settings : Optional[Settings], optional
        The cost parameters, by default the process-wide settings.

    Returns
    -------
    Provider
        The provider.

    Raises
    ------
    UnknownAlgorithmError
        If the algorithm is not supported.
    """
    factory = _FACTORIES.get(str(algorithm))
    if factory is None:
        raise UnknownAlgorithmError(str(algorithm))
    if settings is None:
        settings = SettingsManager.get_settings()
    return factory(settings)


__all__ = ["get_provider"]

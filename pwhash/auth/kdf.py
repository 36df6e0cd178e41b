"""Adapter around the argon2-cffi Argon2id primitive."""
from typing import Union

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from pwhash.auth.codec import ARGON2_VERSION
from pwhash.models.params import ParameterSet
from pwhash.utils.error_handling import KdfError


def to_bytes(password: Union[str, bytes]) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return password


def derive(password: Union[str, bytes], salt: bytes, params: ParameterSet) -> bytes:
    """
    Derive an Argon2id digest of ``params.digest_length`` bytes.

    Raises:
        KdfError: If argon2 rejects the inputs (e.g. salt shorter than 8 bytes)
    """
    try:
        return hash_secret_raw(
            secret=to_bytes(password),
            salt=salt,
            time_cost=params.iterations,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.digest_length,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
    except HashingError as exc:
        raise KdfError(str(exc), "parameters") from exc

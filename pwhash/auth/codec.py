"""
Argon2id hash string encoding.

This module converts between a (parameters, salt, digest) triple and the
PHC string layout shared with other Argon2 implementations:

    $argon2id$v=19$m=<memory_cost>,t=<iterations>,p=<parallelism>$<salt>$<digest>

Salt and digest are standard base64 without padding. Decoding walks the
fields in order and rejects anything that is not byte-for-byte canonical,
so every failure maps to one specific error.
"""
import base64
import binascii
import logging
from typing import Tuple, Union

from pydantic import ValidationError

from pwhash.models.params import ParameterSet
from pwhash.utils.error_handling import (
    HashError,
    IncompatibleVariantError,
    IncompatibleVersionError,
    MalformedHashError,
)
from pwhash.utils.logging_utils import log_extra

ARGON2_VARIANT = "argon2id"
ARGON2_VERSION = 19

_FIELD_COUNT = 6
_B64_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/")
_DIGITS = frozenset("0123456789")

logger = logging.getLogger(__name__)


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(segment: str, field: str) -> bytes:
    """Decode unpadded standard base64, rejecting non-canonical input."""
    if not segment:
        raise MalformedHashError("segment is empty", field)
    # A single trailing character cannot carry a whole byte
    if not set(segment) <= _B64_ALPHABET or len(segment) % 4 == 1:
        raise MalformedHashError("invalid base64", field)
    try:
        data = base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
    except binascii.Error as exc:
        raise MalformedHashError("invalid base64", field) from exc
    # Unused trailing bits must be zero
    if _b64encode(data) != segment:
        raise MalformedHashError("non-canonical base64", field)
    return data


def _parse_int(text: str, field: str) -> int:
    if not text or not set(text) <= _DIGITS or (len(text) > 1 and text[0] == "0"):
        raise MalformedHashError("expected a decimal integer", field)
    return int(text)


def _parse_assignment(text: str, key: str) -> int:
    """Parse ``<key>=<integer>``."""
    name, sep, value = text.partition("=")
    if not sep or name != key:
        raise MalformedHashError(f"expected '{key}=<integer>'", key)
    return _parse_int(value, key)


def encode_hash(params: ParameterSet, salt: bytes, digest: bytes) -> str:
    """
    Encode parameters, salt and digest as an Argon2id hash string.

    Args:
        params: Cost parameters used to derive the digest
        salt: Salt bytes, ``params.salt_length`` long
        digest: Digest bytes, ``params.digest_length`` long

    Returns:
        str: The encoded hash

    Raises:
        ValueError: If salt or digest is empty or disagrees with ``params``
    """
    if not salt:
        raise ValueError("Salt must not be empty.")
    if not digest:
        raise ValueError("Digest must not be empty.")
    if len(salt) != params.salt_length:
        raise ValueError(f"Salt is {len(salt)} bytes, parameters expect {params.salt_length}.")
    if len(digest) != params.digest_length:
        raise ValueError(f"Digest is {len(digest)} bytes, parameters expect {params.digest_length}.")

    return (
        f"${ARGON2_VARIANT}$v={ARGON2_VERSION}"
        f"$m={params.memory_cost},t={params.iterations},p={params.parallelism}"
        f"${_b64encode(salt)}${_b64encode(digest)}"
    )


def _decode(encoded: Union[str, bytes]) -> Tuple[ParameterSet, bytes, bytes]:
    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode("ascii")
        except UnicodeDecodeError as exc:
            raise MalformedHashError("hash is not ASCII") from exc

    fields = encoded.split("$")
    if len(fields) < 2 or fields[0] != "" or not fields[1]:
        raise MalformedHashError("missing algorithm identifier", "variant")
    if fields[1] != ARGON2_VARIANT:
        raise IncompatibleVariantError(f"unsupported variant '{fields[1]}'", "variant")
    if len(fields) != _FIELD_COUNT:
        raise MalformedHashError(f"expected {_FIELD_COUNT} '$'-separated fields, got {len(fields)}")

    version = _parse_assignment(fields[2], "v")
    if version != ARGON2_VERSION:
        raise IncompatibleVersionError(f"unsupported version {version}", "v")

    costs = fields[3].split(",")
    if len(costs) != 3:
        raise MalformedHashError("expected 'm=<integer>,t=<integer>,p=<integer>'", "parameters")
    memory_cost = _parse_assignment(costs[0], "m")
    iterations = _parse_assignment(costs[1], "t")
    parallelism = _parse_assignment(costs[2], "p")

    salt = _b64decode(fields[4], "salt")
    digest = _b64decode(fields[5], "digest")

    try:
        params = ParameterSet(
            memory_cost=memory_cost,
            iterations=iterations,
            parallelism=parallelism,
            salt_length=len(salt),
            digest_length=len(digest),
        )
    except ValidationError as exc:
        raise MalformedHashError("cost parameters out of range", "parameters") from exc

    return params, salt, digest


def decode_hash(encoded: Union[str, bytes]) -> Tuple[ParameterSet, bytes, bytes]:
    """
    Decode an Argon2id hash string.

    Salt and digest lengths of the returned ParameterSet are taken from the
    decoded bytes.

    Args:
        encoded: Hash string as produced by ``encode_hash``

    Returns:
        Tuple[ParameterSet, bytes, bytes]: Parameters, salt and digest

    Raises:
        IncompatibleVariantError: If the hash names another Argon2 variant
        IncompatibleVersionError: If the hash carries another Argon2 version
        MalformedHashError: If the hash does not follow the layout
    """
    try:
        return _decode(encoded)
    except HashError as exc:
        logger.warning(
            "Rejected encoded hash",
            extra=log_extra(error=type(exc).__name__, field=exc.field),
        )
        raise

"""Argon2id password hashing with PHC-format hash strings."""

from pwhash.auth.codec import ARGON2_VARIANT, ARGON2_VERSION, decode_hash, encode_hash
from pwhash.auth.hasher import create_hash, generate_salt, hash_with_salt
from pwhash.auth.kdf import derive
from pwhash.auth.verifier import check_hash, compare_password_and_hash
from pwhash.models.params import DEFAULT_PARAMETERS, ParameterSet
from pwhash.utils.error_handling import (
    ErrorSeverity,
    HashError,
    IncompatibleVariantError,
    IncompatibleVersionError,
    KdfError,
    MalformedHashError,
    RandomSourceError,
)
from pwhash.utils.password_utils import PasswordHasher

__version__ = "1.0.0"

__all__ = [
    # Hash string format
    "ARGON2_VARIANT",
    "ARGON2_VERSION",
    "encode_hash",
    "decode_hash",

    # Hashing and verification
    "create_hash",
    "generate_salt",
    "hash_with_salt",
    "derive",
    "check_hash",
    "compare_password_and_hash",
    "PasswordHasher",

    # Parameters
    "ParameterSet",
    "DEFAULT_PARAMETERS",

    # Errors
    "ErrorSeverity",
    "HashError",
    "MalformedHashError",
    "IncompatibleVariantError",
    "IncompatibleVersionError",
    "RandomSourceError",
    "KdfError",
]

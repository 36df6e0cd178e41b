"""
Argon2id hash verification.

The stored hash carries its own parameters and salt, so a candidate password
is re-derived with exactly those and compared in constant time.
"""
import hmac
import logging
from typing import Tuple, Union

from pwhash.auth.codec import decode_hash
from pwhash.auth.kdf import derive
from pwhash.models.params import ParameterSet
from pwhash.utils.logging_utils import log_extra

logger = logging.getLogger(__name__)


def check_hash(password: Union[str, bytes], encoded: Union[str, bytes]) -> Tuple[bool, ParameterSet]:
    """
    Verify a password against an encoded hash and return its parameters.

    The returned parameters let a caller spot hashes created with outdated
    costs. A wrong password yields ``False``; it is not an error.

    Args:
        password: Candidate password
        encoded: Stored hash string

    Returns:
        Tuple[bool, ParameterSet]: Whether the password matched, and the decoded parameters

    Raises:
        MalformedHashError, IncompatibleVariantError, IncompatibleVersionError:
            If the stored hash cannot be decoded
        KdfError: If argon2 rejects the decoded parameters
    """
    params, salt, digest = decode_hash(encoded)
    candidate = derive(password, salt, params)
    matched = hmac.compare_digest(candidate, digest)
    logger.debug("Verified Argon2id hash", extra=log_extra(matched=matched, **params.model_dump()))
    return matched, params


def compare_password_and_hash(password: Union[str, bytes], encoded: Union[str, bytes]) -> bool:
    """Verify a password against an encoded hash."""
    matched, _ = check_hash(password, encoded)
    return matched

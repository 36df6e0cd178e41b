"""
Argon2id hash creation.

Each call draws a fresh salt from the operating system CSPRNG, derives the
digest and returns the self-describing encoded hash.
"""
import logging
import os
from typing import Union

from pwhash.auth.codec import encode_hash
from pwhash.auth.kdf import derive
from pwhash.models.params import DEFAULT_PARAMETERS, ParameterSet
from pwhash.utils.error_handling import RandomSourceError
from pwhash.utils.logging_utils import log_extra

logger = logging.getLogger(__name__)


def generate_salt(length: int) -> bytes:
    """
    Read ``length`` bytes from the operating system random source.

    Raises:
        RandomSourceError: If the random source is unavailable
    """
    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        logger.critical("Secure random source failed", exc_info=True)
        raise RandomSourceError("secure random source failed", "salt") from exc


def hash_with_salt(password: Union[str, bytes], salt: bytes, params: ParameterSet) -> str:
    """Derive and encode a hash for a caller-supplied salt."""
    digest = derive(password, salt, params)
    return encode_hash(params, salt, digest)


def create_hash(password: Union[str, bytes], params: ParameterSet = DEFAULT_PARAMETERS) -> str:
    """
    Hash a password with Argon2id and a fresh random salt.

    Args:
        password: Password to hash; ``str`` is encoded as UTF-8
        params: Cost parameters (defaults to ``DEFAULT_PARAMETERS``)

    Returns:
        str: Encoded hash, e.g. ``$argon2id$v=19$m=65536,t=1,p=4$...$...``

    Raises:
        RandomSourceError: If no salt could be generated
        KdfError: If argon2 rejects the parameters
    """
    salt = generate_salt(params.salt_length)
    encoded = hash_with_salt(password, salt, params)
    logger.debug("Created Argon2id hash", extra=log_extra(**params.model_dump()))
    return encoded

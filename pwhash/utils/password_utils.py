"""
Password Hashing Facade using Argon2id

- Cost parameters taken from settings unless given explicitly
- Detects hashes created with outdated parameters
- No logging of sensitive data

Usage:
    from pwhash.utils.password_utils import PasswordHasher
    hasher = PasswordHasher()
    hash = hasher.hash_password('my_password')
    is_valid = hasher.verify_password(hash, 'my_password')
"""
from typing import Optional

from pwhash.auth.codec import decode_hash
from pwhash.auth.hasher import create_hash
from pwhash.auth.verifier import compare_password_and_hash
from pwhash.models.params import ParameterSet
from pwhash.utils.config import get_settings

class PasswordHasher:
    """
    Argon2id password hasher bound to one ParameterSet.
    - parameters: Cost parameters for new hashes (default: from settings)
    """
    def __init__(self, parameters: Optional[ParameterSet] = None):
        self.parameters = parameters or get_settings().parameters()

    def hash_password(self, password: str) -> str:
        """Hash a password using Argon2id."""
        if not isinstance(password, str) or not password:
            raise ValueError("Password must be a non-empty string.")
        return create_hash(password, self.parameters)

    def verify_password(self, hashed: str, password: str) -> bool:
        """Verify a password against a stored Argon2id hash. Returns True if valid."""
        return compare_password_and_hash(password, hashed)

    def needs_rehash(self, hashed: str) -> bool:
        """Check if the hash needs to be upgraded to the current parameters."""
        params, _, _ = decode_hash(hashed)
        return params != self.parameters

# Security note: Never log or print passwords or hashes in production code.

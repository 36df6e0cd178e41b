from enum import Enum
from typing import Optional

class ErrorSeverity(Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    CRITICAL = 'critical'

class HashError(Exception):
    """Base class for password hash errors."""
    severity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, field: Optional[str] = None, severity: Optional[ErrorSeverity] = None):
        self.message = message
        self.field = field
        if severity is not None:
            self.severity = severity
        super().__init__(f"{field + ': ' if field else ''}{message}")

class MalformedHashError(HashError):
    """The encoded hash does not match the expected layout."""

class IncompatibleVariantError(HashError):
    """The encoded hash names an Argon2 variant other than argon2id."""

class IncompatibleVersionError(HashError):
    """The encoded hash carries an unsupported Argon2 version."""

class RandomSourceError(HashError):
    """The operating system random source failed."""
    severity = ErrorSeverity.CRITICAL

class KdfError(HashError):
    """The Argon2id primitive rejected its input."""
    severity = ErrorSeverity.HIGH

"""
Handling guidance:
- MalformedHashError: stored record is corrupt, do not retry
- IncompatibleVariantError / IncompatibleVersionError: hash from another scheme, candidate for migration
- RandomSourceError / KdfError: fatal, surface to the caller without retrying
"""

"""Tests for the Argon2id key derivation adapter."""
import base64

import pytest

from pwhash.auth.kdf import derive, to_bytes
from pwhash.models.params import ParameterSet
from pwhash.utils.error_handling import ErrorSeverity, KdfError

SALT = base64.b64decode("UDk0zEuIzbt0x3bwkf8Bgw==")
DIGEST = base64.b64decode("ihSfHWUJpTgDvNWiojrgcN4E0pJdUVmqCEdRZesx9tE=")


def test_derive_known_vector(known_params):
    assert derive("bug", SALT, known_params) == DIGEST


def test_derive_is_deterministic(fast_params):
    salt = b"0123456789abcdef"
    assert derive("pa$$word", salt, fast_params) == derive("pa$$word", salt, fast_params)


def test_derive_length(fast_params):
    params = fast_params.model_copy(update={"digest_length": 48})
    assert len(derive("pa$$word", b"0123456789abcdef", params)) == 48


def test_str_and_utf8_bytes_agree(fast_params):
    salt = b"0123456789abcdef"
    assert derive("pässwörd", salt, fast_params) == derive("pässwörd".encode("utf-8"), salt, fast_params)
    assert to_bytes(b"raw") == b"raw"


def test_salt_too_short(fast_params):
    """argon2 requires at least 8 bytes of salt."""
    with pytest.raises(KdfError) as exc_info:
        derive("pa$$word", b"short", fast_params)
    assert exc_info.value.severity == ErrorSeverity.HIGH
    assert exc_info.value.__cause__ is not None


def test_memory_too_small_for_lanes():
    """argon2 requires at least 8 KiB per lane."""
    params = ParameterSet(memory_cost=8, iterations=1, parallelism=4, salt_length=16, digest_length=32)
    with pytest.raises(KdfError):
        derive("pa$$word", b"0123456789abcdef", params)

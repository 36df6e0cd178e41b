"""Test configuration and shared fixtures."""

import pytest

from pwhash.models.params import ParameterSet
from pwhash.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fast_params():
    """Cheap parameters so tests do not allocate 64 MiB per hash."""
    return ParameterSet(
        memory_cost=1024,
        iterations=1,
        parallelism=1,
        salt_length=16,
        digest_length=32
    )


@pytest.fixture
def known_params():
    """Parameters of the known "bug" vector."""
    return ParameterSet(
        memory_cost=65536,
        iterations=1,
        parallelism=2,
        salt_length=16,
        digest_length=32
    )

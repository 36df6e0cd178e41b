"""Tests for the Argon2id parameter model."""
from unittest import mock

import pytest
from pydantic import ValidationError

from pwhash.models.params import DEFAULT_PARAMETERS, ParameterSet, default_parallelism


class TestParameterSet:
    """Tests for ParameterSet."""

    def test_structural_equality(self):
        a = ParameterSet(memory_cost=1024, iterations=2, parallelism=1, salt_length=16, digest_length=32)
        b = ParameterSet(memory_cost=1024, iterations=2, parallelism=1, salt_length=16, digest_length=32)
        c = ParameterSet(memory_cost=1024, iterations=3, parallelism=1, salt_length=16, digest_length=32)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_immutable(self, fast_params):
        with pytest.raises(ValidationError):
            fast_params.memory_cost = 2048
        assert fast_params.memory_cost == 1024

    @pytest.mark.parametrize("field, value", [
        ("memory_cost", 0),
        ("iterations", 0),
        ("parallelism", 0),
        ("parallelism", 256),
        ("salt_length", 0),
        ("digest_length", 0),
        ("memory_cost", 2**32),
    ])
    def test_out_of_range(self, field, value):
        values = dict(memory_cost=1024, iterations=1, parallelism=1, salt_length=16, digest_length=32)
        values[field] = value
        with pytest.raises(ValidationError):
            ParameterSet(**values)

    @pytest.mark.parametrize("field, value", [
        ("memory_cost", "1024"),
        ("iterations", 1.0),
        ("parallelism", True),
    ])
    def test_no_type_coercion(self, field, value):
        """Cost fields only accept real integers."""
        values = dict(memory_cost=1024, iterations=1, parallelism=1, salt_length=16, digest_length=32)
        values[field] = value
        with pytest.raises(ValidationError):
            ParameterSet(**values)

    def test_defaults(self):
        assert DEFAULT_PARAMETERS.memory_cost == 65536
        assert DEFAULT_PARAMETERS.iterations == 1
        assert DEFAULT_PARAMETERS.salt_length == 16
        assert DEFAULT_PARAMETERS.digest_length == 32
        assert 1 <= DEFAULT_PARAMETERS.parallelism <= 255


@pytest.mark.parametrize("cpus, expected", [(None, 1), (1, 1), (8, 8), (512, 255)])
def test_default_parallelism(cpus, expected):
    with mock.patch("pwhash.models.params.os.cpu_count", return_value=cpus):
        assert default_parallelism() == expected

"""Pydantic models."""

from pwhash.models.params import (
    ParameterSet,
    DEFAULT_PARAMETERS,
    default_parallelism
)

__all__ = [
    "ParameterSet",
    "DEFAULT_PARAMETERS",
    "default_parallelism"
]

"""Argon2id cost parameters."""

import os

from pydantic import BaseModel, ConfigDict, Field

UINT32_MAX = 2**32 - 1
UINT8_MAX = 2**8 - 1


class ParameterSet(BaseModel):
    """Immutable Argon2id cost and shape configuration."""

    model_config = ConfigDict(frozen=True, strict=True)

    memory_cost: int = Field(..., ge=1, le=UINT32_MAX, description="Memory usage in kibibytes")
    iterations: int = Field(..., ge=1, le=UINT32_MAX, description="Number of passes over memory")
    parallelism: int = Field(..., ge=1, le=UINT8_MAX, description="Number of lanes")
    salt_length: int = Field(..., ge=1, le=UINT32_MAX, description="Salt length in bytes")
    digest_length: int = Field(..., ge=1, le=UINT32_MAX, description="Derived digest length in bytes")


def default_parallelism() -> int:
    """Number of CPUs, clamped to the range Argon2 accepts for lanes."""
    return max(1, min(os.cpu_count() or 1, UINT8_MAX))


DEFAULT_PARAMETERS = ParameterSet(
    memory_cost=64 * 1024,
    iterations=1,
    parallelism=default_parallelism(),
    salt_length=16,
    digest_length=32,
)

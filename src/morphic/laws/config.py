"""Configuration for law checks."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "MORPHIC_"


class LawCheckConfig(BaseModel):
    """How many cases a check draws, and how.

    Attributes:
        sample_size: Values drawn when samples come from a generator
        max_cases: Upper bound on triples/pairs evaluated per law
        seed: Seed for the random choice of cases, for reproducibility
        exhaustive: Check every triple of the samples instead of drawing
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sample_size: int = Field(default=50, gt=0)
    max_cases: int = Field(default=2000, gt=0)
    seed: int = 0
    exhaustive: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LawCheckConfig:
        """Build a config from MORPHIC_* environment variables.

        Unset variables keep their defaults; values are validated by the model.
        """
        environ = os.environ if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls.model_validate(values)

"""
Runtime settings read from the environment.

    NUMBERS_INTO_WORDS_AND         default conjunction policy (none|last|below1k|all)
    NUMBERS_INTO_WORDS_LOG_LEVEL   logging level name, e.g. DEBUG

Entry points load a ``.env`` file first when python-dotenv is installed.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .models import DEFAULT_POLICY, ConjunctionPolicy

ENV_AND = "NUMBERS_INTO_WORDS_AND"
ENV_LOG_LEVEL = "NUMBERS_INTO_WORDS_LOG_LEVEL"


class Settings(BaseModel):
    default_policy: ConjunctionPolicy = DEFAULT_POLICY
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            InvalidAndOptionError: If the policy variable names no policy.
            pydantic.ValidationError: If the log level is unknown.
        """
        env = os.environ if environ is None else environ
        policy_token = env.get(ENV_AND)
        return cls(
            default_policy=(
                ConjunctionPolicy.from_token(policy_token)
                if policy_token
                else DEFAULT_POLICY
            ),
            log_level=env.get(ENV_LOG_LEVEL, "WARNING"),
        )

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fibmat.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROMPT = (
    "Please input any integer, N, to compute the Nth Fibonnaci number or q to quit."
)


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    prompt: str = DEFAULT_PROMPT
    quit_token: str = "q"


class EngineConfig(BaseModel):
    """[engine] section.

    ``max_abs_index`` is a guard applied by the services before any work
    is done; the engine itself accepts any integer.  ``max_str_digits`` is
    handed to ``sys.set_int_max_str_digits`` (0 disables the limit).
    """

    model_config = {"frozen": True}

    max_abs_index: int | None = Field(default=None, ge=0)
    max_str_digits: int = Field(default=0, ge=0)

    @field_validator("max_str_digits")
    @classmethod
    def _check_str_digits(cls, v: int) -> int:
        if 0 < v < 640:
            msg = "max_str_digits must be 0 (unlimited) or at least 640"
            raise ValueError(msg)
        return v


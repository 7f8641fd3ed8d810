"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from fibmat.config.models import DEFAULT_PROMPT, EngineConfig, ShellConfig


class TestShellConfig:
    def test_defaults(self) -> None:
        cfg = ShellConfig()
        assert cfg.prompt == DEFAULT_PROMPT
        assert cfg.quit_token == "q"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ShellConfig().quit_token = "x"  # type: ignore[misc]


class TestEngineConfig:
    def test_defaults(self) -> None:
        cfg = EngineConfig()
        assert cfg.max_abs_index is None
        assert cfg.max_str_digits == 0

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EngineConfig(max_abs_index=-1)

    @pytest.mark.parametrize("value", [0, 640, 100_000])
    def test_str_digits_accepted(self, value: int) -> None:
        assert EngineConfig(max_str_digits=value).max_str_digits == value

    @pytest.mark.parametrize("value", [-1, 1, 639])
    def test_str_digits_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            EngineConfig(max_str_digits=value)

"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- NamingConfig / PropagationConfig / PaletteConfig / CategoriesConfig
- BlockVarsConfig root model
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from blockvars.config.models import (
    BlockVarsConfig,
    CategoriesConfig,
    LoggingConfig,
    LogOutputConfig,
    NamingConfig,
    PaletteConfig,
    PropagationConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    @pytest.mark.parametrize("destination", ["stderr", "stdout"])
    def test_stream_destinations(self, destination: str) -> None:
        assert LogOutputConfig(destination=destination).destination == destination

    def test_absolute_file_destination(self, tmp_path: Path) -> None:
        path = str(tmp_path / "out.log")
        assert LogOutputConfig(destination=path).destination == path

    def test_relative_file_destination_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/out.log")

    def test_invalid_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(format="xml")  # type: ignore[arg-type]


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert len(config.outputs) == 1

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


class TestNamingConfig:
    """Tests for NamingConfig model."""

    def test_default_cap(self) -> None:
        assert NamingConfig().max_attempts == 100_000

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_cap_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError, match="positive"):
            NamingConfig(max_attempts=value)


class TestPropagationConfig:
    """Tests for PropagationConfig model."""

    def test_default_continues(self) -> None:
        assert PropagationConfig().on_error == "continue"

    def test_abort_allowed(self) -> None:
        assert PropagationConfig(on_error="abort").on_error == "abort"

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PropagationConfig(on_error="retry")  # type: ignore[arg-type]


class TestPaletteConfig:
    """Tests for PaletteConfig model."""

    def test_default_margin(self) -> None:
        assert PaletteConfig().margin == 8

    def test_negative_margin_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PaletteConfig(margin=-1)


class TestBlockVarsConfig:
    """Tests for the root config model."""

    def test_all_sections_present(self) -> None:
        config = BlockVarsConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.naming, NamingConfig)
        assert isinstance(config.propagation, PropagationConfig)
        assert isinstance(config.palette, PaletteConfig)
        assert config.categories == CategoriesConfig(
            default_getter="variables_get", default_setter="variables_set"
        )

    def test_nested_dict_input(self) -> None:
        config = BlockVarsConfig.model_validate({"palette": {"margin": 4}})
        assert config.palette.margin == 4

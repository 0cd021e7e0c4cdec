"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from blockvars.config.models import LoggingConfig, LogOutputConfig
from blockvars.core.logging import (
    clear_operation_id,
    configure_logging,
    get_logger,
    get_operation_id,
    operation_scope,
    set_operation_id,
)


class TestOperationIdCorrelation:
    """Operation ID context variable tests."""

    def setup_method(self) -> None:
        """Clear operation ID before each test."""
        clear_operation_id()

    def test_given_operation_id_when_set_then_can_retrieve(self) -> None:
        """Operation ID can be set and retrieved."""
        # Given
        operation_id = "rename-123"

        # When
        result = set_operation_id(operation_id)

        # Then
        assert result == operation_id
        assert get_operation_id() == operation_id

    def test_given_no_id_when_set_then_generates_uuid(self) -> None:
        """Set generates UUID-based ID when none provided."""
        # Given
        # (no explicit ID)

        # When
        oid = set_operation_id()

        # Then
        assert len(oid) == 12  # uuid4().hex[:12]

    def test_given_set_id_when_clear_then_removes_id(self) -> None:
        """Clear removes the current operation ID."""
        # Given
        set_operation_id("to-clear")

        # When
        clear_operation_id()

        # Then
        assert get_operation_id() is None


class TestOperationScope:
    """operation_scope context manager tests."""

    def setup_method(self) -> None:
        clear_operation_id()

    def test_given_no_id_when_scoped_then_mints_and_restores(self) -> None:
        """A fresh id lives only inside the scope."""
        # When
        with operation_scope() as oid:
            inside = get_operation_id()

        # Then
        assert inside == oid
        assert len(oid) == 12
        assert get_operation_id() is None

    def test_given_caller_id_when_scoped_then_reused_and_kept(self) -> None:
        """An id set by the host survives the scope untouched."""
        # Given
        set_operation_id("ui-click-1")

        # When
        with operation_scope() as oid:
            inside = get_operation_id()

        # Then
        assert oid == inside == "ui-click-1"
        assert get_operation_id() == "ui-click-1"

    def test_given_explicit_id_when_nested_then_outer_restored(self) -> None:
        """An explicit id wins inside and the outer id comes back on exit."""
        # Given
        set_operation_id("outer")

        # When
        with operation_scope("inner"):
            inside = get_operation_id()

        # Then
        assert inside == "inner"
        assert get_operation_id() == "outer"

    def test_given_error_when_scoped_then_still_restored(self) -> None:
        """The previous id is restored when the block raises."""
        with pytest.raises(ValueError), operation_scope("failing"):
            raise ValueError("boom")

        assert get_operation_id() is None


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
        clear_operation_id()

    def test_given_file_output_when_log_then_json_lines_written(self, tmp_path: Path) -> None:
        """JSON file output carries event, fields, level and timestamp."""
        # Given
        log_file = tmp_path / "blockvars.log"
        config = LoggingConfig(
            level="INFO",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )
        configure_logging(config=config)
        logger = get_logger("test")

        # When
        logger.info("variable_renamed", old_name="a", new_name="b")

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["event"] == "variable_renamed"
        assert data["old_name"] == "a"
        assert data["logger"] == "test"
        assert data["level"] == "info"
        assert "timestamp" in data

    def test_given_operation_id_when_log_then_included(self, tmp_path: Path) -> None:
        """Events carry the current operation ID."""
        # Given
        log_file = tmp_path / "ops.log"
        configure_logging(
            config=LoggingConfig(
                outputs=[LogOutputConfig(format="json", destination=str(log_file))]
            )
        )
        set_operation_id("op-1")

        # When
        get_logger().info("variable_deleted", name="x")

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["operation_id"] == "op-1"

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig object takes precedence over simple params."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When - config's DEBUG should override the level="ERROR" param
        configure_logging(config=config, json_format=False, level="ERROR")
        get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()

    def test_given_multi_output_config_when_configure_then_respects_levels(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content
        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_logger_created_early_when_configured_later_then_follows_config(
        self, tmp_path: Path
    ) -> None:
        """Module-level loggers pick up configuration applied after they were created."""
        # Given
        logger = get_logger("early")
        log_file = tmp_path / "late.log"

        # When
        configure_logging(
            config=LoggingConfig(
                outputs=[LogOutputConfig(format="json", destination=str(log_file))]
            )
        )
        logger.info("after_configure")

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["event"] == "after_configure"
        assert data["logger"] == "early"

    def test_given_module_logger_when_configured_then_named_after_module(
        self, tmp_path: Path
    ) -> None:
        """Loggers created while blockvars modules import carry their names."""
        # Given
        from blockvars.variables import names

        log_file = tmp_path / "module.log"
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        names.log.debug("index_walked")

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["logger"] == "variables.names"
        assert data["level"] == "debug"

"""
Unit tests for structured logging setup.
"""

import json
import logging
import os

import structlog

from surfkit.core.config import SurfaceSettings
from surfkit.core.logging import configure_from_settings, configure_logging, get_logger
from surfkit.surfaces.surface_type import SurfaceType


def _flush():
    for handler in logging.root.handlers:
        handler.flush()


def _last_record(log_file):
    _flush()
    return json.loads(log_file.read_text().strip().splitlines()[-1])


def _file_handlers():
    return [h for h in logging.root.handlers if isinstance(h, logging.FileHandler)]


class TestLogging:
    """Tests for configure_logging and get_logger."""

    def teardown_method(self):
        structlog.reset_defaults()
        logging.basicConfig(force=True)

    def test_level_applied(self):
        """Test that the requested level reaches the root logger."""
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """Test that an unknown level name means INFO."""
        configure_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_output_to_file(self, temp_dir):
        """Test that JSON lines carry the event and its context."""
        log_file = temp_dir / "surfkit.log"
        configure_logging(level="INFO", json_output=True, log_file=str(log_file))

        get_logger("surfkit.test").info("surfaces_simplified", before=3, after=4)

        record = _last_record(log_file)
        assert record["event"] == "surfaces_simplified"
        assert record["before"] == 3
        assert record["after"] == 4
        assert record["level"] == "info"
        assert record["logger"] == "surfkit.test"

    def test_surface_types_rendered_by_name(self, temp_dir):
        """Test that SurfaceType values are logged by role name."""
        log_file = temp_dir / "surfkit.log"
        configure_logging(level="DEBUG", json_output=True, log_file=str(log_file))
        logger = get_logger("surfkit.test")

        logger.debug("surface_simplified_away", surface_type=SurfaceType.INTERNAL_BRIDGE)
        assert _last_record(log_file)["surface_type"] == "INTERNAL_BRIDGE"

        unnamed = SurfaceType.POS_TOP | SurfaceType.MOD_BRIDGE
        logger.debug("surface_simplified_away", surface_type=unnamed)
        assert _last_record(log_file)["surface_type"] == "POS_TOP|MOD_BRIDGE"

    def test_stdlib_records_share_the_renderer(self, temp_dir):
        """Test that plain logging records are rendered as JSON too."""
        log_file = temp_dir / "surfkit.log"
        configure_logging(level="DEBUG", json_output=True, log_file=str(log_file))

        logging.getLogger("surfkit.geometry.expolygon").warning("rings dropped")

        record = _last_record(log_file)
        assert record["event"] == "rings dropped"
        assert record["level"] == "warning"

    def test_log_file_parent_created(self, temp_dir):
        """Test that missing directories above the log file are created."""
        log_file = temp_dir / "logs" / "nested" / "surfkit.log"
        configure_logging(log_file=str(log_file))
        assert log_file.parent.is_dir()
        assert [h.baseFilename for h in _file_handlers()] == [os.path.abspath(log_file)]

    def test_no_file_handler_by_default(self):
        """Test that only stderr is used without a log file."""
        configure_logging()
        assert _file_handlers() == []


class TestConfigureFromSettings:
    """Tests for configure_from_settings."""

    def teardown_method(self):
        structlog.reset_defaults()
        logging.basicConfig(force=True)

    def test_level_from_profile(self):
        """Test that the profile's level is applied."""
        configure_from_settings(SurfaceSettings(log_level="WARNING", json_logs=True))
        assert logging.getLogger().level == logging.WARNING
        assert _file_handlers() == []

    def test_log_file_from_profile(self, temp_dir):
        """Test that the profile's log file receives records."""
        log_file = temp_dir / "profile.log"
        settings = SurfaceSettings(json_logs=True, log_file=str(log_file))
        configure_from_settings(settings)

        get_logger("surfkit.test").info("profile_loaded", name=settings.name)

        assert _last_record(log_file)["name"] == "default"

    def test_explicit_log_file_wins(self, temp_dir):
        """Test that an explicit log file overrides the profile's."""
        settings = SurfaceSettings(log_file=str(temp_dir / "profile.log"))
        configure_from_settings(settings, log_file=str(temp_dir / "cli.log"))
        assert [h.baseFilename for h in _file_handlers()] == [
            os.path.abspath(temp_dir / "cli.log")
        ]

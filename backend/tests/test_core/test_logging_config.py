"""Tests for Loguru logging configuration."""

from unittest.mock import patch

from core.correlation import set_correlation_id
from core.logging_config import configure_logging, correlation_filter


class TestCorrelationFilter:
    """Tests for the correlation ID log filter."""

    def test_adds_correlation_id(self) -> None:
        """The current correlation ID is attached to the record."""
        set_correlation_id("abcd1234")
        record: dict = {"extra": {}}

        assert correlation_filter(record) is True  # type: ignore[arg-type]
        assert record["extra"]["correlation_id"] == "abcd1234"

    def test_placeholder_without_context(self) -> None:
        """A dash is used outside a request."""
        set_correlation_id("")
        record: dict = {"extra": {}}

        correlation_filter(record)  # type: ignore[arg-type]

        assert record["extra"]["correlation_id"] == "-"


class TestConfigureLogging:
    """Tests for configure_logging sinks."""

    def test_development_console_and_file(self, tmp_path) -> None:
        """Development logs to a colorized console and a plain file."""
        with patch("core.logging_config.logger") as mock_logger:
            configure_logging("development", log_dir=str(tmp_path / "logs"))

        mock_logger.remove.assert_called_once()
        assert mock_logger.add.call_count == 2
        console_kwargs = mock_logger.add.call_args_list[0].kwargs
        assert console_kwargs["colorize"] is True
        assert console_kwargs["level"] == "DEBUG"
        file_kwargs = mock_logger.add.call_args_list[1].kwargs
        assert file_kwargs["serialize"] is False
        assert (tmp_path / "logs").is_dir()

    def test_production_json(self, tmp_path) -> None:
        """Other environments log serialized JSON."""
        with patch("core.logging_config.logger") as mock_logger:
            configure_logging("production", log_dir=str(tmp_path))

        console_kwargs = mock_logger.add.call_args_list[0].kwargs
        assert console_kwargs["serialize"] is True
        assert console_kwargs["level"] == "INFO"

    def test_file_sink_disabled(self) -> None:
        """No file sink without a log directory."""
        with patch("core.logging_config.logger") as mock_logger:
            configure_logging("test", log_dir=None)

        assert mock_logger.add.call_count == 1

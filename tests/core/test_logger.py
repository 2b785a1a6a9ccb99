"""Tests for the engine logging helpers.

Covers handler configuration, symbol context binding, JSON formatting and the
debug records indicator functions emit when they return empty results.
"""

import io
import json
import logging
import logging.handlers
import sys
from collections.abc import Iterator

import pytest

from ta_engine.core.logger import (
    ROOT_LOGGER_NAME,
    EngineLogger,
    LogFormat,
    LoggerContextFilter,
    LogLevel,
    StructuredFormatter,
    bind_logger_context,
    get_engine_logger,
)
from ta_engine.indicators.momentum import kdj
from ta_engine.indicators.trend import sma


@pytest.fixture
def fresh_logger_name(request: pytest.FixtureRequest) -> Iterator[str]:
    """A logger name unique to the test, with its handlers closed afterwards."""
    name = f"ta_engine_test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.filters.clear()


def _capture(logger: logging.Logger) -> io.StringIO:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(symbol)s|%(message)s'))
    logger.addHandler(handler)
    return stream


class TestEnums:
    """Test the log level and format enumerations."""

    def test_log_levels(self) -> None:
        """Levels map onto the standard logging names."""
        assert [level.value for level in LogLevel] == [
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ]
        assert LogLevel.DEBUG == "DEBUG"

    def test_log_formats(self) -> None:
        """Plain text and JSON formats are available."""
        assert {fmt.value for fmt in LogFormat} == {"STANDARD", "JSON"}


class TestEngineLogger:
    """Test logger configuration."""

    def test_console_handler(self, fresh_logger_name: str) -> None:
        """A console logger gets one stdout handler and the requested level."""
        logger = EngineLogger.get_logger(fresh_logger_name, level="DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(LogLevel.WARNING, logging.WARNING), ("error", logging.ERROR), ("Debug", logging.DEBUG)],
    )
    def test_level_accepts_enum_or_name(
        self, fresh_logger_name: str, level: LogLevel | str, expected: int
    ) -> None:
        """Levels may be given as LogLevel members or case-insensitive names."""
        assert EngineLogger.get_logger(fresh_logger_name, level=level).level == expected

    def test_format_accepts_name(self, fresh_logger_name: str) -> None:
        """A lower-case format name selects the JSON formatter."""
        logger = EngineLogger.get_logger(fresh_logger_name, log_format="json")
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_standard_format_is_plain_text(self, fresh_logger_name: str) -> None:
        """The default format is the plain text line."""
        logger = EngineLogger.get_logger(fresh_logger_name)

        formatter = logger.handlers[0].formatter
        assert not isinstance(formatter, StructuredFormatter)
        assert "symbol=%(symbol)s" in formatter._fmt

    @pytest.mark.parametrize(("field", "value"), [("level", "VERBOSE"), ("log_format", "xml")])
    def test_unknown_level_or_format(self, fresh_logger_name: str, field: str, value: str) -> None:
        """Unknown names are rejected."""
        with pytest.raises(ValueError):
            EngineLogger.get_logger(fresh_logger_name, **{field: value})

    def test_repeated_calls_do_not_stack_handlers(self, fresh_logger_name: str) -> None:
        """A configured logger is returned unchanged."""
        first = EngineLogger.get_logger(fresh_logger_name)
        second = EngineLogger.get_logger(fresh_logger_name, level="ERROR")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.INFO

    def test_rotating_file_handler(self, fresh_logger_name: str, tmp_path) -> None:
        """File logging creates the directory and writes formatted lines."""
        log_file = tmp_path / "logs" / "engine.log"
        logger = EngineLogger.get_logger(
            fresh_logger_name, file_path=str(log_file), console=False, backup_count=2
        )

        logger.info("file message")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.handlers.RotatingFileHandler)
        assert logger.handlers[0].backupCount == 2
        content = log_file.read_text()
        assert "file message" in content
        assert "symbol=-" in content

    def test_structured_output(self, fresh_logger_name: str, tmp_path) -> None:
        """The JSON format writes one object per line."""
        log_file = tmp_path / "engine.jsonl"
        logger = EngineLogger.get_logger(
            fresh_logger_name, file_path=str(log_file), console=False, log_format=LogFormat.JSON
        )

        logger.warning("structured message")
        for handler in logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry['message'] == "structured message"
        assert entry['level'] == "WARNING"
        assert entry['symbol'] == "-"


class TestStructuredFormatter:
    """Test JSON record formatting."""

    def test_format_fields(self) -> None:
        """Standard fields and extras appear in the JSON entry."""
        record = logging.LogRecord(
            name="ta_engine.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=42,
            msg="RSI %s",
            args=("computed",),
            exc_info=None,
        )
        record.symbol = "AAPL"

        entry = json.loads(StructuredFormatter().format(record))

        assert entry['message'] == "RSI computed"
        assert entry['logger'] == "ta_engine.test"
        assert entry['line'] == 42
        assert entry['symbol'] == "AAPL"
        assert 'msg' not in entry

    def test_format_exception(self) -> None:
        """Exception information is rendered as text."""
        try:
            raise ValueError("bad window")
        except ValueError:
            record = logging.LogRecord(
                "ta_engine.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: bad window" in entry['exception']


class TestContext:
    """Test symbol binding."""

    def test_child_logger_names(self) -> None:
        """Names are placed under the ta_engine root logger."""
        assert get_engine_logger().name == ROOT_LOGGER_NAME
        assert get_engine_logger("frame.sma").name == "ta_engine.frame.sma"
        assert get_engine_logger("ta_engine.indicators").name == "ta_engine.indicators"

    def test_default_symbol_placeholder(self) -> None:
        """Records without a bound symbol show '-'."""
        logger = get_engine_logger("tests.unbound")
        stream = _capture(logger)
        try:
            logger.warning("no symbol")
        finally:
            logger.handlers.clear()

        assert stream.getvalue().strip() == "-|no symbol"

    def test_bound_symbol(self) -> None:
        """A bound symbol is injected into every record."""
        logger = get_engine_logger("tests.bound", symbol="AAPL")
        stream = _capture(logger)
        try:
            logger.warning("bound")
        finally:
            logger.handlers.clear()

        assert stream.getvalue().strip() == "AAPL|bound"

    def test_rebinding_replaces_symbol(self) -> None:
        """Binding again swaps the symbol instead of stacking filters."""
        logger = get_engine_logger("tests.rebound", symbol="AAPL")
        bind_logger_context(logger, symbol="MSFT")

        bound = [
            existing
            for existing in logger.filters
            if isinstance(existing, LoggerContextFilter) and not existing.is_default
        ]
        assert [existing.symbol for existing in bound] == ["MSFT"]

    def test_bind_without_symbol_is_noop(self) -> None:
        """Binding None leaves the logger untouched."""
        logger = get_engine_logger("tests.noop")
        filters = list(logger.filters)

        assert bind_logger_context(logger) is logger
        assert logger.filters == filters


class TestIndicatorLogging:
    """Indicator functions report why they returned nothing."""

    def test_empty_sma_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unusable period is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="ta_engine.indicators.trend"):
            assert sma([1.0, 2.0], 5) == []

        assert "SMA skipped: period=5, samples=2" in caplog.text

    def test_mismatched_lengths_log_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Mismatched high/low/close lengths are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="ta_engine.indicators.momentum"):
            kdj([1.0, 2.0], [1.0], [1.0, 2.0], period=1)

        assert "KDJ skipped: mismatched lengths" in caplog.text

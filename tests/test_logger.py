"""Tests for logging setup."""

import logging

from two_card_poker.observability.logger import (
    ContextLogger, StructuredFormatter, get_logger, setup_logging,
)


class TestLogging:
    """Tests for the observability helpers."""

    def test_get_logger_prefixes_name(self):
        assert get_logger("engine").logger.name == "two_card_poker.engine"
        assert get_logger("two_card_poker.engine.deck").logger.name == "two_card_poker.engine.deck"

    def test_context_fields_in_output(self):
        logger = get_logger("test", game_id="abc123")
        assert isinstance(logger, ContextLogger)

        msg, kwargs = logger.process("hello", {})
        record = logging.LogRecord("two_card_poker.test", logging.INFO, __file__, 1, msg, None, None)
        record.extra_fields = kwargs["extra"]["extra_fields"]
        output = StructuredFormatter().format(record)

        assert "message=hello" in output
        assert "game_id=abc123" in output
        assert "level=INFO" in output

    def test_setup_logging_accepts_level_names(self):
        setup_logging("debug", "simple")
        try:
            assert logging.getLogger("two_card_poker").level == logging.DEBUG
        finally:
            setup_logging(logging.WARNING)

    def test_setup_logging_unknown_level(self):
        setup_logging("nonsense")
        assert logging.getLogger("two_card_poker").level == logging.WARNING

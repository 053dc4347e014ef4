"""
Tests for logging helpers.
"""

import logging

from nginxconf.logging import (
    ColoredFormatter,
    LogConfig,
    Loggers,
    get_log_level,
    get_logger,
    setup_logging,
)


def test_get_logger_prefixes_namespace() -> None:
    assert get_logger("config.parser").name == "nginxconf.config.parser"
    assert get_logger("nginxconf.main").name == "nginxconf.main"
    assert Loggers.lexer().name == "nginxconf.config.lexer"


def test_get_log_level() -> None:
    assert get_log_level("DEBUG") == logging.DEBUG
    assert get_log_level("warn") == logging.WARNING
    assert get_log_level("bogus") == logging.INFO


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord("nginxconf.config.parser", logging.ERROR, __file__, 1, "boom", None, None)

    output = formatter.format(record)

    assert "\033[" in output
    assert "boom" in output
    assert record.levelname == "ERROR"
    assert record.msg == "boom"


def test_setup_logging_module_levels() -> None:
    setup_logging(LogConfig(console_colors=False, module_levels={"config.lexer": "error"}))
    try:
        assert Loggers.lexer().level == logging.ERROR
        assert len(logging.getLogger("nginxconf").handlers) == 1
    finally:
        logging.getLogger("nginxconf").handlers.clear()
        Loggers.lexer().setLevel(logging.NOTSET)

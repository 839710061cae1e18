import io
import logging

import pytest

from adjgraph.logs import ColorFormatter, ExitStreamHandler, fatal, setup_logging


def record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, msg, None, None)


def test_plain_format():
    formatter = ColorFormatter(use_color=False)
    assert formatter.format(record(logging.WARNING, "hi")) == "WARNING: hi"


def test_color_format():
    formatter = ColorFormatter(use_color=True)
    text = formatter.format(record(logging.ERROR, "bad"))
    assert text == "\x1b[31;1mERROR:\x1b[0m bad"


def test_exit_handler_exits_at_level():
    stream = io.StringIO()
    handler = ExitStreamHandler(stream, logging.ERROR)
    handler.emit(record(logging.WARNING, "fine"))
    with pytest.raises(SystemExit):
        handler.emit(record(logging.ERROR, "not fine"))
    assert "not fine" in stream.getvalue()


def test_setup_logging_writes_to_stream():
    stream = io.StringIO()
    setup_logging(stream, logging.INFO, logging.ERROR)
    logging.info("hello")
    assert "INFO: hello" in stream.getvalue()
    with pytest.raises(SystemExit):
        logging.error("goodbye")


def test_fatal_always_exits():
    stream = io.StringIO()
    setup_logging(stream, logging.WARNING, logging.FATAL)
    with pytest.raises(SystemExit):
        fatal("oh no: %s", "disk")
    assert "FATAL: oh no: disk" in stream.getvalue()

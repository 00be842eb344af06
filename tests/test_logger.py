import io
import logging
import re
import time

from qstools.logger import init_logger_with_debug, init_logger_with_level_and_writer

_LINE = re.compile(r"^\[(?P<level>[A-Z]+)\] - (?P<time>\d+) (?P<value>.*)$")


def test_line_format():
    stream = io.StringIO()
    logger = init_logger_with_level_and_writer(logging.WARNING, stream)
    before = time.time_ns()
    logger.warning("disk %s", "full")
    after = time.time_ns()
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    match = _LINE.match(lines[0])
    assert match is not None
    assert match.group("level") == "WARN"
    assert match.group("value") == "disk full"
    stamp = int(match.group("time"))
    assert before - 1_000_000_000 <= stamp <= after + 1_000_000_000


def test_lower_levels_are_filtered():
    stream = io.StringIO()
    logger = init_logger_with_level_and_writer(logging.WARNING, stream)
    logger.info("hidden")
    logger.debug("hidden too")
    assert stream.getvalue() == ""
    logger.error("shown")
    assert "shown" in stream.getvalue()
    assert stream.getvalue().startswith("[ERROR]")


def test_debug_logger_writes_everything_to_stderr(capsys):
    logger = init_logger_with_debug(True)
    logger.debug("debug message")
    err = capsys.readouterr().err
    assert err.startswith("[DEBUG] - ")
    assert "debug message" in err


def test_default_logger_skips_debug(capsys):
    logger = init_logger_with_debug(False)
    logger.debug("quiet")
    logger.warning("loud")
    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err


def test_loggers_are_independent():
    first, second = io.StringIO(), io.StringIO()
    init_logger_with_level_and_writer(logging.WARNING, first).warning("one")
    init_logger_with_level_and_writer(logging.WARNING, second).warning("two")
    assert "two" not in first.getvalue()
    assert "one" not in second.getvalue()
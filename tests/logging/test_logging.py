"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from arenagraph.algorithms.max_flow import calc_max_flow
from arenagraph.logging import (
    ROOT_LOGGER_NAME,
    debug_logging,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("arenagraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.info("info-1")
        assert "info-1" in capture.getvalue()

        logger.debug("debug-1")
        assert "debug-1" not in capture.getvalue()

        enable_debug_logging()
        logger.debug("debug-2")
        assert "debug-2" in capture.getvalue()

        disable_debug_logging()
        logger.debug("debug-3")
        assert "debug-3" not in capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("arenagraph.module1")
    logger2 = get_logger("arenagraph.module2")
    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("arenagraph.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    get_logger("arenagraph.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:arenagraph.test.format" in out
    assert "MSG:hello" in out


def test_solver_emits_debug_records(diamond):
    capture = StringIO()
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(capture))

    g, n = diamond
    calc_max_flow(g, n["A"], n["D"])

    out = capture.getvalue()
    assert "arenagraph.algorithms.max_flow" in out
    assert "= 2 after 2 augmentations" in out


def test_solver_silent_at_info(line1):
    capture = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(capture))

    g, n = line1
    calc_max_flow(g, n["A"], n["C"])
    assert capture.getvalue() == ""


def test_debug_logging_context_restores_level(line1):
    capture = StringIO()
    setup_root_logger(level=logging.WARNING, handler=logging.StreamHandler(capture))
    g, n = line1

    with debug_logging() as package:
        assert package.name == ROOT_LOGGER_NAME
        calc_max_flow(g, n["A"], n["C"])
    assert "= 2 after 1 augmentations" in capture.getvalue()

    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING
    before = capture.getvalue()
    calc_max_flow(g, n["A"], n["C"])
    assert capture.getvalue() == before


def test_reset_allows_reinstalling_handler():
    first = logging.StreamHandler(StringIO())
    second = logging.StreamHandler(StringIO())
    setup_root_logger(handler=first)
    reset_logging()
    setup_root_logger(handler=second)
    assert logging.getLogger(ROOT_LOGGER_NAME).handlers == [second]

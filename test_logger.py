"""
Tests for logging: silent by default, configured only on request.
"""

import io
import logging

import pytest

from nofollow import Annotator, annotate
from nofollow.logger import setup_logger, get_module_logger


def test_annotate_writes_nothing(capfd):
    annotate('<a href="http://x.org">x</a>', current_host='a.com')
    annotate('<p>I am a paragraph <a href="/about">unfin...', ignore_relative=False)

    out, err = capfd.readouterr()
    assert out == ''
    assert err == ''


def test_package_logger_has_only_null_handler():
    handlers = logging.getLogger("nofollow").handlers

    assert handlers
    assert all(isinstance(h, logging.NullHandler) for h in handlers)


def test_annotator_leaves_logging_config_alone():
    package_logger = logging.getLogger("nofollow")
    level, handlers = package_logger.level, list(package_logger.handlers)

    Annotator(current_host='example.com').annotate('<a href="http://x.org">x</a>')

    assert package_logger.level == level
    assert package_logger.handlers == handlers


def test_annotator_has_no_log_level_option():
    with pytest.raises(TypeError):
        Annotator(log_level=logging.DEBUG)


def test_setup_logger_is_opt_in():
    stream = io.StringIO()
    logger = setup_logger("nofollow.setup_check", level=logging.DEBUG, stream=stream)
    try:
        logger.debug("hello")
        assert " - nofollow.setup_check - DEBUG - hello" in stream.getvalue()

        # Repeat calls only change the level, no duplicate handlers
        again = setup_logger("nofollow.setup_check", level=logging.ERROR, stream=stream)
        assert again is logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR
        assert logger.handlers[0].level == logging.ERROR
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_module_logger_name():
    assert get_module_logger("annotator").name == "nofollow.annotator"

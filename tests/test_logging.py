from __future__ import annotations

import logging

import pytest

import vec3py.logging as vlog
from vec3py import (Vec3Error, Vec3ValueError, config_logging,
                    set_up_simple_logging, vec3)
from vec3py.logging import LOGGER_ID


def test_simple_logging_to_file(tmp_path):
    log_file = tmp_path / "vec3py.log"
    set_up_simple_logging(str(log_file), level=logging.DEBUG)
    assert len(vlog.vec3py_handlers) == 2
    assert logging.getLogger(LOGGER_ID).level == logging.DEBUG

    with pytest.raises(Vec3ValueError):
        vec3.from_sequence((1, 2))
    for h in vlog.vec3py_handlers:
        h.flush()

    contents = log_file.read_text(encoding="utf-8")
    assert "Started vec3py logging." in contents
    assert "Refusing to build a vector from 2 components." in contents
    assert f"{LOGGER_ID}.vec3" in contents


def test_simple_logging_moves_old_log(tmp_path):
    log_file = tmp_path / "vec3py.log"
    log_file.write_text("previous run\n", encoding="utf-8")
    set_up_simple_logging(str(log_file))

    old = tmp_path / "vec3py.log.1"
    assert old.read_text(encoding="utf-8") == "previous run\n"
    for h in vlog.vec3py_handlers:
        h.flush()
    assert "Moved old log file" in log_file.read_text(encoding="utf-8")


def test_config_logging_replaces_handlers():
    first = logging.NullHandler()
    second = logging.NullHandler()
    root_logger = logging.getLogger()

    config_logging([first], redirect_warnings=False)
    assert first in root_logger.handlers

    config_logging([second], redirect_warnings=False)
    assert first not in root_logger.handlers
    assert second in root_logger.handlers
    assert vlog.vec3py_handlers == [second]


def test_config_logging_keeps_handlers_without_replace():
    first = logging.NullHandler()
    second = logging.NullHandler()
    root_logger = logging.getLogger()

    config_logging([first], redirect_warnings=False)
    config_logging([second], replace=False, redirect_warnings=False)
    assert first in root_logger.handlers
    assert second in root_logger.handlers
    root_logger.removeHandler(first)


def test_error_hierarchy():
    assert issubclass(Vec3ValueError, ValueError)
    assert issubclass(Vec3Error, Exception)
    assert issubclass(Vec3ValueError, Vec3Error)

    with pytest.raises(Vec3Error):
        vec3.from_sequence([])

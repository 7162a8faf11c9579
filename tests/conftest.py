from __future__ import annotations

import logging

import pytest

import vec3py.logging as vlog
from vec3py import vec3
from vec3py.logging import LOGGER_ID


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # undo handlers installed by set_up_simple_logging so tests stay independent
    root_logger = logging.getLogger()
    warn_log = logging.getLogger("py.warnings")
    for h in vlog.vec3py_handlers:
        root_logger.removeHandler(h)
        warn_log.removeHandler(h)
        h.close()
    vlog.vec3py_handlers = list()
    logging.getLogger(LOGGER_ID).setLevel(logging.NOTSET)
    logging.captureWarnings(False)


@pytest.fixture
def int_vectors() -> list[vec3[int]]:
    return [
        vec3(1, 2, 3),
        vec3(-4, 0, 7),
        vec3(10, -10, 5),
        vec3(0, 0, 0),
    ]


@pytest.fixture
def float_vectors() -> list[vec3[float]]:
    return [
        vec3(1.5, -2.25, 3.0),
        vec3(0.1, 0.2, 0.3),
        vec3(-7.0, 4.5, 1e3),
    ]

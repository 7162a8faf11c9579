from __future__ import annotations

import logging
import warnings
from pathlib import Path
from shutil import move
from typing import List

LOGGER_ID = "vec3py"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-30s|%(message)s"
vec3py_logger = logging.getLogger(LOGGER_ID)
module_logger = logging.getLogger(f"{LOGGER_ID}.logging")
vec3py_handlers = list()


class Vec3Error(Exception):
    """
    Generic vec3py error.
    """

    pass


class Vec3ValueError(Vec3Error, ValueError):
    """
    Value error specific to vec3py, raised when a vector cannot be built from the given input.
    """

    pass


def config_logging(
    handlers: List[logging.Handler],
    replace: bool = True,
    level: int = logging.DEBUG,
    redirect_warnings: bool = True,
) -> None:
    """
    Function to configure logging.

    Args:
        handlers: list of already configured logging.Handler objects
        replace: whether to replace existing list of handlers with new ones or whether to add them, optional
        level: log level of the vec3py logger object, optional. Defaults to ``logging.DEBUG``.
        redirect_warnings: whether to redirect warnings to the logger. Beware that this modifies the warnings settings.
    """
    global vec3py_handlers
    root_logger = logging.getLogger()
    if replace and vec3py_handlers:
        for h in vec3py_handlers:
            root_logger.removeHandler(h)
    for h in handlers:
        root_logger.addHandler(h)
    vec3py_handlers = handlers

    vec3py_logger.setLevel(level)

    if redirect_warnings:
        logging.captureWarnings(redirect_warnings)
        warn_log = logging.getLogger("py.warnings")
        warnings.simplefilter("once")
        for h in handlers:
            warn_log.addHandler(h)
    vec3py_logger.info("Started vec3py logging.")
    for h in handlers:
        if isinstance(h, logging.FileHandler):
            module_logger.info(f"Logging to file: {h.baseFilename}.")


def set_up_simple_logging(
    log_file: str | None = None,
    redirect_warnings: bool = True,
    level: int = logging.INFO,
) -> None:
    """
    Helper function that provides high-level control
    over vec3py logging. For low-level control over the
    logging system use :func:`config_logging`.
    Sets up logging to ``sys.stderr`` and optionally to a given file.
    Existing log files are moved to ``<log_file>.1``.

    Args:
        log_file: log filename, optional
        redirect_warnings: Whether to redirect warnings to the logger. Beware that this modifies the warnings settings.
        level: log level of handler that is created for the log file. Defaults to ``logging.INFO``.
    """
    sh = logging.StreamHandler()
    sh.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)
    sh.setFormatter(formatter)
    handlers: List[logging.Handler] = [sh]
    moved_log = False
    fh = None
    if log_file:
        if Path(log_file).exists():
            move(log_file, f"{log_file}.1")
            moved_log = True
        fh = logging.FileHandler(log_file, "w", "utf-8")
        formatter = logging.Formatter(LOG_FORMAT)
        fh.setFormatter(formatter)
        fh.setLevel(level)
        handlers.append(fh)
    config_logging(
        handlers,
        level=level,
        redirect_warnings=redirect_warnings,
    )
    if moved_log and fh is not None:
        module_logger.info(f"Moved old log file to '{fh.baseFilename}.1'.")

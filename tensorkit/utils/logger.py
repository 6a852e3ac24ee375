# -*- coding: utf-8 -*-
# File: logger.py

# Copyright (c) Tensorpack Contributors
# Licensed under the Apache License, Version 2.0 (the "License")

"""
Package wide logger, modified from
<https://github.com/tensorpack/tensorpack/blob/master/tensorpack/utils/logger.py>

Example:
    ```python
    from tensorkit.utils.logger import logger

    logger.set_logger_dir("path/to/dir")
    logger.info("Something has happened")
    ```

The level is taken from the environment variable `LOG_LEVEL` (default: INFO). With `STD_OUT_VERBOSE` the log dict
of a `LoggingRecord` is printed to the terminal as well.
"""

import functools
import json
import logging
import logging.config
import os
import shutil
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union, no_type_check

from termcolor import colored

from .types import PathLikeOrStr

__all__ = ["logger", "LoggingRecord", "set_logger_dir", "get_logger_dir", "log_once"]

ENV_VARS_TRUE: set[str] = {"1", "True", "TRUE", "true", "yes"}


@dataclass
class LoggingRecord:
    """
    `LoggingRecord` to pass to the logger in order to distinguish from third party libraries.

    Args:
        msg: The log message.
        log_dict: Optional dictionary that will be added to the log record.
    """

    msg: str
    log_dict: Optional[dict[Union[int, str], Any]] = field(default=None)

    def __post_init__(self) -> None:
        if self.log_dict is not None:
            self.log_dict["msg"] = self.msg

    def __str__(self) -> str:
        return self.msg


class CustomFilter(logging.Filter):
    """Drops records of third party libraries if `FILTER_THIRD_PARTY_LIB` is set"""

    filter_third_party_lib = os.environ.get("FILTER_THIRD_PARTY_LIB", "False") in ENV_VARS_TRUE

    def filter(self, record: logging.LogRecord) -> bool:
        if self.filter_third_party_lib:
            if not isinstance(record.msg, LoggingRecord):
                return False
        return True


class StreamFormatter(logging.Formatter):
    """Coloured one-line records for the terminal"""

    std_out_verbose = os.environ.get("STD_OUT_VERBOSE", "False") in ENV_VARS_TRUE

    @no_type_check
    def format(self, record: logging.LogRecord) -> str:
        date = colored("[%(asctime)s @%(filename)s:%(lineno)d]", "green")
        msg = colored("%(message)s", "white")

        if self.std_out_verbose and isinstance(record.msg, LoggingRecord):
            msg += f" Additional verbose infos: {repr(record.msg.log_dict)}"

        if record.levelno == logging.WARNING:
            fmt = f"{date}  {colored('WRN', 'magenta', attrs=['blink'])}  {msg}"
        elif record.levelno in (logging.ERROR, logging.CRITICAL):
            fmt = f"{date}  {colored('ERR', 'red', attrs=['blink', 'underline'])}  {msg}"
        elif record.levelno == logging.DEBUG:
            fmt = f"{date}  {colored('DBG', 'green', attrs=['blink'])}  {msg}"
        elif record.levelno == logging.INFO:
            fmt = f"{date}  {colored('INF', 'green')}  {msg}"
        else:
            fmt = f"{date} {msg}"
        self._style._fmt = fmt  # pylint: disable=W0212
        self._fmt = fmt
        return super().format(record)


class FileFormatter(logging.Formatter):
    """One JSON object per record"""

    @no_type_check
    def format(self, record: logging.LogRecord) -> str:
        log_dict = {
            "level_no": record.levelno,
            "level_name": record.levelname,
            "module_name": record.filename,
            "line_number": record.lineno,
            "time": _get_time_str(),
            "message": super().format(record),
        }
        if isinstance(record.msg, LoggingRecord) and record.msg.log_dict:
            log_dict.update(record.msg.log_dict)
            log_dict.pop("msg")
        return json.dumps(log_dict, default=str)


_LOG_DIR: Optional[str] = None
_FILE_HANDLER: Optional[logging.FileHandler] = None
_CONFIG_DICT: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {"customfilter": {"()": lambda: CustomFilter()}},  # pylint: disable=W0108
    "formatters": {
        "streamformatter": {"()": lambda: StreamFormatter(datefmt="%m%d %H:%M.%S")},
    },
    "handlers": {
        "streamhandler": {"filters": ["customfilter"], "formatter": "streamformatter", "class": "logging.StreamHandler"}
    },
    "loggers": {
        __name__: {
            "handlers": ["streamhandler"],
            "level": os.environ.get("LOG_LEVEL", "INFO"),
            "propagate": os.environ.get("LOG_PROPAGATE", "False") in ENV_VARS_TRUE,
        }
    },
}


def _get_logger() -> logging.Logger:
    logging.config.dictConfig(_CONFIG_DICT)
    return logging.getLogger(__name__)


logger = _get_logger()


def _get_time_str() -> str:
    return datetime.now().strftime("%m%d-%H%M%S")


def _set_file(path: str) -> None:
    global _FILE_HANDLER  # pylint: disable=W0603
    if os.path.isfile(path):
        backup_name = path + "." + _get_time_str()
        shutil.move(path, backup_name)
        logger.info("Existing log file %s backuped to %s", path, backup_name)
    hdl = logging.FileHandler(filename=path, encoding="utf-8", mode="w")
    hdl.setFormatter(FileFormatter(datefmt="%m%d %H:%M:%S"))
    hdl.addFilter(CustomFilter())

    _FILE_HANDLER = hdl
    logger.addHandler(hdl)
    logger.info("Argv: %s ", sys.argv)


def set_logger_dir(dir_name: PathLikeOrStr) -> None:
    """
    Set the directory for file logging. Records will be written to `dir_name/log.jsonl`. An existing log file will be
    moved to a backup file with a timestamp suffix.

    Args:
        dir_name: Log directory. Will be created if it does not exist.
    """
    global _LOG_DIR, _FILE_HANDLER  # pylint: disable=W0603
    if isinstance(dir_name, Path):
        dir_name = dir_name.as_posix()
    dir_name = os.path.normpath(dir_name)
    if _FILE_HANDLER is not None:
        logger.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None

    os.makedirs(dir_name, exist_ok=True)
    _LOG_DIR = dir_name
    _set_file(os.path.join(dir_name, "log.jsonl"))


def get_logger_dir() -> Optional[str]:
    """
    Returns:
        The directory used for file logging or `None` if not set.
    """
    return _LOG_DIR


@functools.lru_cache(maxsize=None)
def log_once(message: str, function: str = "info") -> None:
    """
    Log certain message only once. Calling this function more than once with the same message will result in no
    operation.

    Args:
        message: Message to log.
        function: The name of the logger method, e.g. "info", "warning", "error".
    """
    getattr(logger, function)(message)

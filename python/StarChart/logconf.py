#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Logging setup for StarChart

Logging is configured from a json5 file in the dictConfig format,
see starchart_logconf.json. Without a file a basic stderr
configuration is used.
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional, TextIO, Union

import json5

BOOTSTRAP_FORMAT = "%(asctime)s BASIC %(name)s: %(levelname)s %(message)s"

# third party loggers that are too chatty at debug level
QUIET_LOGGERS = ("PIL.PngImagePlugin", "PIL.Image")


def read_config(file: TextIO) -> None:
    """
    Read logging configuration from the specified file handle and apply it.
    """
    config = json5.load(file)
    logging.config.dictConfig(config)


def configure_logging(
    log_conf: Optional[Union[str, Path]] = None, level: Optional[int] = None
) -> None:
    """
    Applies log_conf if given, a basic configuration otherwise.
    level, if given, overrides the root logger level afterwards.
    """
    if log_conf is not None:
        log_conf = Path(log_conf)
        if not log_conf.exists():
            raise FileNotFoundError(f"Logging configuration {log_conf} does not exist.")
        with open(log_conf, "r") as f:
            read_config(f)
    else:
        logging.basicConfig(format=BOOTSTRAP_FORMAT)
        logging.getLogger().setLevel(logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if level is not None:
        logging.getLogger().setLevel(level)

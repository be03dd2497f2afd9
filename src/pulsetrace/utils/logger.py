# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import atexit
import json
import logging
import os
import sys
from enum import Enum
from logging.config import dictConfig
from typing import IO, List, Union

# Formatted to "[INFO] 2020-08-25 19:54:28,216 - pulsetrace - (module_name.function_name:line_number) - message"
default_logger_format = "[%(levelname)s] %(asctime)s - %(name)s - (%(module)s.%(funcName)s:%(lineno)d) - %(message)s"


class LoggerLevel(Enum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET

    def __repr__(self):
        return self.name


class BasicLogger(logging.Logger):
    """
    The basic logger class that should be used. Upon setup, this is provided to the
    built-in logging by calling ``logging.setLoggerClass``. This way, every new logger
    created will be of this class. This class should not be instantiated separately,
    only call ``logging.getLogger("pulsetrace.some_name")``, and this will return an
    instance of :class:`BasicLogger`.
    """

    def __init__(self, name: str):
        logging.Logger.__init__(self, name)
        self.setLevel(logging.INFO)

    def close(self):
        """Closes this logger and cleans up the file handles."""
        for handler in self.handlers:
            try:
                handler.close()
            except Exception as e:
                print(f"Logger handler failed to close cleanly. Message: {e}")


class ConsoleLoggerHandler(logging.StreamHandler):
    """
    Basic console handler for the logger. It defaults to stdout.
    """

    def __init__(self, stream: IO = sys.stdout):
        super().__init__(stream)
        self.setFormatter(logging.Formatter(default_logger_format))

    def __repr__(self):
        return "Console logger handler"


class FileLoggerHandler(logging.FileHandler):
    """
    Basic file handler for the logger. A file path must be provided. The log file is
    created with a delay, so nothing touches the disk until the first record is emitted.
    """

    def __init__(self, file_path: str):
        super().__init__(os.path.abspath(file_path), mode="w", delay=True)
        self.setFormatter(logging.Formatter(default_logger_format))

    def emit(self, record):
        if self.stream is None:
            os.makedirs(os.path.dirname(self.baseFilename), exist_ok=True)
            self.stream = self._open()
        logging.FileHandler.emit(self, record)

    def __repr__(self):
        return "File logger handler (path: %s)" % self.baseFilename


class CompositeLogger(BasicLogger):
    """
    The default logger class of the tracer. It stores all the configured loggers in a
    list, and when logging, each call is forwarded to every logger in the list. This way
    only one function needs to be called when logging, and it is ensured that all the
    enabled loggers will log the message.
    """

    def __init__(self, loggers_or_names: List[Union[str, logging.Logger]] = None):
        """Creates the list of loggers on which the logging functions will iterate

        :param loggers_or_names: List of loggers by their names
            (e.g. ``["pulsetrace", "pulsetrace.file"]``) or actual logger instances.
        """
        super().__init__("default")

        self.loggers = []
        if loggers_or_names is None:
            loggers_or_names = []
        self.add_loggers(loggers_or_names)

    def add_loggers(self, loggers_or_names: List[Union[str, logging.Logger]] = ()):
        if loggers_or_names is not None:
            for val in loggers_or_names:
                if isinstance(val, str):
                    self.loggers.append(logging.getLogger(val))
                elif isinstance(val, logging.Logger):
                    self.loggers.append(val)

    def isEnabledFor(self, level):
        return any(logger.isEnabledFor(level) for logger in self.loggers)

    def _add_stack_levels(self, kwargs):
        """
        Due to the way the loggers work, we need to go back up the stack a few calls to
        get the real caller.
        """
        kwargs["stacklevel"] = kwargs.get("stacklevel", 0) + 2
        return kwargs

    def info(self, msg: str, *args, **kwargs):
        kwargs = self._add_stack_levels(kwargs)
        for logger in self.loggers:
            logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        kwargs = self._add_stack_levels(kwargs)
        for logger in self.loggers:
            logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        kwargs = self._add_stack_levels(kwargs)
        for logger in self.loggers:
            logger.warning(msg, *args, **kwargs)

    def log(self, level, msg: str, *args, **kwargs):
        kwargs = self._add_stack_levels(kwargs)
        if isinstance(level, LoggerLevel):
            level = level.value
        for logger in self.loggers:
            logger.log(level, msg, *args, **kwargs)

    def close(self):
        super(CompositeLogger, self).close()
        for logger in self.loggers:
            if isinstance(logger, BasicLogger):
                logger.close()


logging.setLoggerClass(BasicLogger)


def import_logger_configuration(logger_config: dict):
    """
    Imports the configuration of the loggers from a JSON data structure. This must be in
    the format described by the `logging.config
    <https://docs.python.org/3/library/logging.config.html>`_ built-in module.

    The logger list may also contain an additional ``active`` setting. If this is false,
    the corresponding logger will not be imported, which makes it easy to switch a logger
    off without removing it from the configuration file.

    :param logger_config: The JSON data structure from the logger_settings.json
        configuration.
    :return: A :class:`CompositeLogger` over the imported loggers. They are already
        loaded and configured.
    """
    non_active_loggers = [
        key
        for key, value in logger_config["loggers"].items()
        if "active" in value and not value["active"]
    ]
    for key in non_active_loggers:
        logger_config["loggers"].pop(key)
    for value in logger_config["loggers"].values():
        value.pop("active", None)

    dictConfig(logger_config)
    return CompositeLogger(list(logger_config["loggers"].keys()))


def get_logger_config(config_file=None):
    """
    Imports the logger configuration from the provided JSON file. If this is not
    provided, then the current directory is searched for a logger_settings.json
    configuration file. If not found, the default file shipped next to this module is
    read.

    :param config_file: The path to the JSON file on the disk containing the logger
        configuration.
    :return: A :class:`CompositeLogger` configured with the names of the imported
        loggers.
    """
    if config_file is None:
        config_file = "logger_settings.json"

    potential_file = config_file
    if not os.path.isfile(potential_file):
        potential_file = os.path.join(os.getcwd(), config_file)
        if not os.path.isfile(potential_file):
            potential_file = os.path.join(os.path.dirname(__file__), config_file)

    if not os.path.isfile(potential_file):
        print(
            f"Log config file {config_file} doesn't exist and can't be found using "
            "default search patterns. Loading default configuration."
        )
        potential_file = os.path.join(os.path.dirname(__file__), "logger_settings.json")

    with open(potential_file, "r") as f:
        logger_config = json.load(f)
        return import_logger_configuration(logger_config)


_default_logging_instance = None


def get_default_logger():
    """
    Initializes the global logger or fetches one if it already exists.
    """
    global _default_logging_instance
    if _default_logging_instance is None:
        _default_logging_instance = get_logger_config()
    return _default_logging_instance


@atexit.register
def close_logger():
    """
    This method is executed upon exit, and it closes all the file handlers from the
    default loggers.
    """
    if _default_logging_instance is not None:
        _default_logging_instance.close()

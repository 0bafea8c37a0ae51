# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Logging configuration for pygts"""

import logging
import sys
from enum import Enum
from typing import Optional

ROOT_LOGGER = "pygts"


class LogLevel(Enum):
    """Log levels understood by :func:`setup_logger`"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def _level(level: str) -> int:
    try:
        return LogLevel[level.upper()].value
    except KeyError:
        raise ValueError(f"Unknown log level: {level}") from None


class ColoredFormatter(logging.Formatter):
    """Console formatter coloring the level name"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        record.levelname = f"{self.COLORS.get(levelname, self.RESET)}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logger(name: str = ROOT_LOGGER,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Setup a logger for pygts output

    Module loggers are children of ``pygts`` (``pygts.series.baseline`` and
    so on), so configuring the default name covers the whole package.

    Parameters:
    -----------
    name : str
        Logger name
    level : str
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable console output

    Returns:
    --------
    logging.Logger
        Configured logger
    """
    numeric_level = _level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name"""
    return logging.getLogger(name)


def trace(logger: logging.Logger, msg, *args, **kwargs):
    """Log ``msg`` at TRACE level on ``logger``"""
    logger.log(LogLevel.TRACE.value, msg, *args, **kwargs)


class LogContext:
    """Context manager for temporary log level change"""

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = _level(level)
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


class LoggerConfig:
    """Per-module log levels applied on top of a package default"""

    def __init__(self):
        self.module_levels = {}
        self.default_level = "INFO"
        self.log_file = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Set log level for a module logger, e.g. ``pygts.io.binary``"""
        _level(level)
        self.module_levels[module_name] = level
        logging.getLogger(module_name).setLevel(_level(level))

    def get_level_for_module(self, module_name: str) -> str:
        """Configured level for a module, or the default"""
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Configure from dictionary"""
        if 'default_level' in config:
            self.default_level = config['default_level']
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = config['console']
        for module, level in config.get('module_levels', {}).items():
            self.set_module_level(module, level)

    def setup_all_loggers(self) -> logging.Logger:
        """Install handlers on the package logger and apply module levels"""
        logger = setup_logger(ROOT_LOGGER, self.default_level, self.log_file, self.console)
        for module, level in self.module_levels.items():
            logging.getLogger(module).setLevel(_level(level))
        if self.module_levels:
            # handlers must pass the most verbose module level through
            lowest = min([_level(self.default_level)] + [_level(lv) for lv in self.module_levels.values()])
            for handler in logger.handlers:
                handler.setLevel(lowest)
        return logger


logger_config = LoggerConfig()


def setup_logger_from_config(config: dict) -> logging.Logger:
    """Setup loggers from configuration dictionary

    Example config:
    {
        'default_level': 'INFO',
        'log_file': 'pygts.log',
        'console': True,
        'module_levels': {
            'pygts.io.binary': 'DEBUG',
            'pygts.series.baseline': 'TRACE',
        }
    }
    """
    logger_config.configure_from_dict(config)
    return logger_config.setup_all_loggers()

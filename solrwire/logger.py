"""
    Logging for the package.

    Module loggers are children of the 'solrwire' logger, which owns the
    single JSON-lines handler and the level. setup_logging() changes that
    level for every module at once.
"""

import json
import logging
import time

from .exception import ConfigException

PACKAGE = 'solrwire'


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = {
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False)


def level_name(level) -> str:
    """ 'debug', 'DEBUG' or 10 -> 'DEBUG'; unknown levels are a config error """
    name = logging.getLevelName(level) if isinstance(level, int) else str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigException(f"Unknown log level {level!r}")
    return name


def package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE)
    if not any(isinstance(h.formatter, JsonLineFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonLineFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    package_logger()
    return logging.getLogger(name)


def setup_logging(level='INFO') -> logging.Logger:
    logger = package_logger()
    logger.setLevel(level_name(level))
    return logger

import logging
import os
import sys


class CustomFormatter(logging.Formatter):
    """Logging Formatter to add colors and count warning / errors"""

    GREY = '\033[0;37m'
    GREEN = '\033[0;32m'
    RED = '\033[0;31m'
    LIGHT_RED = '\033[1;31m'
    YELLOW = '\033[1;33m'

    RESET = "\033[0m"

    @classmethod
    def _colorize(cls, color):
        return f'[%(asctime)25s] {color}%(levelname)7s{cls.RESET} [%(name)s] %(funcName)s:%(lineno)s -- %(message)s'

    @classmethod
    def get_formats(cls):
        return {
            logging.DEBUG: cls._colorize(cls.GREY),
            logging.INFO: cls._colorize(cls.GREEN),
            logging.WARNING: cls._colorize(cls.YELLOW),
            logging.ERROR: cls._colorize(cls.RED),
            logging.CRITICAL: cls._colorize(cls.LIGHT_RED)
        }

    def format(self, record):
        log_fmt = self.get_formats().get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def get_logger(logger_name: str = 'seeder', loglevel: str = None) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    level_name = (loglevel or os.getenv('LOG_LEVEL', '')).upper()
    level = logging.getLevelName(level_name) if level_name else logging.DEBUG
    if not isinstance(level, int):
        raise ValueError('Invalid log level: %s' % level_name)
    logger.setLevel(level=level)

    # getLogger returns the same object per name, only attach stdout once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(CustomFormatter())
        logger.addHandler(handler)

    return logger

# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
from typing import Dict, Optional

from .constants import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


LOG_LEVELS: Dict[str, int] = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def single_char_to_level(level: str) -> int:
    """Resolve a level name, or its leading character, to a logging level.

    ``d``, ``Debug`` and ``DEBUG`` all resolve to :data:`logging.DEBUG`.
    Raises ``ValueError`` for anything else."""
    name = level.strip().upper()
    if name in LOG_LEVELS:
        return LOG_LEVELS[name]
    if len(name) == 1:
        for candidate, value in LOG_LEVELS.items():
            if candidate[0] == name:
                return value
    raise ValueError(
        'invalid log level %r, valid options: %s' % (level, ', '.join(LOG_LEVELS)),
    )


class Logger:
    """Logging setup used by the command line tool.

    Only the ``async_proxy`` logger namespace is configured, loggers
    of the embedding application are left untouched.  The library
    itself never configures logging, it only emits records through
    module level loggers.
    """

    NAMESPACE = 'async_proxy'

    handler: Optional[logging.Handler] = None

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
    ) -> logging.Logger:
        level = single_char_to_level(log_level)
        handler: logging.Handler = logging.FileHandler(log_file, mode='a') \
            if log_file else logging.StreamHandler()
        handler.setFormatter(logging.Formatter(log_format))

        logger = logging.getLogger(Logger.NAMESPACE)
        # Repeated setup replaces, never stacks, our handler
        if Logger.handler is not None:
            logger.removeHandler(Logger.handler)
            Logger.handler.close()
        logger.addHandler(handler)
        logger.setLevel(level)
        Logger.handler = handler
        return logger

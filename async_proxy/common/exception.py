# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any, Optional


class ConfigurationError(ValueError):
    """Raised when a textual constructor or timeout description
    cannot be parsed.

    Subclasses tell apart which part of the description was wrong.
    """

    def __init__(self, value: str, message: Optional[str] = None, **kwargs: Any) -> None:
        self.value: str = value
        super().__init__(
            '%s: %r' % (message or self.__class__.__name__, value),
        )


class InvalidSyntax(ConfigurationError):
    """Description has a wrong number of whitespace separated fields."""

    def __init__(self, value: str, **kwargs: Any) -> None:
        super().__init__(value, 'invalid syntax', **kwargs)


class InvalidAddress(ConfigurationError):

    def __init__(self, value: str, **kwargs: Any) -> None:
        super().__init__(value, 'invalid address', **kwargs)


class InvalidPort(ConfigurationError):

    def __init__(self, value: str, **kwargs: Any) -> None:
        super().__init__(value, 'invalid port', **kwargs)


class InvalidTimeouts(ConfigurationError):
    """Timeouts must be given as ``connect:write:read`` seconds."""

    def __init__(self, value: str, **kwargs: Any) -> None:
        super().__init__(value, 'invalid timeouts', **kwargs)

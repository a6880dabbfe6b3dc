# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from abc import ABC, abstractmethod
from typing import TypeVar

from ..common.timeouts import ConnectionTimeouts
from .stream import ProxyStream


S = TypeVar('S', bound=ProxyStream)


class ProxyConstructor(ABC):
    """Turns an already connected stream into a proxy tunneled stream.

    Implementations hold immutable destination and timeout configuration
    and may be reused for any number of sequential ``connect`` calls.
    Each call performs exactly one handshake and either returns the
    stream it was given, ready for application traffic, or raises a
    :class:`HandshakeError`.
    """

    timeouts: ConnectionTimeouts

    @abstractmethod
    async def connect(self, stream: S) -> S:
        """Perform the handshake over stream and return it unchanged."""
        raise NotImplementedError()     # pragma: no cover

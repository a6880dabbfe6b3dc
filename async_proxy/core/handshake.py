# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import asyncio
import logging

from ..common.timeouts import ConnectionTimeouts, timeoutPhases
from .stream import ProxyStream
from .exception import HandshakeTimeout, MalformedReply, TransportIoError, UnexpectedEof

logger = logging.getLogger(__name__)


class HandshakeDriver:
    """Performs the I/O of a single handshake attempt.

    Every ``send`` is individually bounded by the write timeout and
    every ``recv`` by the read timeout.  Failures are translated into
    :class:`HandshakeError` subclasses, nothing is retried.
    """

    def __init__(self, stream: ProxyStream, timeouts: ConnectionTimeouts) -> None:
        self.stream = stream
        self.timeouts = timeouts
        self.sent = 0
        self.received = 0

    async def send(self, payload: bytes) -> None:
        try:
            await asyncio.wait_for(
                self.stream.write_all(payload),
                timeout=self.timeouts.write,
            )
        except asyncio.TimeoutError as e:
            raise HandshakeTimeout(timeoutPhases.WRITE, self.timeouts.write) from e
        except OSError as e:
            raise TransportIoError(e) from e
        self.sent += len(payload)
        logger.debug('sent %d bytes to proxy', len(payload))

    async def recv(self, n: int) -> bytes:
        try:
            data = await asyncio.wait_for(
                self.stream.read_exact(n),
                timeout=self.timeouts.read,
            )
        except asyncio.TimeoutError as e:
            raise HandshakeTimeout(timeoutPhases.READ, self.timeouts.read) from e
        except asyncio.IncompleteReadError as e:
            raise UnexpectedEof(n, len(e.partial)) from e
        except OSError as e:
            raise TransportIoError(e) from e
        if len(data) < n:
            raise UnexpectedEof(n, len(data))
        if len(data) > n:
            raise MalformedReply(
                'expected %d reply bytes, stream returned %d' % (n, len(data)),
            )
        self.received += n
        logger.debug('received %d bytes from proxy', n)
        return data

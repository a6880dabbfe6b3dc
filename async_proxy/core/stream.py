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

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from ..common.constants import DEFAULT_BUFFER_SIZE
from ..common.timeouts import ConnectionTimeouts, timeoutPhases
from .exception import HandshakeTimeout, TransportIoError

logger = logging.getLogger(__name__)


class ProxyStream(ABC):
    """Bidirectional byte stream a handshake is performed over.

    Implementations only need to write and read exact amounts of
    bytes.  Timeouts are applied by the caller.
    """

    @abstractmethod
    async def write_all(self, data: bytes) -> None:
        """Write and flush all of data.  Raise ``OSError`` on failure."""
        raise NotImplementedError()     # pragma: no cover

    @abstractmethod
    async def read_exact(self, n: int) -> bytes:
        """Read exactly n bytes.

        Must raise :exc:`asyncio.IncompleteReadError` if the stream
        ends before n bytes were received."""
        raise NotImplementedError()     # pragma: no cover


class TcpStream(ProxyStream):
    """:class:`ProxyStream` backed by an asyncio reader and writer pair."""

    def __init__(
            self,
            reader: asyncio.StreamReader,
            writer: asyncio.StreamWriter,
    ) -> None:
        self.reader = reader
        self.writer = writer

    @classmethod
    async def open(
            cls,
            host: str,
            port: int,
            timeouts: ConnectionTimeouts,
    ) -> 'TcpStream':
        """Connect to a proxy server within ``timeouts.connect`` seconds."""
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(host, port),
                timeout=timeouts.connect,
            )
        except asyncio.TimeoutError as e:
            raise HandshakeTimeout(timeoutPhases.CONNECT, timeouts.connect) from e
        except OSError as e:
            raise TransportIoError(e) from e
        logger.debug('Connected to proxy server %s:%d', host, port)
        return cls(reader, writer)

    async def write_all(self, data: bytes) -> None:
        self.writer.write(data)
        await self.writer.drain()

    async def read_exact(self, n: int) -> bytes:
        return await self.reader.readexactly(n)

    async def read(self, n: int = DEFAULT_BUFFER_SIZE) -> bytes:
        """Read up to n bytes, returns empty bytes on EOF."""
        return await self.reader.read(n)

    def close(self) -> None:
        if not self.writer.is_closing():
            self.writer.close()

    async def wait_closed(self) -> None:
        await self.writer.wait_closed()

    async def __aenter__(self) -> 'TcpStream':
        return self

    async def __aexit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc_val: Optional[BaseException],
            exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
        try:
            await self.wait_closed()
        except OSError as e:
            # Peer reset while closing, stream is closed either way
            logger.debug('Error while closing stream: %s', e)

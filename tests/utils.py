# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import re
import asyncio
import binascii

from typing import List, Optional

from async_proxy.core import ProxyStream


def unhexlify(raw: str) -> bytes:
    return binascii.unhexlify(re.sub(r'\s', '', raw))


class StubStream(ProxyStream):
    """Scripted in-memory proxy server.

    Every ``write_all`` records the written request and makes the
    next canned reply available for reading.  Delays and errors can
    be injected separately for the write and the read side.
    """

    def __init__(
            self,
            replies: Optional[List[bytes]] = None,
            write_delay: float = 0,
            read_delay: float = 0,
            write_error: Optional[BaseException] = None,
            read_error: Optional[BaseException] = None,
    ) -> None:
        self.replies = list(replies or [])
        self.write_delay = write_delay
        self.read_delay = read_delay
        self.write_error = write_error
        self.read_error = read_error
        self.written: List[bytes] = []
        self.reads = 0
        self.buffer = bytearray()

    async def write_all(self, data: bytes) -> None:
        if self.write_delay:
            await asyncio.sleep(self.write_delay)
        if self.write_error is not None:
            raise self.write_error
        self.written.append(bytes(data))
        if self.replies:
            self.buffer += self.replies.pop(0)

    async def read_exact(self, n: int) -> bytes:
        self.reads += 1
        if self.read_delay:
            await asyncio.sleep(self.read_delay)
        if self.read_error is not None:
            raise self.read_error
        if len(self.buffer) < n:
            partial = bytes(self.buffer)
            self.buffer.clear()
            raise asyncio.IncompleteReadError(partial, n)
        data = bytes(self.buffer[:n])
        del self.buffer[:n]
        return data

# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import ipaddress

import pytest

from async_proxy.common.exception import InvalidSyntax, InvalidAddress, InvalidPort, InvalidTimeouts
from async_proxy.common.timeouts import ConnectionTimeouts, timeoutPhases
from async_proxy.core import (
    HandshakeTimeout, MalformedReply, NoAcceptableAuthMethod,
    ProxyRequestRejected, UnexpectedEof,
)
from async_proxy.socks import Socks5NoAuth, Socks5Destination, socks5AddressTypes

from ..utils import StubStream
from ..test_assertions import Assertions


TIMEOUTS = ConnectionTimeouts(5, 5, 5)
METHOD_OK = bytes([5, 0])
SUCCEEDED = bytes([5, 0, 0, 1, 0, 0, 0, 0, 0, 0])


class TestSocks5NoAuth(Assertions):

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_connect_domain_name(self) -> None:
        stream = StubStream([METHOD_OK, SUCCEEDED])
        constructor = Socks5NoAuth('example.com', 443, TIMEOUTS)
        self.assertIs(await constructor.connect(stream), stream)
        self.assertEqual(
            stream.written, [
                bytes([5, 1, 0]),
                bytes([5, 1, 0, 3, 11]) + b'example.com' + (443).to_bytes(2, 'big'),
            ],
        )
        self.assertEqual(stream.buffer, bytearray())

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_connect_ipv4(self) -> None:
        stream = StubStream([METHOD_OK, SUCCEEDED])
        constructor = Socks5NoAuth(ipaddress.IPv4Address('203.0.113.7'), 9000, TIMEOUTS)
        await constructor.connect(stream)
        self.assertEqual(stream.written[1], bytes([5, 1, 0, 1, 203, 0, 113, 7, 0x23, 0x28]))

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_connect_ipv6(self) -> None:
        stream = StubStream([METHOD_OK, SUCCEEDED])
        constructor = Socks5NoAuth('[2001:db8::1]', 80, TIMEOUTS)
        await constructor.connect(stream)
        self.assertEqual(
            stream.written[1],
            bytes([5, 1, 0, 4]) + ipaddress.IPv6Address('2001:db8::1').packed + b'\x00\x50',
        )

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_bound_address_variants(self) -> None:
        for bound in (
            bytes([4]) + ipaddress.IPv6Address('::1').packed,
            bytes([3, 9]) + b'localhost',
            bytes([3, 0]),
        ):
            stream = StubStream([METHOD_OK, bytes([5, 0, 0]) + bound + b'\x04\x38'])
            constructor = Socks5NoAuth('example.com', 443, TIMEOUTS)
            self.assertIs(await constructor.connect(stream), stream)
            # Whole reply consumed, nothing left behind for tunnel data
            self.assertEqual(stream.buffer, bytearray())

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_nonzero_reserved_byte_tolerated(self) -> None:
        stream = StubStream([METHOD_OK, bytes([5, 0, 7, 1, 0, 0, 0, 0, 0, 0])])
        await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_constructor_is_reusable(self) -> None:
        constructor = Socks5NoAuth('example.com', 443, TIMEOUTS)
        for _ in range(2):
            stream = StubStream([METHOD_OK, SUCCEEDED])
            self.assertIs(await constructor.connect(stream), stream)

    @pytest.mark.asyncio    # type: ignore[misc]
    @pytest.mark.parametrize('status', range(1, 9))
    async def test_rejected(self, status: int) -> None:
        stream = StubStream([METHOD_OK, bytes([5, status, 0, 1, 0, 0, 0, 0, 0, 0])])
        with pytest.raises(ProxyRequestRejected) as e:
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)
        self.assertEqual(e.value.version, 5)
        self.assertEqual(e.value.code, status)
        self.assertFalse(isinstance(e.value, NoAcceptableAuthMethod))

    @pytest.mark.asyncio    # type: ignore[misc]
    @pytest.mark.parametrize('status', [0x09, 0x7F, 0xFF])
    async def test_unknown_status(self, status: int) -> None:
        stream = StubStream([METHOD_OK, bytes([5, status, 0, 1, 0, 0, 0, 0, 0, 0])])
        with pytest.raises(MalformedReply):
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)

    @pytest.mark.asyncio    # type: ignore[misc]
    @pytest.mark.parametrize('method', [0x01, 0x02, 0x03, 0x80, 0xFF])
    async def test_no_acceptable_method(self, method: int) -> None:
        stream = StubStream([bytes([5, method]), SUCCEEDED])
        with pytest.raises(NoAcceptableAuthMethod) as e:
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)
        self.assertEqual(e.value.method, method)
        self.assertIsInstance(e.value, ProxyRequestRejected)
        # CONNECT request is never sent
        self.assertEqual(stream.written, [bytes([5, 1, 0])])

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_method_reply_wrong_version(self) -> None:
        stream = StubStream([bytes([4, 0])])
        with pytest.raises(MalformedReply):
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_reply_wrong_version(self) -> None:
        stream = StubStream([METHOD_OK, bytes([4, 0, 0, 1, 0, 0, 0, 0, 0, 0])])
        with pytest.raises(MalformedReply):
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_reply_unknown_address_type(self) -> None:
        stream = StubStream([METHOD_OK, bytes([5, 0, 0, 2, 0, 0, 0, 0, 0, 0])])
        with pytest.raises(MalformedReply):
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_truncated_reply(self) -> None:
        stream = StubStream([METHOD_OK, SUCCEEDED[:7]])
        with pytest.raises(UnexpectedEof) as e:
            await Socks5NoAuth('example.com', 443, TIMEOUTS).connect(stream)
        self.assertEqual(e.value.expected, 4)
        self.assertEqual(e.value.received, 3)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_read_timeout(self) -> None:
        stream = StubStream([METHOD_OK, SUCCEEDED], read_delay=1)
        constructor = Socks5NoAuth('example.com', 443, ConnectionTimeouts(5, 5, 0.05))
        with pytest.raises(HandshakeTimeout) as e:
            await constructor.connect(stream)
        self.assertEqual(e.value.phase, timeoutPhases.READ)
        self.assertEqual(len(stream.written), 1)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_write_timeout(self) -> None:
        stream = StubStream([METHOD_OK, SUCCEEDED], write_delay=1)
        constructor = Socks5NoAuth('example.com', 443, ConnectionTimeouts(5, 0.05, 5))
        with pytest.raises(HandshakeTimeout) as e:
            await constructor.connect(stream)
        self.assertEqual(e.value.phase, timeoutPhases.WRITE)
        self.assertEqual(stream.reads, 0)

    def test_invalid_destination(self) -> None:
        with pytest.raises(ValueError):
            Socks5NoAuth('a' * 256, 443, TIMEOUTS)
        with pytest.raises(ValueError):
            Socks5NoAuth('example.com', -1, TIMEOUTS)

    def test_from_str(self) -> None:
        constructor = Socks5NoAuth.from_str('example.com 443 8:8:8')
        self.assertEqual(constructor.destination, Socks5Destination('example.com'))
        self.assertEqual(constructor.port, 443)
        self.assertEqual(constructor.timeouts, ConnectionTimeouts.uniform(8))
        constructor = Socks5NoAuth.from_str('[::1] 80 1:2:3')
        self.assertEqual(constructor.destination.address_type, socks5AddressTypes.IPV6)

    def test_from_str_errors(self) -> None:
        with pytest.raises(InvalidSyntax):
            Socks5NoAuth.from_str('example.com:443 8:8:8')
        with pytest.raises(InvalidAddress):
            Socks5NoAuth.from_str('%s 443 8:8:8' % ('a' * 256))
        with pytest.raises(InvalidPort):
            Socks5NoAuth.from_str('example.com 70000 8:8:8')
        with pytest.raises(InvalidTimeouts):
            Socks5NoAuth.from_str('example.com 443 8:8:x')

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

from typing import Union

from ..common.constants import WHITESPACE
from ..common.exception import InvalidSyntax, InvalidAddress
from ..common.timeouts import ConnectionTimeouts
from ..common.types import IpAddress
from ..common.utils import parse_port, validate_port
from ..core.constructor import ProxyConstructor, S
from ..core.exception import MalformedReply, NoAcceptableAuthMethod, ProxyRequestRejected
from ..core.handshake import HandshakeDriver
from .destination import Socks5Destination
from .packet import (
    Socks5MethodSelectionPacket, Socks5MethodReplyPacket,
    Socks5RequestPacket, Socks5ReplyPacket,
)
from .operations import (
    SOCKS5_VERSION, SOCKS5_REJECT_REASONS, socks5AddressTypes,
    socks5AuthMethods, socks5Operations, socks5ReplyCodes, socks5_method_reason,
)

logger = logging.getLogger(__name__)


class Socks5NoAuth(ProxyConstructor):
    """SOCKS5 CONNECT offering only the "no authentication required" method.

    Handshake consists of two sequential exchanges over the same stream,
    method negotiation followed by the CONNECT request.  Each write and
    each read of both exchanges is bounded by its own timeout.
    """

    def __init__(
            self,
            destination: Union[Socks5Destination, str, bytes, IpAddress],
            port: int,
            timeouts: ConnectionTimeouts,
    ) -> None:
        self.destination = destination \
            if isinstance(destination, Socks5Destination) \
            else Socks5Destination(destination)
        self.port = validate_port(port)
        self.timeouts = timeouts

    @classmethod
    def from_str(cls, raw: str) -> 'Socks5NoAuth':
        """Parse ``<destination> <port> <connect:write:read>``.

        Destination may be an IPv4 address, an optionally bracketed
        IPv6 address or a domain name."""
        parts = raw.split(WHITESPACE)
        if len(parts) != 3:
            raise InvalidSyntax(raw)
        try:
            destination = Socks5Destination(parts[0])
        except ValueError as e:
            raise InvalidAddress(parts[0]) from e
        return cls(
            destination,
            parse_port(parts[1]),
            ConnectionTimeouts.from_str(parts[2]),
        )

    def method_selection(self) -> Socks5MethodSelectionPacket:
        return Socks5MethodSelectionPacket([socks5AuthMethods.NO_AUTH])

    def request(self) -> Socks5RequestPacket:
        return Socks5RequestPacket(
            socks5Operations.CONNECT, self.destination, self.port,
        )

    async def connect(self, stream: S) -> S:
        driver = HandshakeDriver(stream, self.timeouts)
        await self._negotiate_method(driver)
        reply = await self._request(driver)
        logger.debug(
            'SOCKS5 tunnel established to %s:%d, bound %s:%s',
            self.destination, self.port, reply.bndaddr, reply.bndport,
        )
        return stream

    async def _negotiate_method(self, driver: HandshakeDriver) -> None:
        await driver.send(self.method_selection().pack())
        reply = Socks5MethodReplyPacket()
        reply.parse(await driver.recv(Socks5MethodReplyPacket.LENGTH))
        if reply.method != socks5AuthMethods.NO_AUTH:
            assert reply.method is not None
            logger.warning(
                'SOCKS5 server selected unsupported method 0x%02x', reply.method,
            )
            raise NoAcceptableAuthMethod(
                reply.method, socks5_method_reason(reply.method),
            )

    async def _request(self, driver: HandshakeDriver) -> Socks5ReplyPacket:
        await driver.send(self.request().pack())

        reply = Socks5ReplyPacket()
        reply.parse_header(await driver.recv(Socks5ReplyPacket.HEADER_LENGTH))
        if reply.atyp == socks5AddressTypes.DOMAIN_NAME:
            reply.parse_address_length(await driver.recv(reply.address_length()))
        length = reply.address_length()
        # Empty bound domain name is followed directly by the port
        reply.parse_address(await driver.recv(length) if length else b'')
        reply.parse_port(await driver.recv(Socks5ReplyPacket.PORT_LENGTH))

        if reply.rep == socks5ReplyCodes.SUCCEEDED:
            return reply
        if reply.rep in SOCKS5_REJECT_REASONS:
            logger.warning('SOCKS5 request rejected with status 0x%02x', reply.rep)
            raise ProxyRequestRejected(
                SOCKS5_VERSION, reply.rep, SOCKS5_REJECT_REASONS[reply.rep],
            )
        raise MalformedReply('unknown SOCKS5 status 0x%02x' % reply.rep)

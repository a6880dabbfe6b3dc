# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       ident
       identd
"""
import logging
import ipaddress

from typing import Tuple, Union

from ..common.constants import NULL, WHITESPACE
from ..common.exception import InvalidSyntax, InvalidAddress
from ..common.timeouts import ConnectionTimeouts
from ..common.types import Ipv4Like
from ..common.utils import bytes_, split_host_port, validate_port
from ..core.constructor import ProxyConstructor, S
from ..core.exception import MalformedReply, ProxyRequestRejected
from ..core.handshake import HandshakeDriver
from .destination import socks4_address
from .packet import Socks4Packet, Socks4ReplyPacket
from .operations import (
    SOCKS4_VERSION, SOCKS4_REJECT_REASONS, socks4Operations, socks4ReplyCodes,
)

logger = logging.getLogger(__name__)


async def socks4_handshake(
        stream: S,
        request: Socks4Packet,
        timeouts: ConnectionTimeouts,
) -> S:
    """Write a single SOCKS4 request and validate the 8 byte reply."""
    driver = HandshakeDriver(stream, timeouts)
    await driver.send(request.pack())

    reply = Socks4ReplyPacket()
    reply.parse(await driver.recv(Socks4ReplyPacket.LENGTH))

    if reply.cd == socks4ReplyCodes.GRANTED:
        logger.debug(
            'SOCKS4 tunnel established to %s:%d',
            ipaddress.IPv4Address(request.dstip or bytes(4)), request.dstport,
        )
        return stream
    if reply.cd in SOCKS4_REJECT_REASONS:
        logger.warning('SOCKS4 request rejected with status 0x%02x', reply.cd)
        raise ProxyRequestRejected(
            SOCKS4_VERSION, reply.cd, SOCKS4_REJECT_REASONS[reply.cd],
        )
    raise MalformedReply('unknown SOCKS4 status 0x%02x' % reply.cd)


def _parse_destination(raw: str) -> Tuple[ipaddress.IPv4Address, int]:
    host, port = split_host_port(raw)
    try:
        return socks4_address(host), port
    except ValueError as e:
        raise InvalidAddress(raw) from e


class Socks4Ident(ProxyConstructor):
    """SOCKS4 CONNECT carrying a user id.

    ``ident`` is sent NULL terminated, hence it must not itself
    contain a NULL byte.
    """

    def __init__(
            self,
            dest_ip: Ipv4Like,
            dest_port: int,
            ident: Union[str, bytes],
            timeouts: ConnectionTimeouts,
    ) -> None:
        self.dest_ip = socks4_address(dest_ip)
        self.dest_port = validate_port(dest_port)
        self.ident: bytes = bytes_(ident)
        if NULL in self.ident:
            raise ValueError('ident must not contain a NULL byte')
        self.timeouts = timeouts

    @classmethod
    def from_str(cls, raw: str) -> 'Socks4Ident':
        """Parse ``<ipv4>:<port> <ident> <connect:write:read>``."""
        parts = raw.split(WHITESPACE)
        if len(parts) != 3:
            raise InvalidSyntax(raw)
        dest_ip, dest_port = _parse_destination(parts[0])
        return cls(dest_ip, dest_port, parts[1], ConnectionTimeouts.from_str(parts[2]))

    def request(self) -> Socks4Packet:
        pkt = Socks4Packet()
        pkt.vn = SOCKS4_VERSION
        pkt.cd = socks4Operations.CONNECT
        pkt.dstport = self.dest_port
        pkt.dstip = self.dest_ip.packed
        pkt.userid = self.ident
        return pkt

    async def connect(self, stream: S) -> S:
        return await socks4_handshake(stream, self.request(), self.timeouts)


class Socks4NoIdent(ProxyConstructor):
    """SOCKS4 CONNECT with an empty user id."""

    def __init__(
            self,
            dest_ip: Ipv4Like,
            dest_port: int,
            timeouts: ConnectionTimeouts,
    ) -> None:
        self.dest_ip = socks4_address(dest_ip)
        self.dest_port = validate_port(dest_port)
        self.timeouts = timeouts

    @classmethod
    def from_str(cls, raw: str) -> 'Socks4NoIdent':
        """Parse ``<ipv4>:<port> <connect:write:read>``."""
        parts = raw.split(WHITESPACE)
        if len(parts) != 2:
            raise InvalidSyntax(raw)
        dest_ip, dest_port = _parse_destination(parts[0])
        return cls(dest_ip, dest_port, ConnectionTimeouts.from_str(parts[1]))

    def request(self) -> Socks4Packet:
        pkt = Socks4Packet()
        pkt.vn = SOCKS4_VERSION
        pkt.cd = socks4Operations.CONNECT
        pkt.dstport = self.dest_port
        pkt.dstip = self.dest_ip.packed
        return pkt

    async def connect(self, stream: S) -> S:
        return await socks4_handshake(stream, self.request(), self.timeouts)

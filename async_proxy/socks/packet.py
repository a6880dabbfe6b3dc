# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       atyp
       bnd
       dst
"""
import struct

from typing import List, Optional

from ..common.constants import NULL
from ..core.exception import MalformedReply
from .destination import Socks5Destination
from .operations import (
    SOCKS4_VERSION, SOCKS4_REPLY_VERSION, SOCKS5_VERSION, SOCKS5_RESERVED,
    socks5AddressTypes,
)


class Socks4Packet:
    """SOCKS4 CONNECT/BIND request packet.

    Reference https://www.openssh.com/txt/socks4.protocol
    """

    def __init__(self) -> None:
        # 1 byte, must be equal to 4
        self.vn: Optional[int] = None
        # 1 byte
        self.cd: Optional[int] = None
        # 2 bytes
        self.dstport: Optional[int] = None
        # 4 bytes
        self.dstip: Optional[bytes] = None
        # Variable bytes, NULL terminated
        self.userid: Optional[bytes] = None

    def parse(self, raw: memoryview) -> None:
        if len(raw) < 9:
            raise ValueError('SOCKS4 request must be at least 9 bytes')
        if raw[0] != SOCKS4_VERSION:
            raise ValueError('not a SOCKS4 request, version %d' % raw[0])
        if raw[-1] != NULL[0]:
            raise ValueError('SOCKS4 request is not NULL terminated')
        self.vn, self.cd, self.dstport, self.dstip = struct.unpack(
            '!BBH4s', raw[:8],
        )
        self.userid = bytes(raw[8:-1])

    def pack(self) -> bytes:
        assert self.vn is not None and self.cd is not None
        assert self.dstport is not None and self.dstip is not None
        user_id = self.userid or b''
        return struct.pack(
            '!BBH4s%ds' % len(user_id),
            self.vn, self.cd,
            self.dstport, self.dstip,
            user_id,
        ) + NULL


class Socks4ReplyPacket:
    """8 byte SOCKS4 reply.

    Bound port and address are not used by CONNECT clients
    and are only checked for length."""

    LENGTH = 8

    def __init__(self) -> None:
        self.vn: Optional[int] = None
        self.cd: Optional[int] = None
        self.dstport: Optional[int] = None
        self.dstip: Optional[bytes] = None

    def parse(self, raw: bytes) -> None:
        if len(raw) != self.LENGTH:
            raise MalformedReply(
                'SOCKS4 reply must be %d bytes, got %d' % (self.LENGTH, len(raw)),
            )
        vn, cd, dstport, dstip = struct.unpack('!BBH4s', raw)
        if vn != SOCKS4_REPLY_VERSION:
            raise MalformedReply('SOCKS4 reply version must be 0, got %d' % vn)
        self.vn, self.cd, self.dstport, self.dstip = vn, cd, dstport, dstip

    def pack(self) -> bytes:
        return struct.pack(
            '!BBH4s',
            SOCKS4_REPLY_VERSION if self.vn is None else self.vn,
            self.cd or 0,
            self.dstport or 0,
            self.dstip or bytes(4),
        )


class Socks5MethodSelectionPacket:
    """Version identifier/method selection message sent by the client."""

    def __init__(self, methods: Optional[List[int]] = None) -> None:
        self.ver: int = SOCKS5_VERSION
        self.methods: List[int] = methods or []

    def parse(self, raw: bytes) -> None:
        if len(raw) < 2 or raw[0] != SOCKS5_VERSION or len(raw) != 2 + raw[1]:
            raise ValueError('invalid SOCKS5 method selection message')
        self.ver = raw[0]
        self.methods = list(raw[2:])

    def pack(self) -> bytes:
        assert 0 < len(self.methods) <= 255
        return bytes([self.ver, len(self.methods)] + self.methods)


class Socks5MethodReplyPacket:
    """2 byte method selection reply sent by the server."""

    LENGTH = 2

    def __init__(self, method: Optional[int] = None) -> None:
        self.ver: int = SOCKS5_VERSION
        self.method: Optional[int] = method

    def parse(self, raw: bytes) -> None:
        if len(raw) != self.LENGTH:
            raise MalformedReply(
                'SOCKS5 method reply must be %d bytes, got %d' % (self.LENGTH, len(raw)),
            )
        if raw[0] != SOCKS5_VERSION:
            raise MalformedReply('SOCKS5 method reply version must be 5, got %d' % raw[0])
        self.ver, self.method = raw[0], raw[1]

    def pack(self) -> bytes:
        assert self.method is not None
        return bytes([self.ver, self.method])


class Socks5RequestPacket:
    """SOCKS5 request: ``VER CMD RSV ATYP DST.ADDR DST.PORT``."""

    def __init__(
            self,
            cmd: Optional[int] = None,
            dstaddr: Optional[Socks5Destination] = None,
            dstport: Optional[int] = None,
    ) -> None:
        self.ver: int = SOCKS5_VERSION
        self.cmd = cmd
        self.rsv: int = SOCKS5_RESERVED
        self.dstaddr = dstaddr
        self.dstport = dstport

    def parse(self, raw: bytes) -> None:
        if len(raw) < 7 or raw[0] != SOCKS5_VERSION:
            raise ValueError('invalid SOCKS5 request')
        self.ver, self.cmd, self.rsv = raw[0], raw[1], raw[2]
        self.dstaddr = Socks5Destination.unpack(raw[3], raw[4:-2])
        self.dstport = struct.unpack('!H', raw[-2:])[0]

    def pack(self) -> bytes:
        assert self.cmd is not None
        assert self.dstaddr is not None and self.dstport is not None
        return bytes([self.ver, self.cmd, self.rsv]) + \
            self.dstaddr.pack() + \
            struct.pack('!H', self.dstport)


class Socks5ReplyPacket:
    """SOCKS5 reply: ``VER REP RSV ATYP BND.ADDR BND.PORT``.

    Reply has a variable length, hence it is parsed incrementally.
    ``parse_header`` consumes the fixed 4 byte prefix and
    ``address_length`` tells how many more bytes belong to
    ``BND.ADDR``.  For domain names the first of those bytes is the
    length prefix, in which case ``address_length`` must be asked
    again after ``parse_address_length``.
    """

    HEADER_LENGTH = 4
    PORT_LENGTH = 2

    def __init__(self) -> None:
        self.ver: int = SOCKS5_VERSION
        self.rep: Optional[int] = None
        self.rsv: int = SOCKS5_RESERVED
        self.atyp: Optional[int] = None
        self.bndaddr: Optional[Socks5Destination] = None
        self.bndport: Optional[int] = None
        self._domain_length: Optional[int] = None

    def parse_header(self, raw: bytes) -> None:
        if len(raw) != self.HEADER_LENGTH:
            raise MalformedReply(
                'SOCKS5 reply header must be %d bytes, got %d' % (
                    self.HEADER_LENGTH, len(raw),
                ),
            )
        ver, rep, rsv, atyp = raw
        if ver != SOCKS5_VERSION:
            raise MalformedReply('SOCKS5 reply version must be 5, got %d' % ver)
        if atyp not in socks5AddressTypes:
            raise MalformedReply('unknown SOCKS5 address type 0x%02x' % atyp)
        self.ver, self.rep, self.rsv, self.atyp = ver, rep, rsv, atyp

    def address_length(self) -> int:
        if self.atyp == socks5AddressTypes.IPV4:
            return 4
        if self.atyp == socks5AddressTypes.IPV6:
            return 16
        assert self.atyp == socks5AddressTypes.DOMAIN_NAME
        if self._domain_length is None:
            # Length prefix byte
            return 1
        return self._domain_length

    def parse_address_length(self, raw: bytes) -> None:
        assert self.atyp == socks5AddressTypes.DOMAIN_NAME and len(raw) == 1
        self._domain_length = raw[0]

    def parse_address(self, raw: bytes) -> None:
        assert self.atyp is not None
        if self.atyp == socks5AddressTypes.DOMAIN_NAME:
            assert self._domain_length is not None
            if self._domain_length == 0:
                # Some servers reply with an empty bound domain name
                self.bndaddr = None
                return
            raw = bytes([self._domain_length]) + raw
        try:
            self.bndaddr = Socks5Destination.unpack(self.atyp, raw)
        except ValueError as e:
            raise MalformedReply('invalid bound address: %s' % e) from e

    def parse_port(self, raw: bytes) -> None:
        if len(raw) != self.PORT_LENGTH:
            raise MalformedReply('SOCKS5 reply port must be 2 bytes')
        self.bndport = struct.unpack('!H', raw)[0]

    def pack(self) -> bytes:
        assert self.rep is not None
        bndaddr = self.bndaddr or Socks5Destination('0.0.0.0')
        return bytes([self.ver, self.rep, self.rsv]) + \
            bndaddr.pack() + \
            struct.pack('!H', self.bndport or 0)

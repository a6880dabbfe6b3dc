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
from typing import Union

from ..common.types import IpAddress, Ipv4Like
from ..common.utils import bytes_, text_
from ..common.constants import MAX_DOMAIN_NAME_LENGTH
from .operations import socks5AddressTypes


def socks4_address(address: Ipv4Like) -> ipaddress.IPv4Address:
    """SOCKS4 can only address IPv4 destinations.

    Anything else, including IPv6 addresses and domain names,
    raises ``ValueError`` before any I/O happens."""
    if isinstance(address, ipaddress.IPv4Address):
        return address
    if isinstance(address, ipaddress.IPv6Address):
        raise ValueError('SOCKS4 cannot address IPv6 destination %s' % address)
    if isinstance(address, int) and not isinstance(address, bool):
        return ipaddress.IPv4Address(address)
    return ipaddress.IPv4Address(text_(address))


class Socks5Destination:
    """Destination address of a SOCKS5 CONNECT request.

    Either an IPv4 address, an IPv6 address or a domain name.  Domain
    names are never resolved locally, they are handed to the proxy
    server as is.
    """

    def __init__(self, address: Union[str, bytes, IpAddress]) -> None:
        self.address_type: int
        self.address: Union[IpAddress, bytes]
        if isinstance(address, ipaddress.IPv4Address):
            self.address_type = socks5AddressTypes.IPV4
            self.address = address
            return
        if isinstance(address, ipaddress.IPv6Address):
            self.address_type = socks5AddressTypes.IPV6
            self.address = address
            return
        try:
            ip = ipaddress.ip_address(text_(address).strip('[]'))
        except ValueError:
            self._set_domain_name(address)
        else:
            self.address_type = socks5AddressTypes.IPV4 \
                if ip.version == 4 else socks5AddressTypes.IPV6
            self.address = ip

    @classmethod
    def domain_name(cls, name: Union[str, bytes]) -> 'Socks5Destination':
        """Force domain name addressing even for names that look like an IP."""
        dest = cls.__new__(cls)
        dest._set_domain_name(name)
        return dest

    def _set_domain_name(self, name: Union[str, bytes]) -> None:
        raw = bytes_(name)
        if not isinstance(raw, bytes):
            raise TypeError('unsupported destination %r' % (name,))
        if not 0 < len(raw) <= MAX_DOMAIN_NAME_LENGTH:
            raise ValueError(
                'domain name must be 1-%d bytes long, got %d' % (
                    MAX_DOMAIN_NAME_LENGTH, len(raw),
                ),
            )
        self.address_type = socks5AddressTypes.DOMAIN_NAME
        self.address = raw

    def pack(self) -> bytes:
        """Returns ``atyp`` followed by the address bytes."""
        if self.address_type == socks5AddressTypes.DOMAIN_NAME:
            assert isinstance(self.address, bytes)
            return bytes([self.address_type, len(self.address)]) + self.address
        assert not isinstance(self.address, bytes)
        return bytes([self.address_type]) + self.address.packed

    @classmethod
    def unpack(cls, address_type: int, raw: bytes) -> 'Socks5Destination':
        """Inverse of ``pack`` minus the leading ``atyp`` byte.

        For domain names raw must include the leading length byte."""
        if address_type == socks5AddressTypes.IPV4:
            return cls(ipaddress.IPv4Address(raw))
        if address_type == socks5AddressTypes.IPV6:
            return cls(ipaddress.IPv6Address(raw))
        if address_type == socks5AddressTypes.DOMAIN_NAME:
            if len(raw) < 1 or raw[0] != len(raw) - 1:
                raise ValueError('domain name length prefix mismatch')
            return cls.domain_name(raw[1:])
        raise ValueError('unknown address type %r' % address_type)

    def __len__(self) -> int:
        """Length of the packed representation, including ``atyp``."""
        if self.address_type == socks5AddressTypes.DOMAIN_NAME:
            return 2 + len(self.address)
        return 1 + (4 if self.address_type == socks5AddressTypes.IPV4 else 16)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Socks5Destination):
            return NotImplemented
        return self.address_type == other.address_type and self.address == other.address

    def __hash__(self) -> int:
        return hash((self.address_type, self.address))

    def __str__(self) -> str:
        if self.address_type == socks5AddressTypes.DOMAIN_NAME:
            return text_(self.address, errors='replace')
        if self.address_type == socks5AddressTypes.IPV6:
            return '[%s]' % self.address
        return str(self.address)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, str(self))

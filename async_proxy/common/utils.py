# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any

from .types import HostPort
from .constants import COLON, MAX_PORT
from .exception import InvalidAddress, InvalidPort


def text_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure text-like usability.

    If s is of type bytes or int, return s.decode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        return str(s)
    if isinstance(s, bytes):
        return s.decode(encoding, errors)
    return s


def bytes_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure binary-like usability.

    If s is type str or int, return s.encode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        s = str(s)
    if isinstance(s, str):
        return s.encode(encoding, errors)
    return s


def validate_port(port: int) -> int:
    """Returns port unchanged if it fits into an unsigned 16-bit field."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise TypeError('port must be an int, got %r' % (port,))
    if not 0 <= port <= MAX_PORT:
        raise ValueError('port %d out of range 0-%d' % (port, MAX_PORT))
    return port


def parse_port(raw: str) -> int:
    try:
        return validate_port(int(raw))
    except ValueError as e:
        raise InvalidPort(raw) from e


def split_host_port(raw: str) -> HostPort:
    """Split ``host:port``, ``[ipv6]:port`` into a tuple.

    Brackets around IPv6 addresses are stripped.
    """
    host, sep, port = raw.rpartition(COLON)
    if not sep or not host:
        raise InvalidAddress(raw)
    if host.startswith('[') and host.endswith(']'):
        host = host[1:-1]
    elif COLON in host:
        # Unbracketed IPv6 address is ambiguous
        raise InvalidAddress(raw)
    return host, parse_port(port)

# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       identd
       gssapi
"""
from typing import Dict, NamedTuple


SOCKS4_VERSION = 4
# Version field of a SOCKS4 reply is always zero
SOCKS4_REPLY_VERSION = 0
SOCKS5_VERSION = 5
SOCKS5_RESERVED = 0

Socks4Operations = NamedTuple(
    'Socks4Operations', [
        ('CONNECT', int),
        ('BIND', int),
    ],
)
socks4Operations = Socks4Operations(1, 2)

Socks4ReplyCodes = NamedTuple(
    'Socks4ReplyCodes', [
        ('GRANTED', int),
        ('REJECTED', int),
        ('IDENTD_UNREACHABLE', int),
        ('IDENTD_MISMATCH', int),
    ],
)
socks4ReplyCodes = Socks4ReplyCodes(0x5A, 0x5B, 0x5C, 0x5D)

SOCKS4_REJECT_REASONS: Dict[int, str] = {
    socks4ReplyCodes.REJECTED: 'request rejected or failed',
    socks4ReplyCodes.IDENTD_UNREACHABLE:
        'request rejected because SOCKS server cannot connect to identd on the client',
    socks4ReplyCodes.IDENTD_MISMATCH:
        'request rejected because the client program and identd report different user-ids',
}

Socks5Operations = NamedTuple(
    'Socks5Operations', [
        ('CONNECT', int),
        ('BIND', int),
        ('UDP_ASSOCIATE', int),
    ],
)
socks5Operations = Socks5Operations(1, 2, 3)

Socks5AddressTypes = NamedTuple(
    'Socks5AddressTypes', [
        ('IPV4', int),
        ('DOMAIN_NAME', int),
        ('IPV6', int),
    ],
)
socks5AddressTypes = Socks5AddressTypes(0x01, 0x03, 0x04)

Socks5AuthMethods = NamedTuple(
    'Socks5AuthMethods', [
        ('NO_AUTH', int),
        ('GSSAPI', int),
        ('USERNAME_PASSWORD', int),
        ('NO_ACCEPTABLE_METHODS', int),
    ],
)
socks5AuthMethods = Socks5AuthMethods(0x00, 0x01, 0x02, 0xFF)

Socks5ReplyCodes = NamedTuple(
    'Socks5ReplyCodes', [
        ('SUCCEEDED', int),
        ('GENERAL_FAILURE', int),
        ('NOT_ALLOWED', int),
        ('NETWORK_UNREACHABLE', int),
        ('HOST_UNREACHABLE', int),
        ('CONNECTION_REFUSED', int),
        ('TTL_EXPIRED', int),
        ('COMMAND_NOT_SUPPORTED', int),
        ('ADDRESS_TYPE_NOT_SUPPORTED', int),
    ],
)
socks5ReplyCodes = Socks5ReplyCodes(0, 1, 2, 3, 4, 5, 6, 7, 8)

SOCKS5_REJECT_REASONS: Dict[int, str] = {
    socks5ReplyCodes.GENERAL_FAILURE: 'general SOCKS server failure',
    socks5ReplyCodes.NOT_ALLOWED: 'connection not allowed by ruleset',
    socks5ReplyCodes.NETWORK_UNREACHABLE: 'network unreachable',
    socks5ReplyCodes.HOST_UNREACHABLE: 'host unreachable',
    socks5ReplyCodes.CONNECTION_REFUSED: 'connection refused',
    socks5ReplyCodes.TTL_EXPIRED: 'TTL expired',
    socks5ReplyCodes.COMMAND_NOT_SUPPORTED: 'command not supported',
    socks5ReplyCodes.ADDRESS_TYPE_NOT_SUPPORTED: 'address type not supported',
}


def socks5_method_reason(method: int) -> str:
    """Describe why a method selected by a SOCKS5 server is unusable
    for a client that only offers "no authentication required"."""
    if method == socks5AuthMethods.NO_ACCEPTABLE_METHODS:
        return 'no acceptable authentication methods'
    if method == socks5AuthMethods.GSSAPI:
        return 'server selected GSSAPI authentication, which is not supported'
    if method == socks5AuthMethods.USERNAME_PASSWORD:
        return 'server selected username/password authentication, which is not supported'
    if 0x03 <= method <= 0x7F:
        return 'server selected IANA assigned method 0x%02x, which is not supported' % method
    if 0x80 <= method <= 0xFE:
        return 'server selected private method 0x%02x, which is not supported' % method
    return 'server selected a method that was not offered'

# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .destination import Socks5Destination, socks4_address
from .packet import (
    Socks4Packet, Socks4ReplyPacket, Socks5MethodSelectionPacket,
    Socks5MethodReplyPacket, Socks5RequestPacket, Socks5ReplyPacket,
)
from .operations import (
    Socks4Operations, socks4Operations, Socks4ReplyCodes, socks4ReplyCodes,
    Socks5Operations, socks5Operations, Socks5AddressTypes, socks5AddressTypes,
    Socks5AuthMethods, socks5AuthMethods, Socks5ReplyCodes, socks5ReplyCodes,
)
from .socks4 import Socks4Ident, Socks4NoIdent
from .socks5 import Socks5NoAuth


__all__ = [
    'Socks4Ident',
    'Socks4NoIdent',
    'Socks5NoAuth',
    'Socks5Destination',
    'socks4_address',
    'Socks4Packet',
    'Socks4ReplyPacket',
    'Socks5MethodSelectionPacket',
    'Socks5MethodReplyPacket',
    'Socks5RequestPacket',
    'Socks5ReplyPacket',
    'Socks4Operations',
    'socks4Operations',
    'Socks4ReplyCodes',
    'socks4ReplyCodes',
    'Socks5Operations',
    'socks5Operations',
    'Socks5AddressTypes',
    'socks5AddressTypes',
    'Socks5AuthMethods',
    'socks5AuthMethods',
    'Socks5ReplyCodes',
    'socks5ReplyCodes',
]

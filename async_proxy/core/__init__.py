# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .stream import ProxyStream, TcpStream
from .handshake import HandshakeDriver
from .constructor import ProxyConstructor
from .exception import (
    HandshakeError, HandshakeTimeout, UnexpectedEof, MalformedReply,
    ProxyRequestRejected, NoAcceptableAuthMethod, TransportIoError,
)


__all__ = [
    'ProxyStream',
    'TcpStream',
    'HandshakeDriver',
    'ProxyConstructor',
    'HandshakeError',
    'HandshakeTimeout',
    'UnexpectedEof',
    'MalformedReply',
    'ProxyRequestRejected',
    'NoAcceptableAuthMethod',
    'TransportIoError',
]

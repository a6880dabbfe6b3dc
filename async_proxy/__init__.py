# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .proxy import main, entry_point, tunnel, build_constructor
from .common.timeouts import ConnectionTimeouts, timeoutPhases
from .core import (
    ProxyStream, TcpStream, ProxyConstructor, HandshakeError, HandshakeTimeout,
    UnexpectedEof, MalformedReply, ProxyRequestRejected, NoAcceptableAuthMethod,
    TransportIoError,
)
from .socks import Socks4Ident, Socks4NoIdent, Socks5NoAuth, Socks5Destination


__all__ = [
    # Command line entry point
    'entry_point',
    'main',
    'tunnel',
    'build_constructor',
    # Handshake API
    'ConnectionTimeouts',
    'timeoutPhases',
    'ProxyStream',
    'TcpStream',
    'ProxyConstructor',
    'Socks4Ident',
    'Socks4NoIdent',
    'Socks5NoAuth',
    'Socks5Destination',
    # Errors
    'HandshakeError',
    'HandshakeTimeout',
    'UnexpectedEof',
    'MalformedReply',
    'ProxyRequestRejected',
    'NoAcceptableAuthMethod',
    'TransportIoError',
]

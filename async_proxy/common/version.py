# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
VERSION = (0, 2, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))


__all__ = '__version__', 'VERSION'

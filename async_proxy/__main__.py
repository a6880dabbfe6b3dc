# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .proxy import entry_point

if __name__ == '__main__':
    entry_point()

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
from typing import Tuple, Union


IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
Ipv4Like = Union[str, bytes, int, ipaddress.IPv4Address]
HostPort = Tuple[str, int]

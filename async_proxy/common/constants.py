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


NULL = b'\x00'
COLON = ':'
WHITESPACE = ' '

# Protocol variants selectable via --protocol flag
PROTOCOL_SOCKS4 = 'socks4'
PROTOCOL_SOCKS4_IDENT = 'socks4-ident'
PROTOCOL_SOCKS5 = 'socks5'
PROTOCOLS = (PROTOCOL_SOCKS4, PROTOCOL_SOCKS4_IDENT, PROTOCOL_SOCKS5)

# Defaults
DEFAULT_BUFFER_SIZE = 64 * 1024
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONNECT_TIMEOUT = DEFAULT_TIMEOUT
DEFAULT_WRITE_TIMEOUT = DEFAULT_TIMEOUT
DEFAULT_READ_TIMEOUT = DEFAULT_TIMEOUT
DEFAULT_TIMEOUTS = None
DEFAULT_IPV4_HOSTNAME = ipaddress.IPv4Address('127.0.0.1')
DEFAULT_PROXY_HOSTNAME = str(DEFAULT_IPV4_HOSTNAME)
DEFAULT_SOCKS_PORT = 1080
DEFAULT_PROXY_PORT = DEFAULT_SOCKS_PORT
DEFAULT_PROTOCOL = PROTOCOL_SOCKS5
DEFAULT_DESTINATION = None
DEFAULT_DESTINATION_PORT = 80
DEFAULT_IDENT = ''
DEFAULT_PAYLOAD = None
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_VERSION = False

# Maximum encoded length of a SOCKS5 domain name destination
MAX_DOMAIN_NAME_LENGTH = 255
MAX_PORT = 65535

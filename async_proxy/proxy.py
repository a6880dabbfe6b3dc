# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import asyncio
import logging
import argparse

from typing import Any, List, Optional

from .common.flag import flags, FlagParser
from .common.constants import (
    DEFAULT_VERSION, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FILE, DEFAULT_LOG_FORMAT,
    DEFAULT_PROXY_HOSTNAME, DEFAULT_PROXY_PORT, DEFAULT_PROTOCOL, PROTOCOLS,
    DEFAULT_DESTINATION, DEFAULT_DESTINATION_PORT, DEFAULT_IDENT, DEFAULT_PAYLOAD,
    DEFAULT_CONNECT_TIMEOUT, DEFAULT_WRITE_TIMEOUT, DEFAULT_READ_TIMEOUT,
    DEFAULT_TIMEOUTS, DEFAULT_BUFFER_SIZE, PROTOCOL_SOCKS4, PROTOCOL_SOCKS4_IDENT,
)
from .core import ProxyConstructor, TcpStream, HandshakeError
from .socks import Socks4Ident, Socks4NoIdent, Socks5NoAuth

logger = logging.getLogger(__name__)


flags.add_argument(
    '--version',
    '-v',
    action='store_true',
    default=DEFAULT_VERSION,
    help='Prints async_proxy version.',
)

flags.add_argument(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Valid options: DEBUG, INFO (default), WARNING, ERROR, CRITICAL. '
    'Both upper and lowercase values are allowed. '
    'You may also simply use the leading character e.g. --log-level d',
)

flags.add_argument(
    '--log-file',
    type=str,
    default=DEFAULT_LOG_FILE,
    help='Default: sys.stdout. Log file destination.',
)

flags.add_argument(
    '--log-format',
    type=str,
    default=DEFAULT_LOG_FORMAT,
    help='Log format for Python logger.',
)

flags.add_argument(
    '--proxy-hostname',
    type=str,
    default=DEFAULT_PROXY_HOSTNAME,
    help='Default: %s. SOCKS proxy server hostname.' % DEFAULT_PROXY_HOSTNAME,
)

flags.add_argument(
    '--proxy-port',
    type=int,
    default=DEFAULT_PROXY_PORT,
    help='Default: %d. SOCKS proxy server port.' % DEFAULT_PROXY_PORT,
)

flags.add_argument(
    '--protocol',
    type=str,
    choices=PROTOCOLS,
    default=DEFAULT_PROTOCOL,
    help='Default: %s. Handshake to perform with the proxy server.' % DEFAULT_PROTOCOL,
)

flags.add_argument(
    '--destination',
    type=str,
    default=DEFAULT_DESTINATION,
    help='Destination address the proxy server must connect to. '
    'IPv4 only for SOCKS4. IPv4, IPv6 or domain name for SOCKS5.',
)

flags.add_argument(
    '--destination-port',
    type=int,
    default=DEFAULT_DESTINATION_PORT,
    help='Default: %d. Destination port.' % DEFAULT_DESTINATION_PORT,
)

flags.add_argument(
    '--ident',
    type=str,
    default=DEFAULT_IDENT,
    help='Default: empty. User id sent with --protocol socks4-ident.',
)

flags.add_argument(
    '--connect-timeout',
    type=float,
    default=DEFAULT_CONNECT_TIMEOUT,
    help='Default: %g. Seconds to wait for connection with proxy server.' % DEFAULT_CONNECT_TIMEOUT,
)

flags.add_argument(
    '--write-timeout',
    type=float,
    default=DEFAULT_WRITE_TIMEOUT,
    help='Default: %g. Seconds to wait for each handshake write.' % DEFAULT_WRITE_TIMEOUT,
)

flags.add_argument(
    '--read-timeout',
    type=float,
    default=DEFAULT_READ_TIMEOUT,
    help='Default: %g. Seconds to wait for each handshake read.' % DEFAULT_READ_TIMEOUT,
)

flags.add_argument(
    '--timeouts',
    type=str,
    default=DEFAULT_TIMEOUTS,
    help='Default: None. Colon separated connect:write:read seconds. '
    'Overrides individual timeout flags.',
)

flags.add_argument(
    '--payload',
    type=str,
    default=DEFAULT_PAYLOAD,
    help='Default: None. Data to send through the tunnel once established. '
    'First chunk of response is printed to stdout.',
)


def build_constructor(args: argparse.Namespace) -> ProxyConstructor:
    """Returns the constructor selected by --protocol flag.

    Raises ``ValueError`` when destination can't be addressed
    by the selected protocol."""
    if args.destination is None:
        raise ValueError('--destination flag is required')
    if args.protocol == PROTOCOL_SOCKS4:
        return Socks4NoIdent(args.destination, args.destination_port, args.timeouts)
    if args.protocol == PROTOCOL_SOCKS4_IDENT:
        return Socks4Ident(
            args.destination, args.destination_port,
            args.ident, args.timeouts,
        )
    return Socks5NoAuth(args.destination, args.destination_port, args.timeouts)


async def tunnel(args: argparse.Namespace) -> int:
    """Connect to proxy server, perform handshake and optionally
    exchange --payload through the tunnel.  Returns process exit code."""
    try:
        constructor = build_constructor(args)
    except ValueError as e:
        logger.error('Invalid destination: %s', e)
        return 1

    try:
        stream = await TcpStream.open(args.proxy_hostname, args.proxy_port, args.timeouts)
    except HandshakeError as e:
        logger.error(
            'Unable to connect to proxy server %s:%d: %s',
            args.proxy_hostname, args.proxy_port, e,
        )
        return 1

    async with stream:
        try:
            await constructor.connect(stream)
        except HandshakeError as e:
            logger.error('Handshake with %s:%d failed: %s', args.proxy_hostname, args.proxy_port, e)
            return 1
        logger.info(
            'Connected to %s:%d through %s proxy %s:%d',
            args.destination, args.destination_port, args.protocol,
            args.proxy_hostname, args.proxy_port,
        )
        if args.payload:
            return await echo(stream, args)
    return 0


async def echo(stream: TcpStream, args: argparse.Namespace) -> int:
    try:
        await asyncio.wait_for(stream.write_all(args.payload), timeout=args.timeouts.write)
        response = await asyncio.wait_for(
            stream.read(DEFAULT_BUFFER_SIZE), timeout=args.timeouts.read,
        )
    except asyncio.TimeoutError:
        logger.error('Timed out exchanging payload with destination')
        return 1
    except OSError as e:
        logger.error('Unable to exchange payload with destination: %s', e)
        return 1
    sys.stdout.buffer.write(response)
    sys.stdout.flush()
    return 0


def main(input_args: Optional[List[str]] = None, **opts: Any) -> int:
    args = FlagParser.initialize(
        sys.argv[1:] if input_args is None else input_args, **opts,
    )
    return asyncio.run(tunnel(args))


def entry_point() -> None:
    sys.exit(main())

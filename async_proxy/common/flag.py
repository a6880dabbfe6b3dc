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
import argparse

from typing import Optional, List, Any, cast

from .utils import bytes_
from .timeouts import ConnectionTimeouts
from .logger import Logger

from .version import __version__


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.

    Best Practice:
    1. Define flags at the top of your module files.
    2. DO NOT add flags within your class `__init__` method OR
       within class methods.  It MAY result into runtime exception,
       especially if your class is initialized multiple times or if
       class method registering the flag gets invoked multiple times.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = argparse.ArgumentParser(
            description='async_proxy v%s' % __version__,
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        """Parse input_args and resolve final flag values.

        Keyword options take precedence over values parsed
        from input_args."""
        if input_args is None:
            input_args = []

        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        # Setup logging module
        try:
            Logger.setup(args.log_file, args.log_level, args.log_format)
        except ValueError as e:
            flags.parser.error(str(e))

        args.proxy_hostname = cast(
            str, opts.get('proxy_hostname', args.proxy_hostname),
        )
        args.proxy_port = cast(int, opts.get('proxy_port', args.proxy_port))
        args.protocol = cast(str, opts.get('protocol', args.protocol))
        args.destination = cast(
            Optional[str], opts.get('destination', args.destination),
        )
        args.destination_port = cast(
            int, opts.get('destination_port', args.destination_port),
        )
        args.ident = cast(bytes, bytes_(opts.get('ident', args.ident)))
        payload = opts.get('payload', args.payload)
        args.payload = cast(
            Optional[bytes], bytes_(payload) if payload is not None else None,
        )

        # --timeouts wins over individual --*-timeout flags
        timeouts = opts.get('timeouts', args.timeouts)
        try:
            if isinstance(timeouts, ConnectionTimeouts):
                args.timeouts = timeouts
            elif timeouts is not None:
                args.timeouts = ConnectionTimeouts.from_str(timeouts)
            else:
                args.timeouts = ConnectionTimeouts(
                    opts.get('connect_timeout', args.connect_timeout),
                    opts.get('write_timeout', args.write_timeout),
                    opts.get('read_timeout', args.read_timeout),
                )
        except ValueError as e:
            # Usage error, exits with status 2 like any other bad flag
            flags.parser.error(str(e))
        return args


flags = FlagParser()

# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import math
from typing import Dict, Iterable, NamedTuple

from .constants import COLON, DEFAULT_TIMEOUT
from .exception import InvalidTimeouts


TimeoutPhases = NamedTuple(
    'TimeoutPhases', [
        ('CONNECT', int),
        ('WRITE', int),
        ('READ', int),
    ],
)
timeoutPhases = TimeoutPhases(1, 2, 3)

TIMEOUT_PHASE_NAMES: Dict[int, str] = {
    timeoutPhases.CONNECT: 'connect',
    timeoutPhases.WRITE: 'write',
    timeoutPhases.READ: 'read',
}


_ConnectionTimeouts = NamedTuple(
    '_ConnectionTimeouts', [
        ('connect', float),
        ('write', float),
        ('read', float),
    ],
)


class ConnectionTimeouts(_ConnectionTimeouts):
    """Immutable triple of durations, in seconds, applied to each
    I/O phase of a proxy connection.

    ``connect`` bounds establishing the transport to the proxy server,
    ``write`` bounds every request write and ``read`` bounds every
    reply read performed during a handshake.  Each phase gets its own
    timeout, time left over from one phase is never carried to the next.
    """

    __slots__ = ()

    def __new__(cls, connect: float, write: float, read: float) -> 'ConnectionTimeouts':
        values = []
        for name, value in (('connect', connect), ('write', write), ('read', read)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    '%s timeout must be a number, got %r' % (name, value),
                )
            if not math.isfinite(value) or value < 0:
                raise ValueError(
                    '%s timeout must be finite and non-negative, got %r' % (name, value),
                )
            values.append(float(value))
        return super().__new__(cls, *values)

    @classmethod
    def _make(cls, iterable: Iterable[float]) -> 'ConnectionTimeouts':
        # Also used by _replace, both must go through validation
        return cls(*iterable)

    @classmethod
    def uniform(cls, timeout: float = DEFAULT_TIMEOUT) -> 'ConnectionTimeouts':
        return cls(timeout, timeout, timeout)

    @classmethod
    def from_str(cls, raw: str) -> 'ConnectionTimeouts':
        """Parse ``connect:write:read`` seconds, e.g. ``8:8:8`` or ``1.5:5:5``."""
        parts = raw.strip().split(COLON)
        if len(parts) != 3:
            raise InvalidTimeouts(raw)
        try:
            return cls(*(float(p) for p in parts))
        except ValueError as e:
            raise InvalidTimeouts(raw) from e

    def for_phase(self, phase: int) -> float:
        if phase == timeoutPhases.CONNECT:
            return self.connect
        if phase == timeoutPhases.WRITE:
            return self.write
        if phase == timeoutPhases.READ:
            return self.read
        raise ValueError('unknown timeout phase %r' % phase)

    def __str__(self) -> str:
        return COLON.join('%g' % t for t in self)

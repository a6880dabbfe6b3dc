# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       eof
       identd
"""
from typing import Any, Optional

from ..common.timeouts import TIMEOUT_PHASE_NAMES


class HandshakeError(Exception):
    """Top level :exc:`HandshakeError` exception class.

    Every failure surfaced by ``ProxyConstructor.connect`` inherits
    from this class.  None of them are retried internally and the
    stream is never closed on the caller's behalf.
    """

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'Reason unknown')


class HandshakeTimeout(HandshakeError):
    """Configured timeout of an I/O phase elapsed before the operation completed.

    Stream is left in an undefined protocol state and must not be reused.
    """

    def __init__(self, phase: int, timeout: float, **kwargs: Any) -> None:
        self.phase: int = phase
        self.timeout: float = timeout
        super().__init__(
            '%s timeout of %gs reached' % (
                TIMEOUT_PHASE_NAMES.get(phase, 'unknown'), timeout,
            ), **kwargs,
        )


class UnexpectedEof(HandshakeError):
    """Stream closed before the expected number of reply bytes arrived."""

    def __init__(self, expected: int, received: int, **kwargs: Any) -> None:
        self.expected: int = expected
        self.received: int = received
        super().__init__(
            'stream closed after %d of %d expected bytes' % (received, expected),
            **kwargs,
        )


class MalformedReply(HandshakeError):
    """Structurally invalid reply e.g. wrong version marker,
    unknown address type or unknown status code."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__('malformed reply: %s' % reason, **kwargs)


class ProxyRequestRejected(HandshakeError):
    """Well-formed reply explicitly denying the request.

    ``code`` is the protocol specific status byte, ``version`` the
    SOCKS version that produced it.
    """

    def __init__(self, version: int, code: int, reason: str, **kwargs: Any) -> None:
        self.version: int = version
        self.code: int = code
        self.reason: str = reason
        super().__init__(
            'SOCKS%d request rejected (0x%02x): %s' % (version, code, reason),
            **kwargs,
        )


class NoAcceptableAuthMethod(ProxyRequestRejected):
    """SOCKS5 server selected a method other than "no authentication required"."""

    def __init__(self, method: int, reason: str, **kwargs: Any) -> None:
        self.method: int = method
        super().__init__(5, method, reason, **kwargs)


class TransportIoError(HandshakeError):
    """Lower level I/O failure, e.g. connection reset.

    Underlying exception is available as ``cause`` and is also
    chained as ``__cause__``.
    """

    def __init__(self, cause: BaseException, **kwargs: Any) -> None:
        self.cause: BaseException = cause
        super().__init__('transport error: %s' % (str(cause) or cause.__class__.__name__), **kwargs)
